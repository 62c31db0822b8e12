"""
Модель – единственный владелец своих мешей, текстур и bounding box'а.
После сборки все массивы переводятся в read‑only.
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from objscene.geometry.mesh import TriangleMesh
from objscene.geometry.texture import Texture
from objscene.math.box3 import Box3f


def fold_bounds(meshes: Iterable[TriangleMesh]) -> Box3f:
    """Свернуть bounding box по всем вершинам всех мешей."""
    bounds = Box3f()
    for mesh in meshes:
        bounds.extend_points(mesh.vertex)
    return bounds


class Model:
    """Объединяет несколько TriangleMesh‑ей и их текстуры в один объект."""

    def __init__(self,
                 meshes: Sequence[TriangleMesh],
                 textures: Sequence[Texture] = (),
                 base_dir: str = ""):
        self.meshes: tuple[TriangleMesh, ...] = tuple(meshes)
        self.textures: tuple[Texture, ...] = tuple(textures)
        self.base_dir = base_dir
        self.bounds = fold_bounds(self.meshes)

        for mesh in self.meshes:
            mesh.freeze()
        for tex in self.textures:
            tex.freeze()
        self.bounds.freeze()

    # -----------------------------------------------------------------
    @property
    def num_vertices(self) -> int:
        return sum(m.num_vertices for m in self.meshes)

    @property
    def num_triangles(self) -> int:
        return sum(m.num_triangles for m in self.meshes)

    def texture_for(self, mesh: TriangleMesh) -> Texture | None:
        if mesh.diffuse_texture is None:
            return None
        return self.textures[mesh.diffuse_texture]

    # -----------------------------------------------------------------
    # Производные модели (исходная не меняется)
    # -----------------------------------------------------------------
    def translated(self, offset) -> "Model":
        """Новая модель, все вершины которой сдвинуты на `offset`."""
        offset = np.asarray(offset, dtype=np.float32).reshape(3)
        meshes = []
        for mesh in self.meshes:
            m = mesh.copy()
            m.vertex += offset
            meshes.append(m)
        return Model(meshes, [t.copy() for t in self.textures], self.base_dir)

    def __repr__(self):
        return (f"Model(meshes={len(self.meshes)}, textures={len(self.textures)}, "
                f"bounds={self.bounds!r})")


def merge_models(*models: Model, extra_meshes: Iterable[TriangleMesh] = ()) -> Model:
    """
    Склеить несколько моделей в новую.  Меши и текстуры копируются,
    хэндлы текстур сдвигаются на число уже добавленных текстур.
    """
    meshes: list[TriangleMesh] = []
    textures: list[Texture] = []
    for model in models:
        base = len(textures)
        textures.extend(t.copy() for t in model.textures)
        for mesh in model.meshes:
            m = mesh.copy()
            if m.diffuse_texture is not None:
                m.diffuse_texture += base
            meshes.append(m)
    meshes.extend(m.copy() for m in extra_meshes)
    base_dir = models[0].base_dir if models else ""
    return Model(meshes, textures, base_dir)
