# -*- coding: utf-8 -*-
"""
Разбиение одного shape'а на меши по material id.

На каждый встреченный id – свой VertexDeduplicator и свой TriangleMesh.
Грани внутри меша идут в исходном порядке; разделы без вершин
отбрасываются.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from objscene.errors import IndexOutOfRange
from objscene.geometry.mesh import TriangleMesh
from objscene.loader.dedup import VertexDeduplicator
from objscene.loader.obj_parser import Attributes, Material, Shape
from objscene.math.color import random_color

NO_MATERIAL = -1


def material_ids_in_order(shape: Shape) -> list[int]:
    """Уникальные material id shape'а в порядке первого появления."""
    return list(dict.fromkeys(shape.material_ids))


def lookup_material(materials: Sequence[Material], material_id: int) -> Material:
    if material_id < 0 or material_id >= len(materials):
        raise IndexOutOfRange(
            f"material id {material_id} out of range (have {len(materials)})"
        )
    return materials[material_id]


def build_partition(shape: Shape,
                    material_id: int,
                    attrib: Attributes,
                    materials: Sequence[Material],
                    fallback_color=None,
                    padding: str = "repeat") -> TriangleMesh | None:
    """
    Построить меш из граней `shape` с данным `material_id`.
    Для id = -1 берётся `fallback_color` (заранее вытянутый из генератора).
    Возвращает None, если раздел пуст.
    """
    if material_id == NO_MATERIAL:
        diffuse = fallback_color if fallback_color is not None else (1.0, 1.0, 1.0)
        texture_path = ""
    else:
        material = lookup_material(materials, material_id)
        diffuse = material.diffuse
        texture_path = material.diffuse_texname

    dedup = VertexDeduplicator(attrib, padding)
    triangles = []
    for face_id, face_mat in enumerate(shape.material_ids):
        if face_mat != material_id:
            continue
        a, b, c = shape.face(face_id)
        triangles.append((dedup.add(a), dedup.add(b), dedup.add(c)))

    if len(dedup) == 0:
        return None

    name = f"{shape.name or 'shape'}#{material_id}"
    return dedup.build_mesh(triangles, diffuse=diffuse,
                            diffuse_texture_path=texture_path, name=name)


class MeshPartitioner:
    """Разбивает shape'ы на меши; генератор цветов передаётся явно."""

    def __init__(self,
                 attrib: Attributes,
                 materials: Sequence[Material],
                 rng: np.random.Generator,
                 padding: str = "repeat"):
        self.attrib = attrib
        self.materials = materials
        self.rng = rng
        self.padding = padding

    def jobs(self, shapes: Sequence[Shape]) -> list[tuple[Shape, int, np.ndarray | None]]:
        """
        Список разделов (shape, material_id, fallback_color) в итоговом
        порядке.  Цвета тянутся здесь, чтобы порядок не зависел от потоков.
        """
        result = []
        for shape in shapes:
            for material_id in material_ids_in_order(shape):
                color = random_color(self.rng) if material_id == NO_MATERIAL else None
                result.append((shape, material_id, color))
        return result

    def build(self, shape: Shape, material_id: int, fallback_color=None) -> TriangleMesh | None:
        return build_partition(shape, material_id, self.attrib, self.materials,
                               fallback_color, self.padding)

    def partition(self, shape: Shape) -> list[TriangleMesh]:
        """Все непустые меши одного shape'а."""
        meshes = []
        for _, material_id, color in self.jobs([shape]):
            mesh = self.build(shape, material_id, color)
            if mesh is not None:
                meshes.append(mesh)
        return meshes
