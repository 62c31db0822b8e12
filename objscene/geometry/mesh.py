# objscene/geometry/mesh.py
"""
Треугольный меш с одним диффузным цветом / одной текстурой.

Массивы атрибутов параллельны массиву позиций: `normal` и `texcoord`
либо пусты, либо той же длины, что и `vertex`.
"""

from __future__ import annotations

import numpy as np

# 8 углов единичного куба и 12 треугольников (порядок – как у исходного тулкита)
_UNIT_CUBE_CORNERS = np.array(
    [[0, 0, 0], [1, 0, 0], [0, 1, 0], [1, 1, 0],
     [0, 0, 1], [1, 0, 1], [0, 1, 1], [1, 1, 1]],
    dtype=np.float32,
)
_UNIT_CUBE_INDICES = np.array(
    [0, 1, 3, 2, 3, 0, 5, 7, 6, 5, 6, 4, 0, 4, 5, 0, 5, 1,
     2, 3, 7, 2, 7, 6, 1, 5, 7, 1, 7, 3, 4, 0, 2, 4, 2, 6],
    dtype=np.int32,
).reshape(-1, 3)


def _as_array(data, width: int, dtype) -> np.ndarray:
    if data is None:
        return np.zeros((0, width), dtype=dtype)
    return np.asarray(data, dtype=dtype).reshape(-1, width)


class TriangleMesh:
    """Геометрия одного (shape, material)‑раздела."""

    def __init__(self,
                 vertex=None,
                 normal=None,
                 texcoord=None,
                 index=None,
                 diffuse=(1.0, 1.0, 1.0),
                 diffuse_texture_path: str = "",
                 name: str = "TriangleMesh"):
        self.name = name
        self.vertex = _as_array(vertex, 3, np.float32)
        self.normal = _as_array(normal, 3, np.float32)
        self.texcoord = _as_array(texcoord, 2, np.float32)
        self.index = _as_array(index, 3, np.int32)
        self.diffuse = np.array(diffuse, dtype=np.float32).reshape(3)
        self.diffuse_texture_path = diffuse_texture_path
        self._frozen = False
        self._diffuse_texture: int | None = None
        self.validate()

    # -----------------------------------------------------------------
    @property
    def diffuse_texture(self) -> int | None:
        """Хэндл в Model.textures; None – текстуры нет (или не загрузилась)."""
        return self._diffuse_texture

    @diffuse_texture.setter
    def diffuse_texture(self, handle: int | None) -> None:
        if self._frozen:
            raise RuntimeError(f"{self.name} belongs to a model and is read-only")
        self._diffuse_texture = handle

    @property
    def num_vertices(self) -> int:
        return len(self.vertex)

    @property
    def num_triangles(self) -> int:
        return len(self.index)

    def is_empty(self) -> bool:
        return self.num_vertices == 0

    def validate(self) -> None:
        """Проверить инварианты: массивы не «рваные», индексы в пределах."""
        n = self.num_vertices
        if len(self.normal) not in (0, n):
            raise ValueError(f"normal array has {len(self.normal)} entries, expected 0 or {n}")
        if len(self.texcoord) not in (0, n):
            raise ValueError(f"texcoord array has {len(self.texcoord)} entries, expected 0 or {n}")
        if len(self.index) and (self.index.min() < 0 or self.index.max() >= n):
            raise ValueError(f"triangle index out of range for {n} vertices")

    # -----------------------------------------------------------------
    # Процедурная геометрия
    # -----------------------------------------------------------------
    def add_cube(self, center, size) -> None:
        """Добавить куб, выровненный по осям, с центром `center` и размером `size`."""
        center = np.asarray(center, dtype=np.float32).reshape(3)
        size = np.asarray(size, dtype=np.float32).reshape(3)
        self.add_unit_cube(np.diag(size), center - 0.5 * size)

    def add_unit_cube(self, linear, offset) -> None:
        """Добавить единичный куб, преобразованный аффинно: p' = linear @ p + offset."""
        linear = np.asarray(linear, dtype=np.float32).reshape(3, 3)
        offset = np.asarray(offset, dtype=np.float32).reshape(3)
        if self._frozen:
            raise RuntimeError(f"{self.name} belongs to a model and is read-only")
        first = self.num_vertices
        corners = _UNIT_CUBE_CORNERS @ linear.T + offset

        self.vertex = np.concatenate([self.vertex, corners]).astype(np.float32)
        # атрибуты без значений у куба добиваем нулями
        if len(self.normal):
            self.normal = np.concatenate([self.normal, np.zeros((8, 3), np.float32)])
        if len(self.texcoord):
            self.texcoord = np.concatenate([self.texcoord, np.zeros((8, 2), np.float32)])
        self.index = np.concatenate([self.index, _UNIT_CUBE_INDICES + first]).astype(np.int32)

    # -----------------------------------------------------------------
    def copy(self) -> "TriangleMesh":
        """Глубокая копия (новый владелец массивов, всегда изменяемая)."""
        mesh = TriangleMesh(self.vertex.copy(), self.normal.copy(), self.texcoord.copy(),
                            self.index.copy(), self.diffuse.copy(),
                            self.diffuse_texture_path, self.name)
        mesh.diffuse_texture = self.diffuse_texture
        return mesh

    def freeze(self) -> None:
        self._frozen = True
        for arr in (self.vertex, self.normal, self.texcoord, self.index, self.diffuse):
            arr.flags.writeable = False

    def __repr__(self):
        return (f"TriangleMesh({self.name!r}, vertices={self.num_vertices}, "
                f"triangles={self.num_triangles})")
