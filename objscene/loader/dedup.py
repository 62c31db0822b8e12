# -*- coding: utf-8 -*-
"""
Дедупликация вершин одного (shape, material)‑раздела.

Ключ – CornerIndex целиком (точное совпадение тройки индексов, без
сравнения координат).  Словарь живёт ровно столько, сколько строится
один меш, и выбрасывается вместе с дедупликатором.
"""

from __future__ import annotations

import numpy as np

from objscene.errors import IndexOutOfRange
from objscene.geometry.mesh import TriangleMesh
from objscene.loader.obj_parser import Attributes, CornerIndex

PADDING_MODES = ("repeat", "zero")


def fetch(flat: np.ndarray, index: int, width: int, what: str) -> list[float]:
    """Элемент `index` плоского массива по `width` float'ов – с проверкой границ."""
    count = len(flat) // width
    if index < 0 or index >= count:
        raise IndexOutOfRange(f"{what} index {index} out of range (have {count})")
    start = index * width
    return flat[start:start + width].tolist()


class VertexDeduplicator:
    """Отображает CornerIndex → локальный индекс вершины и копит атрибуты."""

    def __init__(self, attrib: Attributes, padding: str = "repeat"):
        if padding not in PADDING_MODES:
            raise ValueError(f"Unknown padding mode: {padding}")
        self.attrib = attrib
        self.padding = padding
        self._known: dict[CornerIndex, int] = {}
        self.vertex: list[list[float]] = []
        self.normal: list[list[float]] = []
        self.texcoord: list[list[float]] = []

    def __len__(self) -> int:
        return len(self.vertex)

    def __contains__(self, idx: CornerIndex) -> bool:
        return idx in self._known

    # -----------------------------------------------------------------
    def add(self, idx: CornerIndex) -> int:
        """Вернуть индекс вершины, добавив её при первом обращении."""
        known = self._known.get(idx)
        if known is not None:
            return known

        # всё читаем до изменения состояния, чтобы ошибка не оставила «рваных» массивов
        position = fetch(self.attrib.vertices, idx.vertex_index, 3, "position")
        normal = (fetch(self.attrib.normals, idx.normal_index, 3, "normal")
                  if idx.normal_index >= 0 else None)
        texcoord = (fetch(self.attrib.texcoords, idx.texcoord_index, 2, "texcoord")
                    if idx.texcoord_index >= 0 else None)

        new_id = len(self.vertex)
        self._known[idx] = new_id
        self.vertex.append(position)
        if normal is not None:
            self._pad(self.normal, normal)
        if texcoord is not None:
            self._pad(self.texcoord, texcoord)

        self._resize(self.texcoord, 2)
        self._resize(self.normal, 3)
        return new_id

    def _pad(self, array: list, value: list[float]) -> None:
        # repeat: предыдущие вершины без атрибута получают новое значение
        filler = value if self.padding == "repeat" else [0.0] * len(value)
        while len(array) < len(self.vertex) - 1:
            array.append(list(filler))
        array.append(value)

    def _resize(self, array: list, width: int) -> None:
        if not array:
            return
        n = len(self.vertex)
        del array[n:]
        while len(array) < n:
            array.append([0.0] * width)

    # -----------------------------------------------------------------
    def build_mesh(self, triangles: list[tuple[int, int, int]], **kwargs) -> TriangleMesh:
        """Собрать TriangleMesh из накопленных атрибутов."""
        return TriangleMesh(
            vertex=np.array(self.vertex, dtype=np.float32).reshape(-1, 3),
            normal=np.array(self.normal, dtype=np.float32).reshape(-1, 3),
            texcoord=np.array(self.texcoord, dtype=np.float32).reshape(-1, 2),
            index=np.array(triangles, dtype=np.int32).reshape(-1, 3),
            **kwargs,
        )
