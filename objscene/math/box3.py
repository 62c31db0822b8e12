# -*- coding: utf-8 -*-
"""
Axis‑aligned bounding box (float32) на базе NumPy.
Пустой бокс: lower = +inf, upper = -inf – первый extend() задаёт оба угла.
"""

from __future__ import annotations

import numpy as np


class Box3f:
    __slots__ = ("lower", "upper", "_frozen")

    def __init__(self, lower=None, upper=None):
        if lower is None or upper is None:
            self.lower = np.full(3, np.inf, dtype=np.float32)
            self.upper = np.full(3, -np.inf, dtype=np.float32)
        else:
            self.lower = np.array(lower, dtype=np.float32).reshape(3)
            self.upper = np.array(upper, dtype=np.float32).reshape(3)
        self._frozen = False

    # -------------------------------------------------
    # расширение (только растёт, никогда не сжимается)
    # -------------------------------------------------
    def extend(self, point) -> "Box3f":
        if self._frozen:
            raise RuntimeError("Box3f is frozen")
        p = np.asarray(point, dtype=np.float32).reshape(3)
        np.minimum(self.lower, p, out=self.lower)
        np.maximum(self.upper, p, out=self.upper)
        return self

    def extend_points(self, points: np.ndarray) -> "Box3f":
        """Расширить сразу массивом точек формы (N, 3)."""
        pts = np.asarray(points, dtype=np.float32).reshape(-1, 3)
        if len(pts) == 0:
            return self
        self.extend(pts.min(axis=0))
        self.extend(pts.max(axis=0))
        return self

    def union(self, other: "Box3f") -> "Box3f":
        """Новый бокс, содержащий оба (исходные не меняются)."""
        box = Box3f()
        if not self.is_empty():
            box.extend(self.lower).extend(self.upper)
        if not other.is_empty():
            box.extend(other.lower).extend(other.upper)
        return box

    def freeze(self) -> None:
        self._frozen = True
        self.lower.flags.writeable = False
        self.upper.flags.writeable = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    # -------------------------------------------------
    # вспомогательные методы
    # -------------------------------------------------
    def is_empty(self) -> bool:
        return bool(np.any(self.lower > self.upper))

    def center(self) -> np.ndarray:
        return (self.lower + self.upper) * 0.5

    def span(self) -> np.ndarray:
        return self.upper - self.lower

    def world_scale(self) -> float:
        """Длина диагонали – «масштаб мира» для камеры."""
        if self.is_empty():
            return 0.0
        return float(np.linalg.norm(self.span()))

    def __repr__(self):
        lo, hi = self.lower, self.upper
        return (f"Box3f(({lo[0]:.3f}, {lo[1]:.3f}, {lo[2]:.3f}), "
                f"({hi[0]:.3f}, {hi[1]:.3f}, {hi[2]:.3f}))")
