"""
Математический суб‑пакет: Box3f и генерация цветов.
"""

from objscene.math.box3 import Box3f
from objscene.math.color import make_rng, random_color

__all__ = ["Box3f", "make_rng", "random_color"]
