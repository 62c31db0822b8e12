"""
Псевдослучайные цвета для мешей без материала.
Генератор передаётся явно, чтобы тесты могли зафиксировать последовательность.
"""

import numpy as np


def make_rng(seed: int | None = 0) -> np.random.Generator:
    return np.random.default_rng(seed)


def random_color(rng: np.random.Generator) -> np.ndarray:
    """RGB в диапазоне [0.2, 1.0) – слишком тёмные цвета плохо видно."""
    return rng.uniform(0.2, 1.0, size=3).astype(np.float32)
