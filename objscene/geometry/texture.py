"""
Текстура в памяти – RGBA8, строки уже перевёрнуты в ожидаемую ориентацию.
"""

import numpy as np


class Texture:
    """Декодированная картинка: width × height пикселей RGBA8."""

    def __init__(self, width: int, height: int, pixels: np.ndarray, path: str = ""):
        if width <= 0 or height <= 0:
            raise ValueError(f"Texture size must be positive, got {width}x{height}")
        pixels = np.asarray(pixels, dtype=np.uint8)
        if pixels.size != width * height * 4:
            raise ValueError(
                f"Texture buffer has {pixels.size} bytes, expected {width * height * 4}"
            )
        self.width = int(width)
        self.height = int(height)
        self.pixels = pixels.reshape(height, width, 4)
        self.path = path

    @property
    def resolution(self) -> tuple[int, int]:
        return self.width, self.height

    def copy(self) -> "Texture":
        return Texture(self.width, self.height, self.pixels.copy(), self.path)

    def freeze(self) -> None:
        self.pixels.flags.writeable = False

    def __repr__(self):
        return f"Texture({self.path!r}, {self.width}x{self.height})"
