# -*- coding: utf-8 -*-
"""
Загрузка диффузных текстур PNG/JPG/... через Pillow с кэшем по «сырому» пути.

* Ключ кэша – строка из MTL как есть (без нормализации и разрешения).
* Пустой путь – «текстуры нет», кэш и декодер не трогаются.
* Неудача декодирования тоже кэшируется – повторной попытки не будет.
* Строки картинки переворачиваются сверху вниз (ориентация декодера).
"""

from __future__ import annotations

from typing import Callable

import numpy as np
from PIL import Image, UnidentifiedImageError

from objscene.errors import TextureDecodeFailure
from objscene.geometry.texture import Texture
from objscene.utils.logger import logger

Decoder = Callable[[str], tuple]


def decode_image(path: str) -> tuple[int, int, np.ndarray]:
    """Декодировать картинку Pillow'ом, всегда приводя к RGBA8."""
    try:
        with Image.open(path) as img:
            rgba = img.convert("RGBA")
    except (OSError, UnidentifiedImageError, Image.DecompressionBombError) as exc:
        raise TextureDecodeFailure(f"Could not load texture from {path}: {exc}") from exc
    w, h = rgba.size
    pixels = np.array(rgba, dtype=np.uint8).reshape(h, w, 4)
    return w, h, pixels


def flip_rows(pixels: np.ndarray) -> np.ndarray:
    """Поменять местами строки y и h-1-y (до середины, in place)."""
    h = pixels.shape[0]
    for y in range(h // 2):
        mirrored = h - 1 - y
        pixels[[y, mirrored]] = pixels[[mirrored, y]]
    return pixels


def resolve_texture_path(raw_path: str, base_dir: str) -> str:
    file_name = raw_path.replace("\\", "/")
    if not base_dir:
        return file_name
    return base_dir.rstrip("/") + "/" + file_name


class TextureLoader:
    """Кеширующий загрузчик текстур – один объект на вызов загрузки сцены."""

    def __init__(self, decoder: Decoder = decode_image, flip: bool = True):
        self.decoder = decoder
        self.flip = flip
        self.textures: list[Texture] = []
        self._cache: dict[str, int | None] = {}

    def load(self, path: str, base_dir: str = "") -> int | None:
        """Вернуть хэндл (индекс в `textures`) или None при неудаче."""
        if path == "":
            return None
        if path in self._cache:
            return self._cache[path]

        file_name = resolve_texture_path(path, base_dir)
        handle = None
        try:
            w, h, pixels = self.decoder(file_name)
            pixels = np.array(pixels, dtype=np.uint8).reshape(h, w, 4)
            if self.flip:
                flip_rows(pixels)
            texture = Texture(w, h, pixels, path=file_name)
        except (TextureDecodeFailure, ValueError) as exc:
            logger.error(f"[TextureLoader] Could not load texture from {file_name}: {exc}")
        else:
            handle = len(self.textures)
            self.textures.append(texture)
            logger.debug(f"[TextureLoader] Loaded texture {file_name} ({w}x{h})")

        self._cache[path] = handle
        return handle
