# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: запись OBJ/MTL‑сцен во временный каталог,
считающий вызовы фейковый декодер картинок и PNG, записанные Pillow.
"""

from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from objscene.errors import TextureDecodeFailure


TRIANGLE_OBJ = """\
v 0 0 0
v 1 0 0
v 0 1 0
f 1 2 3
"""


# ----------------------------------------------------------------------
# Фейковый декодер – записывает каждый вызов
# ----------------------------------------------------------------------
class CountingDecoder:
    """
    Имитация декодера картинок.  Всегда отдаёт картинку 1×2 с разными
    строками; пути из `failing` – TextureDecodeFailure.
    """
    ROWS = np.array([[[10, 20, 30, 255]],
                     [[40, 50, 60, 255]]], dtype=np.uint8)   # (h=2, w=1, 4)

    def __init__(self, failing=()):
        self.calls: list[str] = []
        self.failing = set(failing)

    def __call__(self, path: str):
        self.calls.append(path)
        if Path(path).name in self.failing:
            raise TextureDecodeFailure(f"cannot decode {path}")
        return 1, 2, self.ROWS.copy()

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def decoder() -> CountingDecoder:
    return CountingDecoder(failing={"broken.png"})


# ----------------------------------------------------------------------
# Запись сцен
# ----------------------------------------------------------------------
@pytest.fixture
def write_scene(tmp_path):
    """
    Фабрика: write_scene(obj_text, mtl_text=None, name="scene.obj")
    возвращает путь к OBJ‑файлу строкой.
    """
    def _write(obj_text: str, mtl_text: str | None = None, name: str = "scene.obj") -> str:
        if mtl_text is not None:
            (tmp_path / "scene.mtl").write_text(mtl_text, encoding="utf-8")
        path = tmp_path / name
        path.write_text(obj_text, encoding="utf-8")
        return path.as_posix()
    return _write


@pytest.fixture
def triangle_scene(write_scene) -> str:
    return write_scene(TRIANGLE_OBJ)


@pytest.fixture
def png_file(tmp_path) -> Path:
    """PNG 1×2 (RGB): верхняя строка красная, нижняя зелёная."""
    rgb = np.array([[[255, 0, 0]],
                    [[0, 255, 0]]], dtype=np.uint8)
    path = tmp_path / "tex.png"
    Image.fromarray(rgb).save(path)
    return path
