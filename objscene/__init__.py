"""
objscene – импорт OBJ/MTL‑сцен в готовую для рендера геометрию:
меши по материалам с дедуплицированными вершинами, текстуры и
общий bounding box.
"""

from objscene.utils import logger, Config
from objscene.errors import (
    SceneLoadError, IOFailure, ParseFailure, IndexOutOfRange, TextureDecodeFailure,
)
from objscene.math import Box3f
from objscene.geometry import TriangleMesh, Texture, Model, merge_models
from objscene.loader import SceneLoader, load_obj

__version__ = "1.0.0"

__all__ = [
    "logger",
    "Config",
    "SceneLoadError",
    "IOFailure",
    "ParseFailure",
    "IndexOutOfRange",
    "TextureDecodeFailure",
    "Box3f",
    "TriangleMesh",
    "Texture",
    "Model",
    "merge_models",
    "SceneLoader",
    "load_obj",
]
