"""
Пакет loader – парсер OBJ, дедупликация вершин, разбиение по материалам,
текстуры и сборка модели.
"""

from objscene.loader.obj_parser import (
    Attributes, CornerIndex, Material, ParseResult, Shape, parse_obj, parse_mtl,
)
from objscene.loader.dedup import VertexDeduplicator
from objscene.loader.partition import MeshPartitioner, build_partition
from objscene.loader.texture_loader import TextureLoader, decode_image, flip_rows
from objscene.loader.scene_loader import SceneLoader, load_obj, model_dir

__all__ = [
    "Attributes", "CornerIndex", "Material", "ParseResult", "Shape",
    "parse_obj", "parse_mtl",
    "VertexDeduplicator",
    "MeshPartitioner", "build_partition",
    "TextureLoader", "decode_image", "flip_rows",
    "SceneLoader", "load_obj", "model_dir",
]
