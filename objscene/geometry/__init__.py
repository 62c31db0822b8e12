"""
Пакет geometry – меши, текстуры и модель.
"""

from objscene.geometry.mesh import TriangleMesh
from objscene.geometry.texture import Texture
from objscene.geometry.model import Model, merge_models, fold_bounds

__all__ = ["TriangleMesh", "Texture", "Model", "merge_models", "fold_bounds"]
