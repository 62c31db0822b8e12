# -*- coding: utf-8 -*-
"""
Парсер Wavefront OBJ/MTL – «коллаборатор» загрузчика сцен.

Отдаёт сырые данные в плоском виде:
    * Attributes – плоские float32‑массивы позиций, нормалей, texcoords
    * Shape      – тройки CornerIndex на грань + material id на грань
    * Material   – диффузный цвет (Kd) и имя диффузной текстуры (map_Kd)

Результат – ParseResult с флагом `ok` и текстом диагностики.
Ошибка открытия самого OBJ‑файла пробрасывается как OSError,
отрицательный индекс левее начала массива – как IndexOutOfRange.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import NamedTuple

import numpy as np

from objscene.errors import IndexOutOfRange
from objscene.utils.logger import logger

DEFAULT_DIFFUSE = (0.6, 0.6, 0.6)


class CornerIndex(NamedTuple):
    """(position, normal, texcoord) – 0‑based, -1 = атрибута нет."""
    vertex_index: int
    normal_index: int = -1
    texcoord_index: int = -1


@dataclass
class Attributes:
    vertices: np.ndarray = field(default_factory=lambda: np.zeros(0, np.float32))
    normals: np.ndarray = field(default_factory=lambda: np.zeros(0, np.float32))
    texcoords: np.ndarray = field(default_factory=lambda: np.zeros(0, np.float32))


@dataclass
class Shape:
    name: str = ""
    indices: list[CornerIndex] = field(default_factory=list)   # 3 на грань
    material_ids: list[int] = field(default_factory=list)      # 1 на грань

    @property
    def num_faces(self) -> int:
        return len(self.material_ids)

    def face(self, face_id: int) -> tuple[CornerIndex, CornerIndex, CornerIndex]:
        i = 3 * face_id
        return self.indices[i], self.indices[i + 1], self.indices[i + 2]


@dataclass
class Material:
    name: str = ""
    diffuse: tuple[float, float, float] = DEFAULT_DIFFUSE
    diffuse_texname: str = ""


@dataclass
class ParseResult:
    ok: bool
    diagnostic: str = ""
    attrib: Attributes = field(default_factory=Attributes)
    shapes: list[Shape] = field(default_factory=list)
    materials: list[Material] = field(default_factory=list)


class _SyntaxError(Exception):
    """Внутренний сигнал – строка OBJ/MTL некорректна."""


# ----------------------------------------------------------------------
# MTL
# ----------------------------------------------------------------------
def _floats(parts: list[str], count: int) -> list[float]:
    if len(parts) < count:
        raise _SyntaxError(f"expected {count} numbers, got {len(parts)}")
    try:
        return [float(p) for p in parts[:count]]
    except ValueError as exc:
        raise _SyntaxError(str(exc)) from exc


def parse_mtl(path: str) -> list[Material]:
    """Прочитать MTL‑файл.  Поддерживаются newmtl, Kd и map_Kd."""
    materials: list[Material] = []
    current = None
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        for lineno, line in enumerate(f, 1):
            parts = line.split()
            if not parts or parts[0].startswith("#"):
                continue
            key, args = parts[0], parts[1:]
            try:
                if key == "newmtl":
                    current = Material(name=" ".join(args))
                    materials.append(current)
                elif current is None:
                    continue
                elif key == "Kd":
                    current.diffuse = tuple(_floats(args, 3))
                elif key == "map_Kd" and args:
                    # опции (-s, -o, -bm ...) пропускаем – имя файла последнее
                    current.diffuse_texname = args[-1]
            except _SyntaxError as exc:
                raise _SyntaxError(f"{path}:{lineno}: {exc}") from exc
    return materials


# ----------------------------------------------------------------------
# OBJ
# ----------------------------------------------------------------------
def _resolve(token: str, count: int, what: str) -> int:
    """1‑based (или отрицательный относительный) индекс → 0‑based.  Пустой токен – -1."""
    if not token:
        return -1
    try:
        idx = int(token)
    except ValueError as exc:
        raise _SyntaxError(f"bad index '{token}'") from exc
    if idx > 0:
        return idx - 1
    if idx < 0:
        if count + idx < 0:
            raise IndexOutOfRange(f"relative {what} index {idx} out of range (have {count})")
        return count + idx
    raise _SyntaxError("index 0 is not allowed")


def _parse_corner(token: str, nv: int, nt: int, nn: int) -> CornerIndex:
    # форматы: v, v/vt, v//vn, v/vt/vn
    idx = token.split("/")
    p = _resolve(idx[0], nv, "position")
    if p < 0:
        raise _SyntaxError(f"missing position index in '{token}'")
    t = _resolve(idx[1], nt, "texcoord") if len(idx) > 1 else -1
    n = _resolve(idx[2], nn, "normal") if len(idx) > 2 else -1
    return CornerIndex(p, n, t)


def parse_obj(path: str, mtl_dir: str = "", triangulate: bool = True) -> ParseResult:
    """
    Разобрать OBJ‑файл.  Полигоны > 3 углов разбиваются веером
    (при `triangulate=True`), иначе считаются ошибкой.
    """
    verts: list[float] = []
    normals: list[float] = []
    texcoords: list[float] = []
    materials: list[Material] = []
    material_map: dict[str, int] = {}
    warnings: list[str] = []

    shapes: list[Shape] = []
    shape = Shape()
    material_id = -1

    def flush(name: str) -> Shape:
        if shape.num_faces:
            shapes.append(shape)
            return Shape(name=name)
        shape.name = name
        return shape

    with open(path, "r", encoding="utf-8", errors="replace") as f:
        lines = f.readlines()

    for lineno, line in enumerate(lines, 1):
        parts = line.split()
        if not parts or parts[0].startswith("#"):
            continue
        key, args = parts[0], parts[1:]
        try:
            if key == "v":
                verts.extend(_floats(args, 3))
            elif key == "vn":
                normals.extend(_floats(args, 3))
            elif key == "vt":
                # w‑компонента (если есть) отбрасывается
                texcoords.extend(_floats((args + ["0"])[:2], 2))
            elif key == "f":
                corners = [_parse_corner(tok, len(verts) // 3, len(texcoords) // 2,
                                         len(normals) // 3) for tok in args]
                if len(corners) < 3:
                    raise _SyntaxError(f"face with {len(corners)} corners")
                if len(corners) > 3 and not triangulate:
                    raise _SyntaxError(f"non-triangular face with {len(corners)} corners")
                v0 = corners[0]
                for i in range(1, len(corners) - 1):
                    shape.indices.extend((v0, corners[i], corners[i + 1]))
                    shape.material_ids.append(material_id)
            elif key in ("o", "g"):
                shape = flush(" ".join(args))
            elif key == "usemtl":
                name = " ".join(args)
                if name in material_map:
                    material_id = material_map[name]
                else:
                    warnings.append(f"material [ '{name}' ] not found in .mtl")
                    material_id = -1
            elif key == "mtllib":
                for lib in args:
                    mtl_path = os.path.join(mtl_dir, lib)
                    try:
                        loaded = parse_mtl(mtl_path)
                    except OSError:
                        warnings.append(f"Material file [ {mtl_path} ] not found.")
                        continue
                    for mat in loaded:
                        material_map.setdefault(mat.name, len(materials))
                        materials.append(mat)
        except _SyntaxError as exc:
            return ParseResult(ok=False, diagnostic=f"line {lineno}: {exc}")
        except IndexOutOfRange as exc:
            raise IndexOutOfRange(f"line {lineno}: {exc}") from exc

    if shape.num_faces:
        shapes.append(shape)

    for w in warnings:
        logger.warning(f"[ObjParser] {path}: {w}")

    attrib = Attributes(
        vertices=np.array(verts, dtype=np.float32),
        normals=np.array(normals, dtype=np.float32),
        texcoords=np.array(texcoords, dtype=np.float32),
    )
    return ParseResult(ok=True, diagnostic="\n".join(warnings), attrib=attrib,
                       shapes=shapes, materials=materials)
