# -*- coding: utf-8 -*-
"""
Сборка сцены: OBJ‑файл → Model.

1️⃣  Парсер (коллаборатор) читает OBJ + MTL из каталога сцены.
2️⃣  Каждый shape разбивается на меши по material id.
3️⃣  Для мешей с непустым map_Kd лениво грузятся текстуры.
4️⃣  По всем вершинам сворачивается bounding box.

Любая фатальная ошибка (IOFailure / ParseFailure / IndexOutOfRange)
прерывает загрузку целиком – частично собранная модель наружу не уходит.
"""

from __future__ import annotations

import os
from typing import Callable

from objscene.errors import IndexOutOfRange, IOFailure, ParseFailure
from objscene.geometry.model import Model
from objscene.loader.obj_parser import parse_obj
from objscene.loader.partition import MeshPartitioner
from objscene.loader.texture_loader import Decoder, TextureLoader, decode_image
from objscene.math.color import make_rng
from objscene.multithread.task_pool import TaskPool
from objscene.utils.config import Config, DEFAULT_CONFIG
from objscene.utils.logger import logger
from objscene.utils.profiler import Profiler

Parser = Callable[..., object]


def model_dir(path: str) -> str:
    """Всё до последнего разделителя пути (пустая строка, если его нет)."""
    cut = max(path.rfind("/"), path.rfind("\\"))
    return path[:cut] if cut >= 0 else ""


class SceneLoader:
    """Загрузчик OBJ‑сцен.  Один объект можно использовать для многих load()."""

    def __init__(self,
                 parser: Parser = parse_obj,
                 decoder: Decoder = decode_image,
                 load_textures: bool = True,
                 flip_textures: bool = True,
                 seed: int | None = 0,
                 padding: str = "repeat",
                 workers: int = 1):
        self.parser = parser
        self.decoder = decoder
        self.load_textures = load_textures
        self.flip_textures = flip_textures
        self.seed = seed
        self.padding = padding
        self.workers = max(1, int(workers))

    @classmethod
    def from_config(cls, config: Config, **overrides) -> "SceneLoader":
        kwargs = dict(
            load_textures=config.texture_option("enabled"),
            flip_textures=config.texture_option("flip_rows"),
            seed=config.get("random_seed", DEFAULT_CONFIG["random_seed"]),
            padding=config.get("attribute_padding", DEFAULT_CONFIG["attribute_padding"]),
            workers=config.get("workers", DEFAULT_CONFIG["workers"]),
        )
        kwargs.update(overrides)
        return cls(**kwargs)

    # -----------------------------------------------------------------
    def load(self, path: str) -> Model:
        with Profiler(f"load {path}"):
            return self._load(path)

    def _load(self, path: str) -> Model:
        base_dir = model_dir(path)

        if not os.path.isfile(path):
            raise IOFailure(f"Could not read OBJ model from {path} : file not found")
        try:
            result = self.parser(path, base_dir, triangulate=True)
        except OSError as exc:
            raise IOFailure(f"Could not read OBJ model from {path} : {exc}") from exc
        except IndexOutOfRange as exc:
            raise IndexOutOfRange(f"Could not read OBJ model from {path} : {exc}") from exc
        if not result.ok:
            raise ParseFailure(
                f"Could not read OBJ model from {path} : {result.diagnostic}",
                diagnostic=result.diagnostic,
            )

        logger.info(f"[SceneLoader] Done loading obj file - found {len(result.shapes)} "
                    f"shapes with {len(result.materials)} materials")

        partitioner = MeshPartitioner(result.attrib, result.materials,
                                      make_rng(self.seed), self.padding)
        try:
            built = self._build_meshes(partitioner, result.shapes)
        except IndexOutOfRange as exc:
            raise IndexOutOfRange(f"Could not read OBJ model from {path} : {exc}") from exc
        meshes = [m for m in built if m is not None]

        textures = TextureLoader(self.decoder, flip=self.flip_textures)
        if self.load_textures:
            for mesh in meshes:
                if mesh.diffuse_texture_path:
                    mesh.diffuse_texture = textures.load(mesh.diffuse_texture_path, base_dir)

        model = Model(meshes, textures.textures, base_dir)
        logger.info(f"[SceneLoader] created a total of {len(model.meshes)} meshes")
        return model

    def _build_meshes(self, partitioner: MeshPartitioner, shapes):
        jobs = partitioner.jobs(shapes)
        if self.workers == 1 or len(jobs) < 2:
            return [partitioner.build(*job) for job in jobs]
        with TaskPool(max_workers=self.workers) as pool:
            return pool.map_ordered(partitioner.build, jobs)


def load_obj(path: str, **kwargs) -> Model:
    """Короткая форма: SceneLoader(**kwargs).load(path)."""
    return SceneLoader(**kwargs).load(path)
