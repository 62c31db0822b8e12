# objscene/__main__.py
"""
Консольная утилита: загрузить сцену и напечатать сводку.

    python -m objscene models/sponza.obj --workers 4
"""

import argparse
import logging
import sys

from objscene.errors import SceneLoadError
from objscene.loader.scene_loader import SceneLoader
from objscene.utils.config import Config
from objscene.utils.logger import logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="objscene", description="Load an OBJ scene and print a summary.")
    parser.add_argument("path", help="path to the .obj file")
    parser.add_argument("--config", help="JSON config file (created with defaults if missing)")
    parser.add_argument("--no-textures", action="store_true", help="skip texture decoding")
    parser.add_argument("--workers", type=int, default=None, help="threads for partition building")
    parser.add_argument("--seed", type=int, default=None, help="seed for fallback colors")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def make_loader(args) -> SceneLoader:
    overrides = {}
    if args.no_textures:
        overrides["load_textures"] = False
    if args.workers is not None:
        overrides["workers"] = args.workers
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.config:
        return SceneLoader.from_config(Config(args.config), **overrides)
    return SceneLoader(**overrides)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logger.setLevel(logging.DEBUG)

    try:
        model = make_loader(args).load(args.path)
    except SceneLoadError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"meshes:    {len(model.meshes)}")
    print(f"vertices:  {model.num_vertices}")
    print(f"triangles: {model.num_triangles}")
    print(f"textures:  {len(model.textures)}")
    print(f"bounds:    {model.bounds!r}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
