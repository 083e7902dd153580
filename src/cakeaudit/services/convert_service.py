from __future__ import annotations

import sys

from ..config import EffectiveConfig
from ..formats import codec_for_path, opposite_codec
from ..loader import load_recipes


def convert_database(path: str, cfg: EffectiveConfig, verbose: bool = False) -> str:
    source = codec_for_path(path)
    target = opposite_codec(source)
    collection = load_recipes(path, duplicates=cfg.duplicates)
    if verbose:
        print(f"{path}: {len(collection.cakes)} cakes read as {source.name}, writing {target.name}", file=sys.stderr)
    return target.encode(collection, indent=cfg.indent)
