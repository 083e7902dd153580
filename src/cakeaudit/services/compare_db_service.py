from __future__ import annotations

import sys

from ..config import EffectiveConfig
from ..formats import codec_for_path
from ..loader import load_recipes
from ..recipe_diff import diff_recipes
from ..report import render_report


def compare_databases(old_path: str, new_path: str, cfg: EffectiveConfig, verbose: bool = False) -> str:
    # Both extensions are checked before either file is read.
    old_codec = codec_for_path(old_path)
    new_codec = codec_for_path(new_path)

    old = load_recipes(old_path, duplicates=cfg.duplicates)
    new = load_recipes(new_path, duplicates=cfg.duplicates)
    if verbose:
        print(f"old: {old_path} read as {old_codec.name} ({len(old.cakes)} cakes)", file=sys.stderr)
        print(f"new: {new_path} read as {new_codec.name} ({len(new.cakes)} cakes)", file=sys.stderr)

    changes = diff_recipes(old, new)
    if verbose:
        print(f"{len(changes)} changes", file=sys.stderr)
    return render_report(changes, cfg.report_format)
