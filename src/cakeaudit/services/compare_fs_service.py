from __future__ import annotations

import sys

from ..config import EffectiveConfig
from ..path_diff import diff_paths, read_lines


def compare_file_lists(old_path: str, new_path: str, cfg: EffectiveConfig, verbose: bool = False) -> list[str]:
    old_lines = read_lines(old_path, cfg.encoding, label="old")
    new_lines = read_lines(new_path, cfg.encoding, label="new")
    if verbose:
        print(f"old: {old_path} ({len(old_lines)} lines)", file=sys.stderr)
        print(f"new: {new_path} ({len(new_lines)} lines)", file=sys.stderr)
    return diff_paths(old_lines, new_lines)
