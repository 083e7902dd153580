from __future__ import annotations

from pathlib import Path

from .domain import RecipeCollection, find_duplicate_names
from .errors import FormatError, InputError
from .formats import codec_for_path


def read_bytes(path: str | Path) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise InputError(f"failed to open file: {path}: {exc.strerror or exc}") from exc


def load_recipes(path: str | Path, duplicates: str = "keep-last") -> RecipeCollection:
    codec = codec_for_path(path)
    collection = codec.decode(read_bytes(path), str(path))
    if duplicates == "reject":
        problems = find_duplicate_names(collection)
        if problems:
            raise FormatError(f"{path}: {problems[0]}")
    return collection
