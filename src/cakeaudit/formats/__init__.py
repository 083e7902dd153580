from __future__ import annotations

from pathlib import Path
from typing import Protocol

from ..domain import RecipeCollection
from ..errors import InputError
from .jsonish import TaggedTreeCodec, strip_comments
from .xmlish import BraceTreeCodec


class Codec(Protocol):
    name: str
    extension: str

    def decode(self, data: bytes, source: str) -> RecipeCollection: ...

    def encode(self, collection: RecipeCollection, indent: int = 4) -> str: ...


CODECS: dict[str, Codec] = {
    TaggedTreeCodec.extension: TaggedTreeCodec(),
    BraceTreeCodec.extension: BraceTreeCodec(),
}

_OPPOSITE = {".json": ".xml", ".xml": ".json"}


def codec_for_path(path: str | Path) -> Codec:
    ext = Path(path).suffix
    codec = CODECS.get(ext)
    if codec is None:
        raise InputError(f"unsupported file extension: {ext or '(none)'}")
    return codec


def opposite_codec(codec: Codec) -> Codec:
    return CODECS[_OPPOSITE[codec.extension]]


__all__ = [
    "BraceTreeCodec",
    "CODECS",
    "Codec",
    "TaggedTreeCodec",
    "codec_for_path",
    "opposite_codec",
    "strip_comments",
]
