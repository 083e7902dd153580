from __future__ import annotations

import re

from ..errors import FormatError


NUMBER_RE = re.compile(r"-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][+-]?\d+)?")


def require_name(value: object, source: str, what: str) -> str:
    if not isinstance(value, str) or not value:
        raise FormatError(f"{source}: {what} has no name")
    return value


def require_count(value: object, source: str, ingredient: str) -> str:
    if not isinstance(value, str) or not NUMBER_RE.fullmatch(value):
        raise FormatError(f"{source}: ingredient {ingredient!r} has invalid count {value!r}")
    return value


def optional_text(value: object, source: str, what: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise FormatError(f"{source}: {what} must be a string")
    return value
