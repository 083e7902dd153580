"""Tagged-tree codec: the keyed JSON form of a recipe database.

Input may carry ``//`` line comments, which are stripped before parsing.
Counts keep their numeric lexeme, whether written bare (``3``) or quoted
(``"3"``); the encoder writes the lexeme back as a bare number.
"""

from __future__ import annotations

import json
from typing import Any

from ..domain import Cake, Ingredient, RecipeCollection
from ..errors import FormatError
from .common import optional_text, require_count, require_name


class _Number:
    __slots__ = ("text",)

    def __init__(self, text: str) -> None:
        self.text = text

    def __repr__(self) -> str:
        return self.text


def _reject_constant(name: str) -> Any:
    raise ValueError(f"unsupported constant {name}")


def strip_comments(data: bytes) -> bytes:
    """Drop ``//`` comments together with the line break that ends them.

    Quoted strings are not recognised, so a ``//`` inside a value is treated
    as a comment too.
    """
    out = bytearray()
    in_comment = False
    i = 0
    while i < len(data):
        byte = data[i]
        if not in_comment and byte == 0x2F and data[i + 1 : i + 2] == b"/":
            in_comment = True
            i += 2
            continue
        if in_comment:
            if byte in (0x0A, 0x0D):
                in_comment = False
        else:
            out.append(byte)
        i += 1
    return bytes(out)


class TaggedTreeCodec:
    name = "json"
    extension = ".json"

    def decode(self, data: bytes, source: str) -> RecipeCollection:
        try:
            doc = json.loads(
                strip_comments(data),
                parse_int=_Number,
                parse_float=_Number,
                parse_constant=_reject_constant,
            )
        except ValueError as exc:
            raise FormatError(f"{source}: failed to deserialize JSON: {exc}") from exc

        if not isinstance(doc, dict):
            raise FormatError(f"{source}: failed to deserialize JSON: top level must be an object")
        cakes = _as_list(doc.get("cake"), source, "cake")
        return RecipeCollection(cakes=tuple(_decode_cake(item, source) for item in cakes))

    def encode(self, collection: RecipeCollection, indent: int = 4) -> str:
        payload = {"cake": [_encode_cake(cake) for cake in collection.cakes]}
        return _dump(payload, indent, 0)


def _as_list(value: Any, source: str, key: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise FormatError(f"{source}: {key!r} must be an array")
    return value


def _decode_cake(item: Any, source: str) -> Cake:
    if not isinstance(item, dict):
        raise FormatError(f"{source}: cake entries must be objects")
    name = require_name(item.get("name"), source, "cake")
    time = optional_text(item.get("time"), source, f"time of cake {name!r}")
    ingredients = tuple(
        _decode_ingredient(entry, source, name)
        for entry in _as_list(item.get("ingredients"), source, "ingredients")
    )
    return Cake(name=name, time=time, ingredients=ingredients)


def _decode_ingredient(entry: Any, source: str, cake: str) -> Ingredient:
    if not isinstance(entry, dict):
        raise FormatError(f"{source}: ingredients of cake {cake!r} must be objects")
    name = require_name(entry.get("ingredient_name"), source, f"ingredient of cake {cake!r}")
    count = entry.get("ingredient_count")
    if isinstance(count, _Number):
        count = count.text
    unit = optional_text(entry.get("ingredient_unit"), source, f"unit of ingredient {name!r}")
    return Ingredient(name=name, count=require_count(count, source, name), unit=unit)


def _encode_cake(cake: Cake) -> dict[str, Any]:
    return {
        "name": cake.name,
        "time": cake.time,
        "ingredients": [_encode_ingredient(ingredient) for ingredient in cake.ingredients],
    }


def _encode_ingredient(ingredient: Ingredient) -> dict[str, Any]:
    out: dict[str, Any] = {
        "ingredient_name": ingredient.name,
        "ingredient_count": _Number(ingredient.count),
    }
    if ingredient.unit:
        out["ingredient_unit"] = ingredient.unit
    return out


def _dump(value: Any, indent: int, level: int) -> str:
    # Same layout as json.dumps(indent=...), with counts written verbatim.
    if isinstance(value, _Number):
        return value.text
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)

    inner = "\n" + " " * (indent * (level + 1))
    outer = "\n" + " " * (indent * level)
    if isinstance(value, dict):
        if not value:
            return "{}"
        members = [f"{json.dumps(key)}: {_dump(item, indent, level + 1)}" for key, item in value.items()]
        return "{" + inner + ("," + inner).join(members) + outer + "}"
    if not value:
        return "[]"
    elements = [_dump(item, indent, level + 1) for item in value]
    return "[" + inner + ("," + inner).join(elements) + outer + "]"
