"""Brace-tree codec: the element-nested XML form of a recipe database."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET

from ..domain import Cake, Ingredient, RecipeCollection
from ..errors import FormatError
from .common import require_count, require_name


ROOT_TAG = "recipes"

# Characters outside the XML 1.0 Char production.
INVALID_XML_RE = re.compile(r"[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


class BraceTreeCodec:
    name = "xml"
    extension = ".xml"

    def decode(self, data: bytes, source: str) -> RecipeCollection:
        try:
            root = ET.fromstring(data)
        except ET.ParseError as exc:
            raise FormatError(f"{source}: failed to deserialize XML: {exc}") from exc
        return RecipeCollection(cakes=tuple(_decode_cake(elem, source) for elem in root.findall("cake")))

    def encode(self, collection: RecipeCollection, indent: int = 4) -> str:
        root = ET.Element(ROOT_TAG)
        for cake in collection.cakes:
            _encode_cake(root, cake)
        ET.indent(root, space=" " * indent)
        # Indentation never contains \r, so every \r left here is element text.
        return ET.tostring(root, encoding="unicode").replace("\r", "&#xD;")


def _child_text(elem: ET.Element, tag: str) -> str | None:
    child = elem.find(tag)
    if child is None:
        return None
    return child.text or ""


def _decode_cake(elem: ET.Element, source: str) -> Cake:
    name = require_name(_child_text(elem, "name"), source, "cake")
    ingredients = tuple(_decode_item(item, source, name) for item in elem.findall("ingredients/item"))
    return Cake(name=name, time=_child_text(elem, "stovetime") or "", ingredients=ingredients)


def _decode_item(item: ET.Element, source: str, cake: str) -> Ingredient:
    name = require_name(_child_text(item, "itemname"), source, f"ingredient of cake {cake!r}")
    count = require_count(_child_text(item, "itemcount"), source, name)
    return Ingredient(name=name, count=count, unit=_child_text(item, "itemunit") or "")


def _encode_cake(root: ET.Element, cake: Cake) -> None:
    elem = ET.SubElement(root, "cake")
    ET.SubElement(elem, "name").text = _xml_text(cake.name)
    ET.SubElement(elem, "stovetime").text = _xml_text(cake.time)
    ingredients = ET.SubElement(elem, "ingredients")
    for ingredient in cake.ingredients:
        item = ET.SubElement(ingredients, "item")
        ET.SubElement(item, "itemname").text = _xml_text(ingredient.name)
        ET.SubElement(item, "itemcount").text = _xml_text(ingredient.count)
        if ingredient.unit:
            ET.SubElement(item, "itemunit").text = _xml_text(ingredient.unit)


def _xml_text(value: str) -> str:
    return INVALID_XML_RE.sub("\ufffd", value)
