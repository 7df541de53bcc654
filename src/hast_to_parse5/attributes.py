"""Turn hast element properties into parse5 attribute lists."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Union

from .constants import NAMESPACES
from .node import Attribute
from .schema import find

if TYPE_CHECKING:
    from .schema import Schema

PropertyValue = Union[bool, str, int, float, None, Sequence[Union[str, int, float]]]
AttributeValue = Union[bool, str, int, float]


def _stringify(value: AttributeValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def properties_to_attributes(properties: Mapping[str, PropertyValue] | None, schema: Schema) -> dict[str, AttributeValue]:
    """Map hast property names and values to markup attribute names and values.

    ``None`` and NaN values are dropped. Lists are joined with ", " for
    comma-separated properties and with a single space otherwise. Booleans,
    strings and numbers are kept as they are so the attribute list builder
    can tell ``True`` apart from ``"true"``.
    """
    attributes: dict[str, AttributeValue] = {}
    if not properties:
        return attributes

    for prop, value in properties.items():
        if value is None or (isinstance(value, float) and math.isnan(value)):
            continue

        info = find(schema, prop)

        if isinstance(value, (list, tuple)):
            separator = ", " if info.comma_separated else " "
            value = separator.join(_stringify(item) for item in value).strip()

        attributes[info.attribute] = value

    return attributes


def build_attrs(attributes: Mapping[str, AttributeValue], schema: Schema) -> list[Attribute]:
    """Build the ordered ``attrs`` list of a parse5 element.

    False values and falsy known booleans are left out; ``True`` becomes the
    empty string. Attributes in a namespace other than HTML or SVG (xlink,
    xml, xmlns) get their prefix split off and the full namespace URI set.
    """
    values: list[Attribute] = []

    for key, value in attributes.items():
        if value is False:
            continue

        info = find(schema, key)

        if info.boolean and not value:
            continue

        attr = Attribute(key, "" if value is True else _stringify(value))

        if info.space and info.space not in {"html", "svg"}:
            prefix, sep, local = key.partition(":")
            if sep:
                attr.name = local
                attr.prefix = prefix
            else:
                attr.prefix = ""
            attr.namespace = NAMESPACES[info.space]

        values.append(attr)

    return values
