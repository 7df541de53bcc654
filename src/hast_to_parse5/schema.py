"""Attribute information for HTML and SVG.

A schema maps hast property names (``className``, ``xLinkHref``) to the
attribute names used in markup (``class``, ``xlink:href``) and records how
values of each property behave: booleans, separated lists, the namespace the
attribute lives in.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from .constants import (
    ARIA_PROPERTIES,
    BOOLEAN,
    BOOLEANISH,
    COMMA_OR_SPACE_SEPARATED,
    COMMA_SEPARATED,
    EVENT_HANDLERS,
    HTML_ATTRIBUTES,
    HTML_PROPERTIES,
    NUMBER,
    OVERLOADED_BOOLEAN,
    SPACE_SEPARATED,
    SVG_ATTRIBUTES,
    SVG_PROPERTIES,
    XLINK_PROPERTIES,
    XML_PROPERTIES,
    XMLNS_ATTRIBUTES,
    XMLNS_PROPERTIES,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

_DATA_NAME = re.compile(r"^data[-\w.:]+$", re.IGNORECASE)
_DASH_LETTER = re.compile(r"-[a-z]")
_CAPITAL = re.compile(r"[A-Z]")


class Info:
    __slots__ = (
        "attribute",
        "boolean",
        "booleanish",
        "comma_or_space_separated",
        "comma_separated",
        "defined",
        "number",
        "overloaded_boolean",
        "property",
        "space",
        "space_separated",
    )

    property: str
    attribute: str
    space: str | None
    defined: bool
    boolean: bool
    booleanish: bool
    overloaded_boolean: bool
    number: bool
    space_separated: bool
    comma_separated: bool
    comma_or_space_separated: bool

    def __init__(
        self,
        property: str,  # noqa: A002
        attribute: str,
        flags: int = 0,
        space: str | None = None,
        defined: bool = False,
    ) -> None:
        self.property = property
        self.attribute = attribute
        self.space = space
        self.defined = defined
        self.boolean = bool(flags & BOOLEAN)
        self.booleanish = bool(flags & BOOLEANISH)
        self.overloaded_boolean = bool(flags & OVERLOADED_BOOLEAN)
        self.number = bool(flags & NUMBER)
        self.space_separated = bool(flags & SPACE_SEPARATED)
        self.comma_separated = bool(flags & COMMA_SEPARATED)
        self.comma_or_space_separated = bool(flags & COMMA_OR_SPACE_SEPARATED)

    def __repr__(self) -> str:
        return f"Info({self.property!r}, {self.attribute!r}, space={self.space!r})"


class Schema:
    __slots__ = ("normal", "property", "space")

    property: dict[str, Info]
    normal: dict[str, str]
    space: str

    def __init__(self, property: dict[str, Info], normal: dict[str, str], space: str) -> None:  # noqa: A002
        self.property = property
        self.normal = normal
        self.space = space

    def __repr__(self) -> str:
        return f"<Schema {self.space}>"


def _define(
    properties: dict[str, int],
    transform: Callable[[str], str],
    space: str | None = None,
) -> Schema:
    infos: dict[str, Info] = {}
    normal: dict[str, str] = {}
    for prop, flags in properties.items():
        info = Info(prop, transform(prop), flags, space, defined=True)
        infos[prop] = info
        normal[prop.lower()] = prop
        normal[info.attribute.lower()] = prop
    return Schema(infos, normal, space or "")


def _merge(definitions: Iterable[Schema], space: str) -> Schema:
    infos: dict[str, Info] = {}
    normal: dict[str, str] = {}
    for definition in definitions:
        infos.update(definition.property)
        normal.update(definition.normal)
    return Schema(infos, normal, space)


def _case_insensitive(attributes: dict[str, str]) -> Callable[[str], str]:
    def transform(prop: str) -> str:
        lowered = prop.lower()
        return attributes.get(lowered, lowered)

    return transform


def _case_sensitive(attributes: dict[str, str]) -> Callable[[str], str]:
    def transform(prop: str) -> str:
        return attributes.get(prop, prop)

    return transform


_XLINK = _define(XLINK_PROPERTIES, lambda prop: "xlink:" + prop[5:].lower(), "xlink")
_XML = _define(XML_PROPERTIES, lambda prop: "xml:" + prop[3:].lower(), "xml")
_XMLNS = _define(XMLNS_PROPERTIES, _case_insensitive(XMLNS_ATTRIBUTES), "xmlns")
_ARIA = _define(ARIA_PROPERTIES, lambda prop: prop if prop == "role" else "aria-" + prop[4:].lower())

_HTML_BASE = _define(
    {**HTML_PROPERTIES, **dict.fromkeys(EVENT_HANDLERS, 0)},
    _case_insensitive(HTML_ATTRIBUTES),
    "html",
)
_SVG_BASE = _define(
    {**SVG_PROPERTIES, **dict.fromkeys(EVENT_HANDLERS, 0)},
    _case_sensitive({**SVG_ATTRIBUTES, **{name: name.lower() for name in EVENT_HANDLERS}}),
    "svg",
)

HTML = _merge([_XML, _XLINK, _XMLNS, _ARIA, _HTML_BASE], "html")
SVG = _merge([_XML, _XLINK, _XMLNS, _ARIA, _SVG_BASE], "svg")


def find(schema: Schema, value: str) -> Info:
    """Look up information for a property or attribute name.

    Both hast property names and markup attribute names are accepted, case
    insensitively. ``data-*`` names are translated between their two forms.
    Names the schema does not know come back as a plain ``Info`` with no
    flags and no namespace, so callers can treat them as ordinary attributes.
    """
    normal = value.lower()
    prop = schema.normal.get(normal)
    if prop is not None:
        return schema.property[prop]

    if len(normal) > 4 and normal.startswith("data") and _DATA_NAME.match(value):
        if value[4] == "-":
            rest = _DASH_LETTER.sub(lambda m: m.group(0)[1].upper(), value[5:])
            return Info("data" + rest[:1].upper() + rest[1:], value, defined=True)

        rest = value[4:]
        attribute = value
        if not _DASH_LETTER.search(rest):
            dashes = _CAPITAL.sub(lambda m: "-" + m.group(0).lower(), rest)
            if not dashes.startswith("-"):
                dashes = "-" + dashes
            attribute = "data" + dashes
        return Info(value, attribute, defined=True)

    return Info(value, value)


def get_schema(space: str) -> Schema:
    if space == "html":
        return HTML
    if space == "svg":
        return SVG
    raise ValueError(f"Unknown space {space!r} (expected 'html' or 'svg')")
