"""Errors raised while converting hast trees."""

from __future__ import annotations

from typing import Any

KNOWN_NODE_TYPES: tuple[str, ...] = ("root", "element", "text", "comment", "doctype")


class UnsupportedNodeError(ValueError):
    """Raised when a node's ``type`` is not one of the convertible kinds.

    Conversion stops at the first such node; no partial tree is returned.
    """

    kind: Any

    def __init__(self, kind: Any) -> None:
        self.kind = kind
        super().__init__(generate_error_message(kind))


def generate_error_message(kind: Any) -> str:
    if kind is None:
        return "Cannot convert node without a `type`"
    expected = ", ".join(repr(name) for name in KNOWN_NODE_TYPES)
    return f"Cannot convert unknown node type {kind!r} (expected one of {expected})"
