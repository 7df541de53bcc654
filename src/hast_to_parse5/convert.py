"""Convert hast trees to parse5-shaped trees."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Callable, Literal, TypeVar

from .attributes import build_attrs, properties_to_attributes
from .constants import NAMESPACES
from .errors import UnsupportedNodeError
from .node import (
    CommentNode,
    Document,
    DocumentFragment,
    DocumentType,
    Element,
    Node,
    ParentNode,
    SourceCodeLocation,
    TextNode,
)
from .schema import SVG, get_schema

if TYPE_CHECKING:
    from .schema import Schema

Space = Literal["html", "svg"]
HastNode = Mapping[str, Any]

_N = TypeVar("_N", bound=Node)


def to_parse5(tree: HastNode, space: Space = "html", *, fragment: bool = False) -> Node:
    """Transform a hast tree into the tree shape parse5 produces.

    Args:
        tree: A hast node, usually a ``root``, as nested mappings (what
            ``json.load`` returns for a serialized hast tree).
        space: Which schema the tree starts in, ``"html"`` or ``"svg"``.
        fragment: Convert a ``root`` as a ``#document-fragment`` instead of
            a ``#document``.

    Returns:
        The converted node. Its type follows the type of ``tree``.

    Raises:
        UnsupportedNodeError: If any node in the tree has an unknown ``type``.
        ValueError: If ``space`` is neither "html" nor "svg".
    """
    schema = get_schema(space)
    if fragment and _kind(tree) == "root":
        return _fragment(tree, schema)
    return _one(tree, schema)


def _kind(node: Any) -> str | None:
    if not isinstance(node, Mapping):
        return None
    kind = node.get("type")
    return kind if isinstance(kind, str) else None


def _one(node: HastNode, schema: Schema) -> Node:
    kind = _kind(node)
    handler = _HANDLERS.get(kind) if kind is not None else None
    if handler is None:
        raise UnsupportedNodeError(node.get("type") if isinstance(node, Mapping) else None)
    return handler(node, schema)


def _root(node: HastNode, schema: Schema) -> Document:
    data = node.get("data") or {}
    p5 = Document("quirks" if data.get("quirksMode") else "no-quirks")
    p5.child_nodes = _all(node.get("children"), p5, schema)
    return _patch(node, p5)


def _fragment(node: HastNode, schema: Schema) -> DocumentFragment:
    p5 = DocumentFragment()
    p5.child_nodes = _all(node.get("children"), p5, schema)
    return _patch(node, p5)


def _doctype(node: HastNode, schema: Schema) -> DocumentType:  # noqa: ARG001
    # hast doctypes carry no name or identifiers; always emit <!DOCTYPE html>.
    return _patch(node, DocumentType("html", "", ""))


def _text(node: HastNode, schema: Schema) -> TextNode:  # noqa: ARG001
    return _patch(node, TextNode(node.get("value", "")))


def _comment(node: HastNode, schema: Schema) -> CommentNode:  # noqa: ARG001
    return _patch(node, CommentNode(node.get("value", "")))


def _element(node: HastNode, schema: Schema) -> Element:
    tag_name: str = node["tagName"]

    # Entering SVG is one-way and only affects this subtree.
    if schema.space == "html" and tag_name == "svg":
        schema = SVG

    attributes = properties_to_attributes(node.get("properties"), schema)
    p5 = _patch(node, Element(tag_name, build_attrs(attributes, schema), NAMESPACES[schema.space]))
    p5.child_nodes = _all(node.get("children"), p5, schema)

    if tag_name == "template":
        p5.content = _fragment(node.get("content") or {}, schema)

    return p5


def _all(children: Sequence[HastNode] | None, parent: ParentNode, schema: Schema) -> list[Node]:
    result: list[Node] = []
    if children:
        for child in children:
            p5 = _one(child, schema)
            p5.parent_node = parent
            result.append(p5)
    return result


def _patch(node: HastNode, p5: _N) -> _N:
    position = node.get("position")
    if not position:
        return p5

    start = position.get("start")
    end = position.get("end")
    if start and end:
        p5.source_code_location = SourceCodeLocation(
            start.get("line"),
            start.get("column"),
            start.get("offset"),
            end.get("line"),
            end.get("column"),
            end.get("offset"),
        )
    return p5


_HANDLERS: dict[str, Callable[[HastNode, Schema], Node]] = {
    "root": _root,
    "element": _element,
    "text": _text,
    "comment": _comment,
    "doctype": _doctype,
}
