"""Plain-data and debug renderings of converted parse5 trees."""

from __future__ import annotations

import json
from typing import Any

from .constants import NAMESPACES

_NAMESPACE_PREFIXES: dict[str, str] = {
    NAMESPACES["svg"]: "svg",
    NAMESPACES["mathml"]: "math",
}


def _location_to_dict(location: Any) -> dict[str, Any]:
    return {
        "startLine": location.start_line,
        "startCol": location.start_col,
        "startOffset": location.start_offset,
        "endLine": location.end_line,
        "endCol": location.end_col,
        "endOffset": location.end_offset,
    }


def _attr_to_dict(attr: Any) -> dict[str, Any]:
    out: dict[str, Any] = {"name": attr.name, "value": attr.value}
    if attr.namespace is not None:
        out["prefix"] = attr.prefix
        out["namespace"] = attr.namespace
    return out


def to_dict(node: Any) -> dict[str, Any]:
    """Convert a node to the dict shape parse5 uses for its AST.

    Keys are camelCase as in parse5. ``parentNode`` is left out because it
    points back up the tree; ``sourceCodeLocation`` only appears when the
    node has one.
    """
    name: str = node.node_name
    out: dict[str, Any] = {"nodeName": name}

    if name == "#text":
        out["value"] = node.value
    elif name == "#comment":
        out["data"] = node.data
    elif name == "#documentType":
        out["name"] = node.name
        out["publicId"] = node.public_id
        out["systemId"] = node.system_id
    else:
        if name == "#document":
            out["mode"] = node.mode
        elif name != "#document-fragment":
            out["tagName"] = node.tag_name
            out["attrs"] = [_attr_to_dict(attr) for attr in node.attrs]
            out["namespaceURI"] = node.namespace_uri
        out["childNodes"] = [to_dict(child) for child in node.child_nodes]
        content = getattr(node, "content", None)
        if content is not None:
            out["content"] = to_dict(content)

    if node.source_code_location is not None:
        out["sourceCodeLocation"] = _location_to_dict(node.source_code_location)
    return out


def to_json(node: Any, indent: int | None = None) -> str:
    return json.dumps(to_dict(node), indent=indent, ensure_ascii=False)


def to_test_format(node: Any, indent: int = 0) -> str:
    """Convert node to html5lib test format string.

    This is the tree dump format of html5lib-tests: '| ' prefixes, two
    spaces of indentation per level, foreign elements and namespaced
    attributes shown as ``prefix name``.
    """
    if node.node_name in {"#document", "#document-fragment"}:
        parts = [_node_to_test_format(child, 0) for child in node.child_nodes]
        return "\n".join(parts)
    return _node_to_test_format(node, indent)


def _node_to_test_format(node: Any, indent: int) -> str:
    name: str = node.node_name

    if name == "#comment":
        return f"| {' ' * indent}<!-- {node.data} -->"

    if name == "#documentType":
        return _doctype_to_test_format(node)

    if name == "#text":
        return f'| {" " * indent}"{node.value}"'

    line = f"| {' ' * indent}<{_qualified_name(node)}>"
    sections = [line]
    sections.extend(_attrs_to_test_format(node, indent))

    if node.content is not None:
        sections.append(f"| {' ' * (indent + 2)}content")
        sections.extend(_node_to_test_format(child, indent + 4) for child in node.content.child_nodes)

    sections.extend(_node_to_test_format(child, indent + 2) for child in node.child_nodes)
    return "\n".join(sections)


def _qualified_name(node: Any) -> str:
    prefix = _NAMESPACE_PREFIXES.get(node.namespace_uri)
    if prefix:
        return f"{prefix} {node.tag_name}"
    return str(node.tag_name)


def _attrs_to_test_format(node: Any, indent: int) -> list[str]:
    if not node.attrs:
        return []

    padding = " " * (indent + 2)
    display_attrs: list[tuple[str, str]] = []
    for attr in node.attrs:
        display_name = attr.name
        if attr.namespace is not None and attr.prefix:
            display_name = f"{attr.prefix} {attr.name}"
        display_attrs.append((display_name, attr.value))

    # Sort by display name for canonical test output
    display_attrs.sort(key=lambda x: x[0])
    return [f'| {padding}{display_name}="{value}"' for display_name, value in display_attrs]


def _doctype_to_test_format(node: Any) -> str:
    parts: list[str] = ["| <!DOCTYPE"]
    parts.append(f" {node.name}" if node.name else " ")
    if node.public_id or node.system_id:
        parts.append(f' "{node.public_id}"')
        parts.append(f' "{node.system_id}"')
    parts.append(">")
    return "".join(parts)
