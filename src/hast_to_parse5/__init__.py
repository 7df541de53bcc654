from .convert import to_parse5
from .errors import UnsupportedNodeError
from .node import (
    Attribute,
    CommentNode,
    Document,
    DocumentFragment,
    DocumentType,
    Element,
    Node,
    ParentNode,
    SourceCodeLocation,
    TextNode,
    iter_nodes,
)
from .schema import HTML, SVG, Info, Schema, find
from .serialize import to_dict, to_json, to_test_format

__all__ = [
    "HTML",
    "SVG",
    "Attribute",
    "CommentNode",
    "Document",
    "DocumentFragment",
    "DocumentType",
    "Element",
    "Info",
    "Node",
    "ParentNode",
    "Schema",
    "SourceCodeLocation",
    "TextNode",
    "UnsupportedNodeError",
    "find",
    "iter_nodes",
    "to_dict",
    "to_json",
    "to_parse5",
    "to_test_format",
]
