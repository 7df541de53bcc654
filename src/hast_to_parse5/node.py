from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Any

from .serialize import to_dict, to_test_format

if TYPE_CHECKING:
    from collections.abc import Iterator


class SourceCodeLocation:
    """Start and end of the source span a node was produced from."""

    __slots__ = ("end_col", "end_line", "end_offset", "start_col", "start_line", "start_offset")

    start_line: int | None
    start_col: int | None
    start_offset: int | None
    end_line: int | None
    end_col: int | None
    end_offset: int | None

    __hash__ = None  # type: ignore[assignment]  # Unhashable since we define __eq__

    def __init__(
        self,
        start_line: int | None,
        start_col: int | None,
        start_offset: int | None,
        end_line: int | None,
        end_col: int | None,
        end_offset: int | None,
    ) -> None:
        self.start_line = start_line
        self.start_col = start_col
        self.start_offset = start_offset
        self.end_line = end_line
        self.end_col = end_col
        self.end_offset = end_offset

    def __repr__(self) -> str:
        return (
            f"SourceCodeLocation({self.start_line}:{self.start_col}@{self.start_offset}"
            f"-{self.end_line}:{self.end_col}@{self.end_offset})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SourceCodeLocation):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in self.__slots__)


class Attribute:
    """One entry of an element's ``attrs``.

    ``prefix`` and ``namespace`` are only set for attributes in a foreign
    namespace (xlink, xml, xmlns).
    """

    __slots__ = ("name", "namespace", "prefix", "value")

    name: str
    value: str
    prefix: str | None
    namespace: str | None

    __hash__ = None  # type: ignore[assignment]  # Unhashable since we define __eq__

    def __init__(self, name: str, value: str, prefix: str | None = None, namespace: str | None = None) -> None:
        self.name = name
        self.value = value
        self.prefix = prefix
        self.namespace = namespace

    def __repr__(self) -> str:
        if self.namespace is None:
            return f"Attribute({self.name!r}, {self.value!r})"
        return f"Attribute({self.name!r}, {self.value!r}, prefix={self.prefix!r}, namespace={self.namespace!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attribute):
            return NotImplemented
        return (
            self.name == other.name
            and self.value == other.value
            and self.prefix == other.prefix
            and self.namespace == other.namespace
        )


class Node:
    __slots__ = ("__weakref__", "_parent", "node_name", "source_code_location")

    node_name: str
    source_code_location: SourceCodeLocation | None
    _parent: weakref.ReferenceType[ParentNode] | None

    def __init__(self, node_name: str) -> None:
        self.node_name = node_name
        self.source_code_location = None
        self._parent = None

    @property
    def parent_node(self) -> ParentNode | None:
        """The node whose ``child_nodes`` holds this one.

        The link does not keep the parent alive: once the parent is
        discarded this returns None.
        """
        if self._parent is None:
            return None
        return self._parent()

    @parent_node.setter
    def parent_node(self, parent: ParentNode | None) -> None:
        self._parent = weakref.ref(parent) if parent is not None else None

    def to_dict(self) -> dict[str, Any]:
        """Return the parse5 JSON shape of this subtree."""
        return to_dict(self)

    def to_test_format(self) -> str:
        return to_test_format(self)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.node_name}>"


class ParentNode(Node):
    __slots__ = ("child_nodes",)

    child_nodes: list[Node]

    def __init__(self, node_name: str) -> None:
        super().__init__(node_name)
        self.child_nodes = []

    def has_child_nodes(self) -> bool:
        """Return True if this node has children."""
        return bool(self.child_nodes)


class Document(ParentNode):
    __slots__ = ("mode",)

    mode: str

    def __init__(self, mode: str = "no-quirks") -> None:
        super().__init__("#document")
        self.mode = mode


class DocumentFragment(ParentNode):
    __slots__ = ()

    def __init__(self) -> None:
        super().__init__("#document-fragment")


class Element(ParentNode):
    __slots__ = ("attrs", "content", "namespace_uri", "tag_name")

    tag_name: str
    attrs: list[Attribute]
    namespace_uri: str
    content: DocumentFragment | None

    def __init__(self, tag_name: str, attrs: list[Attribute] | None, namespace_uri: str) -> None:
        super().__init__(tag_name)
        self.tag_name = tag_name
        self.attrs = attrs if attrs is not None else []
        self.namespace_uri = namespace_uri
        self.content = None

    def get_attribute(self, name: str) -> str | None:
        for attr in self.attrs:
            if attr.name == name and attr.namespace is None:
                return attr.value
        return None


class TextNode(Node):
    __slots__ = ("value",)

    value: str

    def __init__(self, value: str) -> None:
        super().__init__("#text")
        self.value = value


class CommentNode(Node):
    __slots__ = ("data",)

    data: str

    def __init__(self, data: str) -> None:
        super().__init__("#comment")
        self.data = data


class DocumentType(Node):
    __slots__ = ("name", "public_id", "system_id")

    name: str
    public_id: str
    system_id: str

    def __init__(self, name: str = "html", public_id: str = "", system_id: str = "") -> None:
        super().__init__("#documentType")
        self.name = name
        self.public_id = public_id
        self.system_id = system_id


def iter_nodes(node: Node) -> Iterator[Node]:
    """Yield ``node`` and its descendants in document order.

    Template contents are visited after the template's own ``child_nodes``.
    """
    yield node
    if isinstance(node, ParentNode):
        for child in node.child_nodes:
            yield from iter_nodes(child)
    if isinstance(node, Element) and node.content is not None:
        yield from iter_nodes(node.content)
