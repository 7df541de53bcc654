from __future__ import annotations

import unittest

from hast_to_parse5 import (
    Attribute,
    CommentNode,
    Document,
    DocumentFragment,
    DocumentType,
    Element,
    SourceCodeLocation,
    TextNode,
    UnsupportedNodeError,
    iter_nodes,
    to_parse5,
)

HTML_NS = "http://www.w3.org/1999/xhtml"
SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"
XMLNS_NS = "http://www.w3.org/2000/xmlns/"
XML_NS = "http://www.w3.org/XML/1998/namespace"


def h(tag_name, properties=None, children=None, **extra):
    node = {"type": "element", "tagName": tag_name, "properties": properties or {}, "children": children or []}
    node.update(extra)
    return node


def text(value, **extra):
    return {"type": "text", "value": value, **extra}


def root(children=None, **extra):
    return {"type": "root", "children": children or [], **extra}


def walk_hast(node):
    yield node
    for child in node.get("children", []):
        yield from walk_hast(child)


class TestDispatch(unittest.TestCase):
    def test_root_becomes_document(self) -> None:
        doc = to_parse5(root())
        assert isinstance(doc, Document)
        assert doc.node_name == "#document"
        assert doc.mode == "no-quirks"
        assert doc.child_nodes == []
        assert doc.parent_node is None

    def test_root_as_fragment(self) -> None:
        frag = to_parse5(root([text("a")]), fragment=True)
        assert isinstance(frag, DocumentFragment)
        assert frag.node_name == "#document-fragment"
        assert frag.child_nodes[0].parent_node is frag

    def test_fragment_flag_ignored_for_non_root(self) -> None:
        node = to_parse5(text("a"), fragment=True)
        assert isinstance(node, TextNode)

    def test_text(self) -> None:
        node = to_parse5(text("hello"))
        assert isinstance(node, TextNode)
        assert node.node_name == "#text"
        assert node.value == "hello"

    def test_comment_value_becomes_data(self) -> None:
        node = to_parse5({"type": "comment", "value": " note "})
        assert isinstance(node, CommentNode)
        assert node.node_name == "#comment"
        assert node.data == " note "

    def test_doctype_uses_fixed_defaults(self) -> None:
        node = to_parse5({"type": "doctype", "name": "svg", "public": "-//W3C//DTD", "system": "x.dtd"})
        assert isinstance(node, DocumentType)
        assert node.node_name == "#documentType"
        assert node.name == "html"
        assert node.public_id == ""
        assert node.system_id == ""

    def test_unknown_type_raises(self) -> None:
        with self.assertRaises(UnsupportedNodeError) as ctx:
            to_parse5({"type": "raw", "value": "<b>"})
        assert ctx.exception.kind == "raw"
        assert "raw" in str(ctx.exception)

    def test_missing_type_raises(self) -> None:
        with self.assertRaises(UnsupportedNodeError) as ctx:
            to_parse5({"children": []})
        assert ctx.exception.kind is None

    def test_unknown_type_deep_in_tree_aborts_conversion(self) -> None:
        tree = root([h("div", children=[h("p", children=[{"type": "mdxJsxFlowElement"}])])])
        with self.assertRaises(UnsupportedNodeError):
            to_parse5(tree)

    def test_unsupported_node_error_is_value_error(self) -> None:
        with self.assertRaises(ValueError):
            to_parse5({"type": "instruction"})

    def test_invalid_space_raises(self) -> None:
        with self.assertRaises(ValueError):
            to_parse5(root(), "mathml")  # type: ignore[arg-type]


class TestQuirksMode(unittest.TestCase):
    def test_quirks_mode_true(self) -> None:
        assert to_parse5(root(data={"quirksMode": True})).mode == "quirks"

    def test_quirks_mode_false(self) -> None:
        assert to_parse5(root(data={"quirksMode": False})).mode == "no-quirks"

    def test_data_without_quirks_mode(self) -> None:
        assert to_parse5(root(data={})).mode == "no-quirks"


class TestStructure(unittest.TestCase):
    def setUp(self) -> None:
        self.tree = root(
            [
                {"type": "doctype"},
                h(
                    "html",
                    children=[
                        h("head", children=[h("title", children=[text("Title")])]),
                        h(
                            "body",
                            children=[
                                {"type": "comment", "value": "c"},
                                h("p", children=[text("a"), h("b", children=[text("b")]), text("c")]),
                                h("ul", children=[h("li"), h("li", children=[text("two")])]),
                            ],
                        ),
                    ],
                ),
            ]
        )

    def test_depth_first_order_matches_source(self) -> None:
        doc = to_parse5(self.tree)
        source = list(walk_hast(self.tree))
        produced = list(iter_nodes(doc))
        assert len(source) == len(produced)
        for hast_node, p5_node in zip(source, produced):
            kind = hast_node["type"]
            if kind == "element":
                assert p5_node.node_name == hast_node["tagName"]
            elif kind == "text":
                assert p5_node.value == hast_node["value"]
            elif kind == "comment":
                assert p5_node.data == hast_node["value"]
            elif kind == "doctype":
                assert p5_node.node_name == "#documentType"
            else:
                assert p5_node.node_name == "#document"

    def test_parent_links(self) -> None:
        doc = to_parse5(self.tree)
        for node in iter_nodes(doc):
            if node is doc:
                assert node.parent_node is None
                continue
            parent = node.parent_node
            assert parent is not None
            assert sum(1 for child in parent.child_nodes if child is node) == 1

    def test_parent_link_position_matches_source_index(self) -> None:
        doc = to_parse5(self.tree)
        p = doc.child_nodes[1].child_nodes[1].child_nodes[1]
        assert p.tag_name == "p"
        for index, child in enumerate(p.child_nodes):
            assert child.parent_node is p
            assert p.child_nodes.index(child) == index
        assert [c.node_name for c in p.child_nodes] == ["#text", "b", "#text"]

    def test_source_tree_is_not_mutated(self) -> None:
        tree = root([h("a", {"href": "/x", "className": ["k"]}, [text("x")])])
        before = repr(tree)
        to_parse5(tree)
        assert repr(tree) == before

    def test_element_without_children_key(self) -> None:
        doc = to_parse5(root([{"type": "element", "tagName": "br"}]))
        br = doc.child_nodes[0]
        assert isinstance(br, Element)
        assert br.child_nodes == []
        assert br.attrs == []

    def test_root_without_children_key(self) -> None:
        doc = to_parse5({"type": "root"})
        assert doc.child_nodes == []

    def test_conversions_are_independent(self) -> None:
        first = to_parse5(self.tree)
        second = to_parse5(self.tree)
        assert first is not second
        assert first.child_nodes[1] is not second.child_nodes[1]
        assert first.to_dict() == second.to_dict()


class TestNamespaces(unittest.TestCase):
    def test_svg_subtree_switches_namespace(self) -> None:
        tree = root([h("div", children=[h("svg", children=[h("rect")]), h("span")])])
        doc = to_parse5(tree)
        div = doc.child_nodes[0]
        svg, span = div.child_nodes
        rect = svg.child_nodes[0]
        assert div.namespace_uri == HTML_NS
        assert svg.namespace_uri == SVG_NS
        assert rect.namespace_uri == SVG_NS
        assert span.namespace_uri == HTML_NS

    def test_no_demotion_inside_svg(self) -> None:
        tree = h("svg", children=[h("foreignObject", children=[h("div", children=[h("svg")])])])
        svg = to_parse5(tree)
        foreign = svg.child_nodes[0]
        div = foreign.child_nodes[0]
        assert foreign.namespace_uri == SVG_NS
        assert div.namespace_uri == SVG_NS
        assert div.child_nodes[0].namespace_uri == SVG_NS

    def test_initial_svg_space(self) -> None:
        tree = root([h("g", children=[h("circle")])])
        doc = to_parse5(tree, "svg")
        g = doc.child_nodes[0]
        assert g.namespace_uri == SVG_NS
        assert g.child_nodes[0].namespace_uri == SVG_NS

    def test_svg_tag_match_is_exact(self) -> None:
        doc = to_parse5(root([h("SVG")]))
        assert doc.child_nodes[0].namespace_uri == HTML_NS

    def test_svg_element_attributes_resolve_in_svg(self) -> None:
        tree = h("svg", {"viewBox": "0 0 10 10", "strokeWidth": 2, "className": ["icon", "big"]})
        svg = to_parse5(tree)
        assert svg.attrs == [
            Attribute("viewBox", "0 0 10 10"),
            Attribute("stroke-width", "2"),
            Attribute("class", "icon big"),
        ]

    def test_namespaced_attributes_inside_svg(self) -> None:
        tree = h(
            "svg",
            {"xmlns": SVG_NS, "xmlnsXLink": XLINK_NS},
            [h("use", {"xLinkHref": "#a", "xmlLang": "en"})],
        )
        svg = to_parse5(tree)
        assert svg.attrs == [
            Attribute("xmlns", SVG_NS, prefix="", namespace=XMLNS_NS),
            Attribute("xlink", XLINK_NS, prefix="xmlns", namespace=XMLNS_NS),
        ]
        use = svg.child_nodes[0]
        assert use.attrs == [
            Attribute("href", "#a", prefix="xlink", namespace=XLINK_NS),
            Attribute("lang", "en", prefix="xml", namespace=XML_NS),
        ]


class TestAttributes(unittest.TestCase):
    def convert(self, properties, tag_name="input"):
        return to_parse5(h(tag_name, properties)).attrs

    def test_false_boolean_is_dropped(self) -> None:
        assert self.convert({"disabled": False}) == []

    def test_true_boolean_is_empty_string(self) -> None:
        assert self.convert({"disabled": True}) == [Attribute("disabled", "")]

    def test_falsy_known_boolean_is_dropped(self) -> None:
        assert self.convert({"checked": 0}) == []
        assert self.convert({"checked": ""}) == []

    def test_true_on_unknown_attribute(self) -> None:
        assert self.convert({"fooBar": True}) == [Attribute("fooBar", "")]

    def test_false_on_non_boolean_is_dropped(self) -> None:
        assert self.convert({"value": False}) == []

    def test_numbers_are_stringified(self) -> None:
        assert self.convert({"tabIndex": -1, "width": 1.5}, "img") == [
            Attribute("tabindex", "-1"),
            Attribute("width", "1.5"),
        ]

    def test_none_and_nan_are_dropped(self) -> None:
        assert self.convert({"title": None, "height": float("nan"), "alt": ""}, "img") == [Attribute("alt", "")]

    def test_property_names_become_attribute_names(self) -> None:
        attrs = self.convert(
            {"className": ["a", "b"], "htmlFor": "x", "httpEquiv": "refresh", "dateTime": "2020"},
            "label",
        )
        assert attrs == [
            Attribute("class", "a b"),
            Attribute("for", "x"),
            Attribute("http-equiv", "refresh"),
            Attribute("datetime", "2020"),
        ]

    def test_comma_separated_lists(self) -> None:
        assert self.convert({"accept": [".png", ".jpg"]}) == [Attribute("accept", ".png, .jpg")]

    def test_data_and_aria_properties(self) -> None:
        attrs = self.convert({"dataFooBar": "1", "ariaLabel": "Close", "role": "button"}, "button")
        assert attrs == [
            Attribute("data-foo-bar", "1"),
            Attribute("aria-label", "Close"),
            Attribute("role", "button"),
        ]

    def test_order_is_preserved(self) -> None:
        attrs = self.convert({"type": "text", "name": "q", "id": "search", "autoFocus": True})
        assert [attr.name for attr in attrs] == ["type", "name", "id", "autofocus"]

    def test_xlink_on_html_element(self) -> None:
        attrs = self.convert({"xLinkHref": "#x"}, "a")
        assert attrs == [Attribute("href", "#x", prefix="xlink", namespace=XLINK_NS)]


class TestTemplate(unittest.TestCase):
    def test_content_is_separate(self) -> None:
        tree = h("template", children=[], content={"type": "root", "children": [text("x")]})
        template = to_parse5(tree)
        assert template.child_nodes == []
        content = template.content
        assert isinstance(content, DocumentFragment)
        assert len(content.child_nodes) == 1
        assert content.child_nodes[0].value == "x"
        assert content.child_nodes[0].parent_node is content

    def test_content_inherits_schema(self) -> None:
        tree = h("svg", children=[h("template", content=root([h("path")]))])
        svg = to_parse5(tree)
        template = svg.child_nodes[0]
        assert template.content.child_nodes[0].namespace_uri == SVG_NS

    def test_missing_content_is_empty_fragment(self) -> None:
        template = to_parse5(h("template"))
        assert isinstance(template.content, DocumentFragment)
        assert template.content.child_nodes == []

    def test_other_elements_have_no_content(self) -> None:
        div = to_parse5(h("div", content=root([text("x")])))
        assert div.content is None

    def test_content_position(self) -> None:
        position = {"start": {"line": 1, "column": 11, "offset": 10}, "end": {"line": 1, "column": 12, "offset": 11}}
        tree = h("template", content=root([text("x")], position=position))
        template = to_parse5(tree)
        assert template.content.source_code_location == SourceCodeLocation(1, 11, 10, 1, 12, 11)


class TestLocation(unittest.TestCase):
    def test_position_is_copied(self) -> None:
        position = {"start": {"line": 1, "column": 1, "offset": 0}, "end": {"line": 1, "column": 4, "offset": 3}}
        node = to_parse5(text("abc", position=position))
        assert node.source_code_location == SourceCodeLocation(1, 1, 0, 1, 4, 3)
        assert node.to_dict()["sourceCodeLocation"] == {
            "startLine": 1,
            "startCol": 1,
            "startOffset": 0,
            "endLine": 1,
            "endCol": 4,
            "endOffset": 3,
        }

    def test_no_position(self) -> None:
        node = to_parse5(text("abc"))
        assert node.source_code_location is None
        assert "sourceCodeLocation" not in node.to_dict()

    def test_incomplete_position_is_ignored(self) -> None:
        node = to_parse5(text("abc", position={"start": {"line": 1, "column": 1, "offset": 0}}))
        assert node.source_code_location is None

    def test_missing_offset_is_none(self) -> None:
        position = {"start": {"line": 2, "column": 3}, "end": {"line": 2, "column": 5}}
        node = to_parse5({"type": "comment", "value": "", "position": position})
        assert node.source_code_location == SourceCodeLocation(2, 3, None, 2, 5, None)

    def test_every_kind_is_patched(self) -> None:
        position = {"start": {"line": 1, "column": 1, "offset": 0}, "end": {"line": 9, "column": 1, "offset": 80}}
        tree = root(
            [{"type": "doctype", "position": position}, h("p", position=position)],
            position=position,
        )
        doc = to_parse5(tree)
        expected = SourceCodeLocation(1, 1, 0, 9, 1, 80)
        assert doc.source_code_location == expected
        assert all(child.source_code_location == expected for child in doc.child_nodes)
