"""Tests for the arena-backed XML reader."""

import pytest

from epubdoc.core.errors import AttributeMissing, ElementNotFound, MalformedInput
from epubdoc.core.xmlutils import XMLReader

DOC = b"""<?xml version="1.0"?>
<a:root xmlns:a="urn:a" xmlns:b="urn:b">
  <!-- a comment -->
  <first b:key="one" plain="two">hello</first>
  <group>
    <item id="1"/>
    <item id="2">  </item>
  </group>
  <item id="3"/>
</a:root>
"""


@pytest.fixture
def tree():
    return XMLReader(DOC).parse_xml()


class TestParse:
    """Tests for XMLReader.parse_xml()."""

    def test_root_local_name(self, tree):
        """Namespace prefixes are dropped from element names."""
        assert tree.root.name == "root"
        assert tree.root.parent is None

    def test_children_in_document_order(self, tree):
        """Direct children keep their order; comments are not nodes."""
        names = [child.name for child in tree.children(tree.root)]
        assert names == ["first", "group", "item"]

    def test_handles_follow_document_order(self, tree):
        """Handles are assigned in the order elements start."""
        assert [n.name for n in tree.nodes] == [
            "root", "first", "group", "item", "item", "item",
        ]
        assert all(node.handle == i for i, node in enumerate(tree.nodes))

    def test_parent_links(self, tree):
        group = tree.find("group")
        for child in tree.children(group):
            assert child.parent == group.handle

    def test_attributes_by_local_name(self, tree):
        first = tree.find("first")
        assert first.get_attr("key") == "one"
        assert first.get_attr("plain") == "two"

    def test_text(self, tree):
        """Leading text is kept; whitespace-only text is None."""
        assert tree.find("first").text == "hello"
        second = tree.node(tree.find("group").children[1])
        assert second.text is None

    def test_non_xml_whitespace_is_text(self):
        """Only space, tab, CR and LF count as blank; a no-break space is text."""
        data = "<r><a>\u00a0</a><b> \t\r\n</b></r>".encode("utf-8")
        tree = XMLReader(data).parse_xml()
        assert tree.find("a").text == "\u00a0"
        assert tree.find("b").text is None

    def test_malformed(self):
        with pytest.raises(MalformedInput):
            XMLReader(b"<root><open></root>").parse_xml()

    def test_empty_input(self):
        with pytest.raises(MalformedInput):
            XMLReader(b"").parse_xml()


class TestFind:
    """Tests for ElementTree.find() and attribute access."""

    def test_first_match_in_document_order(self, tree):
        """The nested item comes before the later sibling item."""
        assert tree.find("item").get_attr("id") == "1"

    def test_finds_root_itself(self, tree):
        assert tree.find("root") is tree.root

    def test_from_start_node(self, tree):
        group = tree.find("group")
        assert tree.find("item", start=group).get_attr("id") == "1"
        with pytest.raises(ElementNotFound):
            tree.find("first", start=group)

    def test_not_found(self, tree):
        with pytest.raises(ElementNotFound) as exc_info:
            tree.find("missing")
        assert exc_info.value.name == "missing"

    def test_attribute_missing(self, tree):
        with pytest.raises(AttributeMissing) as exc_info:
            tree.find("group").get_attr("id")
        assert exc_info.value.name == "id"
