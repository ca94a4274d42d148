"""Event-driven XML reader producing a flat, handle-addressed element tree.

Nodes live in a single list (the arena) and refer to each other by index.
Handles are handed out in document order when an element starts; a node is
attached to its parent only when it ends, i.e. once its own children are
known. Searching the arena front to back is therefore a document-order walk.
"""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import Iterator

from lxml import etree

from epubdoc.core.errors import AttributeMissing, ElementNotFound, MalformedInput

XML_WHITESPACE = " \t\r\n"


@dataclass
class XMLNode:
    """Single element: local name, attributes, leading text and child handles."""

    handle: int
    name: str
    attrs: dict[str, str] = field(default_factory=dict)
    text: str | None = None
    parent: int | None = None
    children: list[int] = field(default_factory=list)

    def get_attr(self, name: str) -> str:
        try:
            return self.attrs[name]
        except KeyError:
            raise AttributeMissing(name) from None


class ElementTree:
    """Arena of parsed nodes. Handle 0 is the document element."""

    def __init__(self, nodes: list[XMLNode]):
        self.nodes = nodes

    @property
    def root(self) -> XMLNode:
        return self.nodes[0]

    def node(self, handle: int) -> XMLNode:
        return self.nodes[handle]

    def children(self, node: XMLNode) -> Iterator[XMLNode]:
        """Direct children of ``node`` in document order."""
        for handle in node.children:
            yield self.nodes[handle]

    def find(self, name: str, start: XMLNode | None = None) -> XMLNode:
        """Return the first element named ``name`` at or below ``start``.

        Args:
            name: Local element name, without namespace
            start: Node to search from (default: the root)

        Raises:
            ElementNotFound: If no element below ``start`` has that name
        """
        start = start or self.root
        stack = [start.handle]
        while stack:
            node = self.nodes[stack.pop()]
            if node.name == name:
                return node
            stack.extend(reversed(node.children))
        raise ElementNotFound(name)


class XMLReader:
    """Parse a byte buffer into an :class:`ElementTree`."""

    def __init__(self, data: bytes):
        self.data = data

    def parse_xml(self) -> ElementTree:
        nodes: list[XMLNode] = []
        open_handles: list[int] = []

        events = etree.iterparse(
            io.BytesIO(self.data),
            events=("start", "end"),
            resolve_entities=False,
            no_network=True,
        )
        try:
            for event, element in events:
                if event == "start":
                    node = XMLNode(
                        handle=len(nodes),
                        name=etree.QName(element).localname,
                        attrs=self._local_attrs(element),
                        parent=open_handles[-1] if open_handles else None,
                    )
                    nodes.append(node)
                    open_handles.append(node.handle)
                else:
                    node = nodes[open_handles.pop()]
                    node.text = self._text(element.text)
                    if node.parent is not None:
                        nodes[node.parent].children.append(node.handle)
                    element.clear()
        except etree.XMLSyntaxError as e:
            raise MalformedInput(str(e)) from e

        if not nodes:
            raise MalformedInput("document has no root element")
        return ElementTree(nodes)

    @staticmethod
    def _local_attrs(element: etree._Element) -> dict[str, str]:
        """Attributes keyed by local name; the first one wins on a clash."""
        attrs: dict[str, str] = {}
        for key, value in element.attrib.items():
            attrs.setdefault(etree.QName(key).localname, value)
        return attrs

    @staticmethod
    def _text(text: str | None) -> str | None:
        if text is None or not text.strip(XML_WHITESPACE):
            return None
        return text
