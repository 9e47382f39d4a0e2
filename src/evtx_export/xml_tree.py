"""Read-only view over a parsed record XML document.

Records are parsed with ``xml.etree.ElementTree`` using a tree builder that
keeps comments and processing instructions, so the node view can tell what
kind of node comes first under an element:

- leading character data (``elem.text``), whitespace included, is a text node
- a child whose tag is ``ET.Comment`` or ``ET.ProcessingInstruction`` is a
  non-element node
- any other child is an element

Tag names are reported by local name: ``{namespace}System`` -> ``System``.
"""
from __future__ import annotations

from typing import Iterator, Optional
import xml.etree.ElementTree as ET

from evtx_export.errors import XmlParseError


def _is_element(elem: ET.Element) -> bool:
    return isinstance(elem.tag, str)


def _char_data(elem: ET.Element) -> Iterator[str]:
    if elem.text:
        yield elem.text
    for child in elem:
        # Comment and PI text lives in .text; their tails are parent data.
        if _is_element(child):
            yield from _char_data(child)
        if child.tail:
            yield child.tail


def local_name(tag: str) -> str:
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[1]
    return tag


class XmlNode:
    """Borrowed view of one element of a parsed document."""

    __slots__ = ("_elem",)

    def __init__(self, elem: ET.Element):
        self._elem = elem

    @property
    def tag_name(self) -> str:
        return local_name(self._elem.tag)

    @property
    def text_content(self) -> str:
        """Concatenated character data of all descendants (comments and PIs excluded)."""
        return "".join(_char_data(self._elem))

    def element_children(self) -> Iterator["XmlNode"]:
        """Element children in document order; comments and PIs are skipped."""
        for child in self._elem:
            if _is_element(child):
                yield XmlNode(child)

    def first_child_is_element(self) -> bool:
        # Leading text, even whitespace, is the first child node when present.
        if self._elem.text:
            return False
        for child in self._elem:
            return _is_element(child)
        return False

    def find(self, path: str) -> Optional["XmlNode"]:
        """Find the first descendant matching a ``/``-separated local-name path."""
        node: Optional[XmlNode] = self
        for part in path.split("/"):
            node = next(
                (c for c in node.element_children() if c.tag_name == part), None
            )
            if node is None:
                return None
        return node

    def get(self, attr: str, default: str = "") -> str:
        return self._elem.get(attr, default)

    def __repr__(self) -> str:
        return f"XmlNode({self.tag_name!r})"


def parse_xml(text: str) -> XmlNode:
    """Parse ``text`` into a tree and return its root element.

    Raises ``XmlParseError`` on malformed input; no partial tree is returned.
    """
    builder = ET.TreeBuilder(insert_comments=True, insert_pis=True)
    parser = ET.XMLParser(target=builder)
    try:
        parser.feed(text)
        root = parser.close()
    except ET.ParseError as exc:
        raise XmlParseError(f"Malformed record XML: {exc}") from exc
    return XmlNode(root)
