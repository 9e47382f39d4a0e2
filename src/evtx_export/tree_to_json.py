"""Incremental XML -> JSON object rendering.

``render(node, sink)`` writes the element children of ``node`` as members of a
JSON object straight to the sink; the caller writes the surrounding braces.
Nothing is buffered, so the output of a record is never held as a document.

Conventions:

- keys are the local tag names of the child elements
- a child whose first child node is an element is a container and renders as
  a nested object; every other child is a leaf and renders as its
  concatenated text content (``""`` when empty)
- comments and processing instructions are skipped
- all leaf values are strings, no number or boolean coercion

Only the first child node decides leaf vs container. A mixed element such as
``<A>text<B>1</B></A>`` is a leaf and renders as ``"A":"text1"``.

Keys and values are written without JSON escaping, so a value containing a
quote, backslash or control character produces invalid JSON. Records rendered
from .evtx files rarely contain these, but the output is not guaranteed to be
strict JSON.
"""
from __future__ import annotations

from typing import NamedTuple, Union

from evtx_export.xml_tree import XmlNode


class Leaf(NamedTuple):
    text: str


class Container(NamedTuple):
    node: XmlNode


def classify(node: XmlNode) -> Union[Leaf, Container]:
    if node.first_child_is_element():
        return Container(node)
    return Leaf(node.text_content)


def render(node: XmlNode, sink) -> None:
    first = True
    for child in node.element_children():
        if not first:
            sink.write(",")
        first = False

        sink.write(f'"{child.tag_name}":')
        shape = classify(child)
        if isinstance(shape, Container):
            sink.write("{")
            render(shape.node, sink)
            sink.write("}")
        else:
            sink.write(f'"{shape.text}"')
