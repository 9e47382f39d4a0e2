"""Scalar fields (TimeCreated, EventID, Level) read from a record's XML."""
from __future__ import annotations

from typing import Dict, NamedTuple, Optional

from evtx_export.xml_tree import XmlNode, parse_xml

# Standard Windows event level names, as Event Viewer displays them.
LEVEL_NAMES: Dict[str, str] = {
    "0": "Information",
    "1": "Critical",
    "2": "Error",
    "3": "Warning",
    "4": "Information",
    "5": "Verbose",
}


class RecordFields(NamedTuple):
    time_created: Optional[str]
    event_id: Optional[int]
    level: Optional[str]


EMPTY_FIELDS = RecordFields(None, None, None)


def _event_id(root: XmlNode) -> Optional[int]:
    node = root.find("System/EventID")
    if node is None:
        return None
    try:
        return int(node.text_content.strip())
    except ValueError:
        return None


def _level(root: XmlNode) -> Optional[str]:
    rendered = root.find("RenderingInfo/Level")
    if rendered is not None and rendered.text_content.strip():
        return rendered.text_content.strip()
    node = root.find("System/Level")
    if node is None:
        return None
    raw = node.text_content.strip()
    return LEVEL_NAMES.get(raw, raw)


def _time_created(root: XmlNode) -> Optional[str]:
    node = root.find("System/TimeCreated")
    if node is None:
        return None
    return node.get("SystemTime") or None


def extract_fields(xml_text: str) -> RecordFields:
    """Return the scalar fields of a record; missing fields are ``None``.

    Raises ``XmlParseError`` when ``xml_text`` is malformed.
    """
    root = parse_xml(xml_text)
    return RecordFields(_time_created(root), _event_id(root), _level(root))
