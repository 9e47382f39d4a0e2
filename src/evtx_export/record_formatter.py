"""Per-record fragments for each output format."""
from __future__ import annotations

from evtx_export.formats import OutputFormat
from evtx_export.sources.base import Record
from evtx_export.tree_to_json import render
from evtx_export.xml_tree import parse_xml


def _text(value) -> str:
    return "" if value is None else str(value)


def format_csv(record: Record, sink) -> None:
    # Fields are quoted but not escaped; an embedded quote breaks the row.
    sink.write(
        f'"{_text(record.time_created())}",'
        f'"{_text(record.event_id())}",'
        f'"{_text(record.level())}"\n'
    )


def format_xml(record: Record, sink) -> None:
    sink.write(record.as_xml_text())
    sink.write("\n")


def format_json(record: Record, sink, lines: bool = False) -> None:
    root = parse_xml(record.as_xml_text())
    sink.write("{")
    render(root, sink)
    sink.write("}")
    if lines:
        sink.write("\n")


def format_record(record: Record, fmt: OutputFormat, sink) -> None:
    """Write the fragment of one record in ``fmt``.

    Raises ``RecordDecodeError`` when the record XML is unavailable (xml, json,
    jsonl) and ``XmlParseError`` when it is malformed (json, jsonl).
    """
    if fmt is OutputFormat.CSV:
        format_csv(record, sink)
    elif fmt is OutputFormat.XML:
        format_xml(record, sink)
    elif fmt is OutputFormat.JSON:
        format_json(record, sink)
    elif fmt is OutputFormat.JSONL:
        format_json(record, sink, lines=True)
    else:
        raise ValueError(f"Unsupported output format: {fmt!r}")
