"""Output formats and their document envelopes."""
from __future__ import annotations

from enum import Enum
from typing import Dict, NamedTuple

from evtx_export.constants import CSV_HEADER, XML_ROOT_TAG
from evtx_export.errors import ConfigurationError


class OutputFormat(str, Enum):
    CSV = "csv"
    JSON = "json"
    JSONL = "jsonl"
    XML = "xml"


class Envelope(NamedTuple):
    prologue: str
    separator: str
    epilogue: str


ENVELOPES: Dict[OutputFormat, Envelope] = {
    OutputFormat.CSV: Envelope(f"{CSV_HEADER}\n", "", ""),
    OutputFormat.JSON: Envelope("[", ",", "]"),
    OutputFormat.JSONL: Envelope("", "", ""),
    OutputFormat.XML: Envelope(f"<{XML_ROOT_TAG}>\n", "", f"\n</{XML_ROOT_TAG}>"),
}


def envelope_for(fmt: OutputFormat) -> Envelope:
    return ENVELOPES[fmt]


def parse_format(name) -> OutputFormat:
    """Return the ``OutputFormat`` named by ``name``.

    Accepts an ``OutputFormat`` or its value, case-insensitive. Raises
    ``ConfigurationError`` for anything else.
    """
    if isinstance(name, OutputFormat):
        return name
    try:
        return OutputFormat(str(name or "").strip().lower())
    except ValueError:
        choices = "|".join(f.value for f in OutputFormat)
        raise ConfigurationError(
            f"Unknown output format '{name}' (expected one of {choices})"
        ) from None
