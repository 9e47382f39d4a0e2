"""Interfaces the pipeline expects from a record source."""
from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from evtx_export.errors import RecordDecodeError, XmlParseError
from evtx_export.sources.fields import EMPTY_FIELDS, RecordFields, extract_fields


@runtime_checkable
class Record(Protocol):
    """One log record, valid only for the iteration step that fetched it."""

    def as_xml_text(self) -> str:
        """Return the record XML; raise ``RecordDecodeError`` if unavailable."""
        ...

    def time_created(self) -> Optional[str]: ...

    def event_id(self) -> Optional[int]: ...

    def level(self) -> Optional[str]: ...


@runtime_checkable
class RecordSource(Protocol):
    def count(self) -> int: ...

    def get(self, index: int) -> Record:
        """Return record ``index``; raise ``RecordRetrievalError`` on failure."""
        ...

    def close(self) -> None: ...


class XmlTextRecord:
    """Record whose scalar fields are read back from its XML text.

    Subclasses override ``as_xml_text`` when the text is rendered lazily.
    """

    def __init__(self, xml_text: str = ""):
        self._xml_text = xml_text
        self._fields: Optional[RecordFields] = None

    def as_xml_text(self) -> str:
        return self._xml_text

    def _scalar_fields(self) -> RecordFields:
        if self._fields is None:
            # Unreadable records still produce a csv row, with empty fields.
            try:
                self._fields = extract_fields(self.as_xml_text())
            except (RecordDecodeError, XmlParseError):
                self._fields = EMPTY_FIELDS
        return self._fields

    def time_created(self) -> Optional[str]:
        return self._scalar_fields().time_created

    def event_id(self) -> Optional[int]:
        return self._scalar_fields().event_id

    def level(self) -> Optional[str]:
        return self._scalar_fields().level
