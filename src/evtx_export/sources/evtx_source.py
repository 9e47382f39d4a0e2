"""Record source over a Windows ``.evtx`` file, backed by python-evtx."""
from __future__ import annotations

from contextlib import ExitStack
from pathlib import Path
from typing import List, Union

from Evtx.BinaryParser import BinaryParserException
from Evtx.Evtx import Evtx

from evtx_export.errors import RecordDecodeError, RecordRetrievalError, SourceOpenError
from evtx_export.logging_setup import get_logger
from evtx_export.sources.base import XmlTextRecord

log = get_logger(__name__)

# python-evtx surfaces corrupt binary data through these.
_DECODE_ERRORS = (BinaryParserException, UnicodeDecodeError, ValueError)


class EvtxRecord(XmlTextRecord):
    """Record whose XML is rendered from the binary record on first use."""

    def __init__(self, record):
        super().__init__()
        self._record = record
        self._rendered = None

    def as_xml_text(self) -> str:
        if self._rendered is None:
            try:
                self._rendered = self._record.xml()
            except _DECODE_ERRORS as exc:
                raise RecordDecodeError(
                    f"Failed to render XML of record {self._record.record_num()}: {exc}"
                ) from exc
        return self._rendered


class EvtxRecordSource:
    """Index the records of an .evtx file and fetch them by position.

    Opening walks the chunk and record headers once and keeps the record
    handles, so ``get`` is a list lookup; XML is only rendered when a record's
    text is requested.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._stack = ExitStack()
        try:
            self._log = self._stack.enter_context(Evtx(str(self.path)))
            self._records: List = list(self._log.records())
        except (OSError, BinaryParserException, ValueError) as exc:
            self._stack.close()
            raise SourceOpenError(f"Failed to open .evtx file {self.path}: {exc}") from exc
        log.debug("Indexed evtx file", path=str(self.path), records=len(self._records))

    def count(self) -> int:
        return len(self._records)

    def get(self, index: int) -> EvtxRecord:
        if not 0 <= index < len(self._records):
            raise RecordRetrievalError(index, "index out of range")
        return EvtxRecord(self._records[index])

    def close(self) -> None:
        self._records = []
        self._stack.close()

    def __enter__(self) -> "EvtxRecordSource":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
