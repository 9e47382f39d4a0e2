"""Record source over an XML dump with one child element per record.

Accepts the tool's own ``xml`` output as well as ``wevtutil qe /f:xml``
output wrapped in a single root element::

    <Events>
    <Event xmlns="http://schemas.microsoft.com/win/2004/08/events/event">...</Event>
    <Event xmlns="http://schemas.microsoft.com/win/2004/08/events/event">...</Event>
    </Events>
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Union
import xml.etree.ElementTree as ET

from evtx_export.constants import EVENT_NAMESPACE
from evtx_export.errors import RecordRetrievalError, SourceOpenError
from evtx_export.logging_setup import get_logger
from evtx_export.sources.base import XmlTextRecord

log = get_logger(__name__)

# Serialize event records with their default namespace instead of "ns0:".
ET.register_namespace("", EVENT_NAMESPACE)


class XmlDumpRecordSource:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        try:
            root = ET.parse(str(self.path)).getroot()
        except (OSError, ET.ParseError) as exc:
            raise SourceOpenError(f"Failed to open XML dump {self.path}: {exc}") from exc
        self._records: List[ET.Element] = [
            child for child in root if isinstance(child.tag, str)
        ]
        log.debug("Loaded XML dump", path=str(self.path), records=len(self._records))

    def count(self) -> int:
        return len(self._records)

    def get(self, index: int) -> XmlTextRecord:
        if not 0 <= index < len(self._records):
            raise RecordRetrievalError(index, "index out of range")
        elem = self._records[index]
        # Whitespace between records belongs to the dump, not the record.
        elem.tail = None
        return XmlTextRecord(ET.tostring(elem, encoding="unicode"))

    def close(self) -> None:
        self._records = []

    def __enter__(self) -> "XmlDumpRecordSource":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
