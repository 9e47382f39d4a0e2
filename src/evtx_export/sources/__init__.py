"""Record sources.

``open_source`` picks the source by file suffix. The source modules are
imported on demand.
"""
from pathlib import Path
from typing import Union

from evtx_export.errors import ConfigurationError
from evtx_export.sources.base import Record, RecordSource, XmlTextRecord

SUPPORTED_SUFFIXES = (".evtx", ".xml")


def open_source(path: Union[str, Path]) -> RecordSource:
    p = Path(path)
    suffix = p.suffix.lower()
    if suffix == ".evtx":
        from evtx_export.sources.evtx_source import EvtxRecordSource

        return EvtxRecordSource(p)
    if suffix == ".xml":
        from evtx_export.sources.xml_source import XmlDumpRecordSource

        return XmlDumpRecordSource(p)
    raise ConfigurationError(
        f"Unsupported input '{p}' (expected one of {', '.join(SUPPORTED_SUFFIXES)})"
    )


__all__ = ["Record", "RecordSource", "XmlTextRecord", "open_source", "SUPPORTED_SUFFIXES"]
