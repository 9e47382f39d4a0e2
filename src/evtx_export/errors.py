"""Error kinds raised by the export pipeline.

Only ``RecordRetrievalError`` is recoverable: the stream writer logs it and
skips the record. Everything else aborts the run and is turned into an exit
status by the CLI.
"""


class EvtxExportError(Exception):
    """Base class for all export errors."""


class ConfigurationError(EvtxExportError):
    """Unknown format, unknown input type or invalid settings."""


class SourceOpenError(EvtxExportError):
    """The input container could not be opened or indexed."""


class RecordRetrievalError(EvtxExportError):
    """A record index could not be fetched from the source."""

    def __init__(self, index: int, reason: str = ""):
        self.index = index
        self.reason = reason
        msg = f"Failed to get record {index}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class RecordDecodeError(EvtxExportError):
    """The XML text of a fetched record could not be obtained."""


class XmlParseError(EvtxExportError):
    """A record's XML text is malformed."""


class OutputError(EvtxExportError):
    """The output sink rejected a write."""
