"""Append-only text sink used by the writers."""
from __future__ import annotations

from typing import TextIO

from evtx_export.errors import OutputError


class OutputSink:
    """Wrap a text stream; write failures surface as ``OutputError``."""

    def __init__(self, stream: TextIO):
        self._stream = stream

    def write(self, text: str) -> None:
        if not text:
            return
        try:
            self._stream.write(text)
        except OSError as exc:
            raise OutputError(f"Failed to write output: {exc}") from exc

    def flush(self) -> None:
        try:
            self._stream.flush()
        except OSError as exc:
            raise OutputError(f"Failed to flush output: {exc}") from exc
