"""Drive a full export run: envelope, records in order, separators."""
from __future__ import annotations

from dataclasses import dataclass

from evtx_export.errors import RecordRetrievalError
from evtx_export.formats import OutputFormat, envelope_for
from evtx_export.logging_setup import get_logger
from evtx_export.record_formatter import format_record
from evtx_export.sources.base import RecordSource

log = get_logger(__name__)


@dataclass(frozen=True)
class EnvelopeState:
    is_first_record: bool = True

    def advance(self) -> "EnvelopeState":
        return EnvelopeState(is_first_record=False)


@dataclass(frozen=True)
class RunSummary:
    fmt: OutputFormat
    written: int
    skipped: int


def write_record(record, fmt: OutputFormat, sink, state: EnvelopeState) -> EnvelopeState:
    """Write one record preceded by its separator and return the next state."""
    separator = envelope_for(fmt).separator
    if separator and not state.is_first_record:
        sink.write(separator)
    format_record(record, fmt, sink)
    return state.advance()


def run(record_count: int, fmt: OutputFormat, source: RecordSource, sink) -> RunSummary:
    """Write ``record_count`` records of ``source`` to ``sink`` as one document.

    Records that cannot be retrieved are logged and skipped. Any other error
    aborts the run; what was already written stays in the sink.
    """
    envelope = envelope_for(fmt)
    log.info("Starting export", format=fmt.value, records=record_count)

    sink.write(envelope.prologue)

    state = EnvelopeState()
    written = skipped = 0
    for index in range(record_count):
        try:
            record = source.get(index)
        except RecordRetrievalError as exc:
            log.warning("Failed to get record", index=index, error=str(exc))
            skipped += 1
            continue
        state = write_record(record, fmt, sink, state)
        written += 1

    sink.write(envelope.epilogue)

    log.info("Export finished", format=fmt.value, written=written, skipped=skipped)
    return RunSummary(fmt=fmt, written=written, skipped=skipped)
