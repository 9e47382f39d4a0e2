import io

import pytest

from evtx_export.errors import RecordDecodeError, RecordRetrievalError
from evtx_export.sink import OutputSink


class FakeRecord:
    """In-memory record; ``xml=None`` makes ``as_xml_text`` fail."""

    def __init__(self, xml=None, time_created=None, event_id=None, level=None):
        self._xml = xml
        self._time_created = time_created
        self._event_id = event_id
        self._level = level

    def as_xml_text(self):
        if self._xml is None:
            raise RecordDecodeError("no xml for record")
        return self._xml

    def time_created(self):
        return self._time_created

    def event_id(self):
        return self._event_id

    def level(self):
        return self._level


class FakeSource:
    """Source over a list of records; ``None`` entries fail retrieval."""

    def __init__(self, records):
        self._records = list(records)
        self.requested = []

    def count(self):
        return len(self._records)

    def get(self, index):
        self.requested.append(index)
        record = self._records[index]
        if record is None:
            raise RecordRetrievalError(index, "unreadable")
        return record

    def close(self):
        pass


@pytest.fixture
def buf():
    return io.StringIO()


@pytest.fixture
def sink(buf):
    return OutputSink(buf)


SAMPLE_EVENT = (
    '<Event xmlns="http://schemas.microsoft.com/win/2004/08/events/event">'
    "<System>"
    '<Provider Name="Microsoft-Windows-Security-Auditing"/>'
    "<EventID>4624</EventID>"
    "<Level>0</Level>"
    '<TimeCreated SystemTime="2024-01-01T00:00:00Z"/>'
    "<Computer>host01</Computer>"
    "</System>"
    "<EventData>"
    '<Data Name="TargetUserName">alice</Data>'
    "</EventData>"
    "</Event>"
)
