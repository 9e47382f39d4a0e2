"""Central constants for the evtx_export project."""

# Output files are plain UTF-8, no BOM.
OUTPUT_ENCODING = "utf-8"

CSV_HEADER = "TimeCreated,EventID,Level"

XML_ROOT_TAG = "Events"

# Default namespace of records rendered from .evtx files.
EVENT_NAMESPACE = "http://schemas.microsoft.com/win/2004/08/events/event"
