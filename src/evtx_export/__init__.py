"""Convert Windows event log records to CSV, JSON, JSON-Lines or XML."""

__version__ = "0.1.0"
