"""Output sinks for exporting query results."""

from txn_analytics.sinks.console import ConsoleSink
from txn_analytics.sinks.json_file import JsonFileSink

__all__ = ["ConsoleSink", "JsonFileSink"]
