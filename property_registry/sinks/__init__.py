"""Output sinks for exporting registry data."""

from property_registry.sinks.json_file import JsonFileSink

__all__ = ["JsonFileSink"]
