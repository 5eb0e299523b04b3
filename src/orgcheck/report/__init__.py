"""Report sinks for analysis results."""

from .console import ConsoleReportsWriter, format_entries
from .export import JsonReportWriter

__all__ = ["ConsoleReportsWriter", "JsonReportWriter", "format_entries"]
