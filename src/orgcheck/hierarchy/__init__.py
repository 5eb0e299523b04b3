"""Structural validation and reporting-line resolution."""

from .resolver import (
    ReportingLines,
    build_reporting_line,
    check_manager_references,
    find_root,
    resolve_reporting_lines,
)

__all__ = [
    "ReportingLines",
    "build_reporting_line",
    "check_manager_references",
    "find_root",
    "resolve_reporting_lines",
]
