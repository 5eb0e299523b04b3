"""Error taxonomy shared by every stage of an analysis run.

All failures are fatal for the current run. Each exception carries a
``kind`` so callers at the boundary (CLI, HTTP API) can report the failure
without matching on concrete classes.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence


class ErrorKind(str, Enum):
    SOURCE_UNAVAILABLE = "source_unavailable"
    SOURCE_TOO_LARGE = "source_too_large"
    RECORD_PARSE = "record_parse"
    DUPLICATE_EMPLOYEE = "duplicate_employee"
    INVALID_ROOT = "invalid_root"
    UNRESOLVED_MANAGER = "unresolved_manager"
    CYCLE_DETECTED = "cycle_detected"
    CONFIGURATION = "configuration"


class OrgHierarchyError(Exception):
    """Base class for all organization analysis failures."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind.value, "message": self.message}


class ConfigurationError(OrgHierarchyError):
    """A required setting is missing, malformed or not positive."""

    kind = ErrorKind.CONFIGURATION


class SourceUnavailableError(OrgHierarchyError):
    """The backing record source cannot be opened or read."""

    kind = ErrorKind.SOURCE_UNAVAILABLE

    def __init__(self, source: str, reason: str):
        super().__init__(f"Employee source is missing or unreadable: {source} ({reason})")
        self.source = source


class SourceTooLargeError(OrgHierarchyError):
    kind = ErrorKind.SOURCE_TOO_LARGE

    def __init__(self, record_count: int, max_record_count: int):
        super().__init__(
            f"The source is too large: it contains {record_count} records, "
            f"while the allowed maximum is {max_record_count}"
        )
        self.record_count = record_count
        self.max_record_count = max_record_count


class RecordParseError(OrgHierarchyError):
    """A single employee record could not be parsed.

    The underlying cause is chained with ``raise ... from``.
    """

    kind = ErrorKind.RECORD_PARSE

    def __init__(self, line: str, reason: str, *, line_number: int | None = None):
        where = f" on line {line_number}" if line_number is not None else ""
        shown = line if len(line) <= 200 else f"{line[:200]}..."
        super().__init__(f"Error parsing employee record{where}: {shown!r} ({reason})")
        self.line = line
        self.line_number = line_number
        self.reason = reason


class DuplicateEmployeeError(OrgHierarchyError):
    kind = ErrorKind.DUPLICATE_EMPLOYEE

    def __init__(self, employee_id: int):
        super().__init__(f"Duplicate employee id: {employee_id}")
        self.employee_id = employee_id


class InvalidRootError(OrgHierarchyError):
    kind = ErrorKind.INVALID_ROOT

    def __init__(self, root_ids: Sequence[int]):
        self.root_ids = tuple(sorted(root_ids))
        super().__init__(
            "The hierarchy must have exactly one employee without a manager, "
            f"but found {len(self.root_ids)}: {list(self.root_ids)}"
        )


class UnresolvedManagerError(OrgHierarchyError):
    kind = ErrorKind.UNRESOLVED_MANAGER

    def __init__(self, manager_id: int, employee_id: int):
        super().__init__(
            f"Bad manager id [{manager_id}] specified for employee [{employee_id}]"
        )
        self.manager_id = manager_id
        self.employee_id = employee_id


class CycleDetectedError(OrgHierarchyError):
    kind = ErrorKind.CYCLE_DETECTED

    def __init__(self, employee_id: int, path: Sequence[int]):
        self.employee_id = employee_id
        self.path = tuple(path)
        super().__init__(
            f"Circular reference detected in hierarchy for employee [{employee_id}]. "
            f"The path: {list(self.path)}"
        )
