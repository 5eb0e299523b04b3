"""Input adapters that turn raw employee data into organization snapshots."""

from .employees import (
    EMPLOYEE_CSV_HEADER,
    load_organization,
    load_organization_text,
    parse_employee_line,
)

__all__ = [
    "EMPLOYEE_CSV_HEADER",
    "load_organization",
    "load_organization_text",
    "parse_employee_line",
]
