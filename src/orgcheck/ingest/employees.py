"""Helpers to load employee CSVs and emit organization snapshots."""

from __future__ import annotations

import csv
import logging
import re
from pathlib import Path
from typing import List, Optional, Tuple

from pydantic import ValidationError

from orgcheck.config import CsvSourceConfig
from orgcheck.errors import RecordParseError, SourceTooLargeError, SourceUnavailableError
from orgcheck.models import Employee, Organization


logger = logging.getLogger(__name__)

EMPLOYEE_CSV_HEADER = ("Id", "firstName", "lastName", "salary", "managerId")
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def _split_fields(line: str) -> List[str]:
    rows = list(csv.reader([line], skipinitialspace=True))
    return [field.strip() for field in rows[0]] if rows else []


def _parse_int(raw: str, field: str) -> int:
    if not _INTEGER_PATTERN.fullmatch(raw):
        raise ValueError(f"{field} '{raw}' is not an integer")
    return int(raw)


def parse_employee_line(line: str, *, line_number: int | None = None) -> Employee:
    """Parse ``Id,firstName,lastName,salary[,managerId]`` into an Employee."""

    try:
        fields = _split_fields(line)
    except csv.Error as exc:
        raise RecordParseError(line, str(exc), line_number=line_number) from exc
    if len(fields) not in (4, 5):
        raise RecordParseError(
            line,
            f"expected 4 or 5 fields, got {len(fields)}",
            line_number=line_number,
        )
    raw_id, first_name, last_name, raw_salary = fields[:4]
    raw_manager = fields[4] if len(fields) == 5 else ""
    try:
        return Employee(
            id=_parse_int(raw_id, "id"),
            first_name=first_name,
            last_name=last_name,
            salary=_parse_int(raw_salary, "salary"),
            manager_id=_parse_int(raw_manager, "managerId") if raw_manager else None,
        )
    except ValidationError as exc:
        reason = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        raise RecordParseError(line, reason, line_number=line_number) from exc
    except ValueError as exc:
        raise RecordParseError(line, str(exc), line_number=line_number) from exc


def _data_lines(text: str) -> List[Tuple[int, str]]:
    lines = text.splitlines()
    return [
        (number, line)
        for number, line in enumerate(lines[1:], start=2)
        if line.strip()
    ]


def load_organization_text(
    text: str,
    *,
    max_record_count: int,
    source: str = "<text>",
) -> Organization:
    """Build an Organization from CSV text whose first line is a header.

    The record count is checked against ``max_record_count`` before any
    line is parsed.
    """

    data_lines = _data_lines(text)
    if len(data_lines) > max_record_count:
        raise SourceTooLargeError(len(data_lines), max_record_count)

    organization = Organization()
    for number, line in data_lines:
        organization.add_employee(parse_employee_line(line, line_number=number))
    logger.info("Loaded %d employees from %s", len(organization), source)
    return organization


def load_organization(
    path: Optional[Path | str] = None,
    *,
    config: CsvSourceConfig,
) -> Organization:
    """Read an employee CSV file, falling back to ``config.default_source``."""

    source = Path(path) if path and str(path).strip() else Path(config.default_source)
    try:
        with source.open(newline="", encoding="utf-8-sig") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceUnavailableError(str(source), str(exc)) from exc
    return load_organization_text(
        text,
        max_record_count=config.max_record_count,
        source=str(source),
    )
