"""Flag employees with too many managers between them and the root."""

from __future__ import annotations

from typing import Dict, Mapping, Tuple

from orgcheck.models import Employee


def find_long_reporting_lines(
    reporting_lines: Mapping[Employee, Tuple[int, ...]],
    max_managers_to_root: int,
) -> Dict[Employee, Tuple[int, ...]]:
    # the direct manager is the first hop and does not count toward the limit
    allowed = max_managers_to_root + 1
    return {
        employee: line
        for employee, line in reporting_lines.items()
        if len(line) > allowed
    }
