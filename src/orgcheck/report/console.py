"""Plain-text report sink."""

from __future__ import annotations

import sys
from typing import Callable, Mapping, TextIO, TypeVar

from orgcheck.analysis import AnalysisResult
from orgcheck.models import Employee


V = TypeVar("V")


def format_entries(entries: Mapping[Employee, V], line_formatter: Callable[[Employee, V], str]) -> str:
    """Render entries sorted by employee id, one tab-indented line each."""

    if not entries:
        return " none"
    lines = [
        line_formatter(employee, value)
        for employee, value in sorted(entries.items(), key=lambda item: item[0].id)
    ]
    return "".join(f"\n\t{line}" for line in lines)


class ConsoleReportsWriter:
    """Writes the three report sections to a text stream."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdout

    def _write_section(self, title: str, body: str) -> None:
        self.stream.write(f"{title}:{body}\n")

    def write_reports(self, result: AnalysisResult) -> None:
        self._write_section(
            "Too long reporting lines",
            format_entries(
                result.long_reporting_lines,
                lambda employee, line: f"{employee} reports to {list(line)}",
            ),
        )
        self._write_section(
            "Underpaid managers",
            format_entries(
                result.underpaid_managers,
                lambda employee, amount: f"{employee} earns less than intended by {amount:.2f}",
            ),
        )
        self._write_section(
            "Overpaid managers",
            format_entries(
                result.overpaid_managers,
                lambda employee, amount: f"{employee} earns more than intended by {amount:.2f}",
            ),
        )
        self.stream.flush()
