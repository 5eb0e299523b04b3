"""Command-line interface for checking an organization snapshot."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from orgcheck.analysis import AnalysisResult, OrgHierarchyAnalyzer
from orgcheck.config import apply_overrides, load_settings
from orgcheck.errors import OrgHierarchyError
from orgcheck.report import ConsoleReportsWriter, JsonReportWriter


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Report long reporting lines and under/overpaid managers"
    )
    parser.add_argument(
        "source",
        nargs="?",
        default=None,
        help="Path to the employees CSV (defaults to the configured source)",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to a JSON settings file")
    parser.add_argument(
        "--max-managers",
        type=int,
        default=None,
        help="Maximum number of managers between an employee and the root",
    )
    parser.add_argument(
        "--min-factor",
        type=float,
        default=None,
        help="Minimum manager salary as a multiple of the direct reports' average",
    )
    parser.add_argument(
        "--max-factor",
        type=float,
        default=None,
        help="Maximum manager salary as a multiple of the direct reports' average",
    )
    parser.add_argument("--max-records", type=int, default=None, help="Maximum number of employee records")
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Optional path to also write the report as JSON",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


class _FanOutWriter:
    def __init__(self, *writers):
        self.writers = writers

    def write_reports(self, result: AnalysisResult) -> None:
        for writer in self.writers:
            writer.write_reports(result)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        settings = apply_overrides(
            load_settings(args.config),
            max_managers_to_root=args.max_managers,
            min_salary_factor=args.min_factor,
            max_salary_factor=args.max_factor,
            max_record_count=args.max_records,
        )
        writers = []
        # the JSON report is written before anything reaches stdout
        if args.report:
            writers.append(JsonReportWriter(args.report))
        writers.append(ConsoleReportsWriter(sys.stdout))
        OrgHierarchyAnalyzer(settings, _FanOutWriter(*writers)).run(args.source)
    except OrgHierarchyError as exc:
        print(f"error [{exc.kind.value}]: {exc.message}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error [report]: could not write report: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
