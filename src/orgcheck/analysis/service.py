"""Run the full analysis: load, resolve, analyze and hand results to a sink."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping, Optional, Protocol, Tuple

from orgcheck.analysis.reporting_lines import find_long_reporting_lines
from orgcheck.analysis.salary import find_overpaid_managers, find_underpaid_managers
from orgcheck.config import AnalysisSettings, ReportingConfig
from orgcheck.hierarchy import resolve_reporting_lines
from orgcheck.ingest import load_organization
from orgcheck.models import Employee, Organization


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    long_reporting_lines: Mapping[Employee, Tuple[int, ...]]
    underpaid_managers: Mapping[Employee, float]
    overpaid_managers: Mapping[Employee, float]


class ReportsWriter(Protocol):
    def write_reports(self, result: AnalysisResult) -> None:
        ...


OrganizationLoader = Callable[[Optional[Path | str]], Organization]


def analyze_organization(organization: Organization, *, config: ReportingConfig) -> AnalysisResult:
    """Resolve the hierarchy, then run every check.

    Structural errors abort before any check runs, so a result is either
    complete or not produced at all.
    """

    reporting_lines = resolve_reporting_lines(organization)
    result = AnalysisResult(
        long_reporting_lines=find_long_reporting_lines(reporting_lines, config.max_managers_to_root),
        underpaid_managers=find_underpaid_managers(organization, config.min_salary_factor),
        overpaid_managers=find_overpaid_managers(organization, config.max_salary_factor),
    )
    logger.info(
        "Analysis found %d long reporting lines, %d underpaid and %d overpaid managers",
        len(result.long_reporting_lines),
        len(result.underpaid_managers),
        len(result.overpaid_managers),
    )
    return result


class OrgHierarchyAnalyzer:
    """Sequences the load, resolve and report stages for one source."""

    def __init__(
        self,
        settings: AnalysisSettings,
        writer: ReportsWriter,
        loader: OrganizationLoader | None = None,
    ):
        self.settings = settings
        self.writer = writer
        self._loader = loader

    def _load(self, source: Optional[Path | str]) -> Organization:
        if self._loader is not None:
            return self._loader(source)
        return load_organization(source, config=self.settings.csv_source)

    def run(self, source: Optional[Path | str] = None) -> AnalysisResult:
        organization = self._load(source)
        result = analyze_organization(organization, config=self.settings.reporting)
        self.writer.write_reports(result)
        return result
