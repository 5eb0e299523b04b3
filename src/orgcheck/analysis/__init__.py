"""Checks over a resolved organization and the orchestrating service."""

from .reporting_lines import find_long_reporting_lines
from .salary import (
    direct_report_average_salaries,
    direct_reports_by_manager,
    find_overpaid_managers,
    find_underpaid_managers,
)
from .service import AnalysisResult, OrgHierarchyAnalyzer, ReportsWriter, analyze_organization

__all__ = [
    "AnalysisResult",
    "OrgHierarchyAnalyzer",
    "ReportsWriter",
    "analyze_organization",
    "direct_report_average_salaries",
    "direct_reports_by_manager",
    "find_long_reporting_lines",
    "find_overpaid_managers",
    "find_underpaid_managers",
]
