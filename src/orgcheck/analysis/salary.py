"""Manager pay checks against the average salary of direct reports."""

from __future__ import annotations

from collections import defaultdict
from statistics import fmean
from typing import Dict

from orgcheck.errors import UnresolvedManagerError
from orgcheck.models import Employee, Organization


def direct_reports_by_manager(organization: Organization) -> Dict[int, list[Employee]]:
    grouped: dict[int, list[Employee]] = defaultdict(list)
    for employee in organization:
        if employee.manager_id is not None:
            grouped[employee.manager_id].append(employee)
    return dict(grouped)


def direct_report_average_salaries(organization: Organization) -> Dict[Employee, float]:
    """Map every manager to the mean salary of their direct reports."""

    averages: dict[Employee, float] = {}
    for manager_id, reports in direct_reports_by_manager(organization).items():
        manager = organization.get_by_id(manager_id)
        if manager is None:
            raise UnresolvedManagerError(manager_id, reports[0].id)
        averages[manager] = fmean(report.salary for report in reports)
    return averages


def find_underpaid_managers(organization: Organization, min_factor: float) -> Dict[Employee, float]:
    """Managers earning less than ``min_factor`` times their reports' average, with the deficit."""

    underpaid: dict[Employee, float] = {}
    for manager, average in direct_report_average_salaries(organization).items():
        deficit = min_factor * average - manager.salary
        if deficit > 0:
            underpaid[manager] = deficit
    return underpaid


def find_overpaid_managers(organization: Organization, max_factor: float) -> Dict[Employee, float]:
    """Managers earning more than ``max_factor`` times their reports' average, with the excess."""

    overpaid: dict[Employee, float] = {}
    for manager, average in direct_report_average_salaries(organization).items():
        excess = manager.salary - max_factor * average
        if excess > 0:
            overpaid[manager] = excess
    return overpaid
