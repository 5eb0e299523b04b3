"""Validate the organization tree and build each employee's reporting line.

A reporting line is the ordered tuple of manager ids from the employee's
direct manager up to the root. The root's line is empty.
"""

from __future__ import annotations

import logging
from typing import Dict, Mapping, Tuple

from orgcheck.errors import CycleDetectedError, InvalidRootError, UnresolvedManagerError
from orgcheck.models import Employee, Organization


logger = logging.getLogger(__name__)

ReportingLines = Dict[Employee, Tuple[int, ...]]


def find_root(organization: Organization) -> Employee:
    """Return the single employee without a manager."""

    roots = [employee for employee in organization if employee.manager_id is None]
    if len(roots) != 1:
        raise InvalidRootError([employee.id for employee in roots])
    return roots[0]


def check_manager_references(organization: Organization) -> None:
    """Raise UnresolvedManagerError for the first dangling manager id (by employee id)."""

    for employee in sorted(organization, key=lambda e: e.id):
        if employee.manager_id is not None and employee.manager_id not in organization:
            raise UnresolvedManagerError(employee.manager_id, employee.id)


def build_reporting_line(
    organization: Organization,
    employee: Employee,
    *,
    known_lines: Mapping[int, Tuple[int, ...]] | None = None,
) -> Tuple[int, ...]:
    """Walk manager references from ``employee`` up to the root.

    ``known_lines`` maps employee ids to already validated lines; reaching
    one of them ends the walk early with the same result.
    """

    known_lines = known_lines or {}
    path: list[int] = []
    visited: set[int] = set()
    current = employee
    # every step adds a distinct id, so a valid walk needs at most len(organization) steps
    for _ in range(len(organization) + 1):
        manager_id = current.manager_id
        if manager_id is None:
            return tuple(path)
        if manager_id in visited:
            raise CycleDetectedError(employee.id, path)
        manager = organization.get_by_id(manager_id)
        if manager is None:
            raise UnresolvedManagerError(manager_id, current.id)
        path.append(manager_id)
        visited.add(manager_id)
        cached = known_lines.get(manager_id)
        if cached is not None:
            return tuple(path) + cached
        current = manager
    raise CycleDetectedError(employee.id, path)


def resolve_reporting_lines(organization: Organization) -> ReportingLines:
    """Validate the hierarchy and return the reporting line of every employee.

    Raises InvalidRootError, UnresolvedManagerError or CycleDetectedError.
    Employees are processed in id order so failures are reproducible.
    """

    root = find_root(organization)
    check_manager_references(organization)
    logger.info("Resolving reporting lines for %d employees under root %s", len(organization), root.id)

    lines_by_id: dict[int, Tuple[int, ...]] = {root.id: ()}
    for employee in sorted(organization, key=lambda e: e.id):
        if employee.id in lines_by_id:
            continue
        lines_by_id[employee.id] = build_reporting_line(
            organization, employee, known_lines=lines_by_id
        )
        logger.debug("Employee %s reporting line: %s", employee.id, lines_by_id[employee.id])

    return {organization.get_by_id(employee_id): line for employee_id, line in lines_by_id.items()}
