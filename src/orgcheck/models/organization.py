"""Organization snapshot: employees indexed by id."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional

from orgcheck.errors import DuplicateEmployeeError
from orgcheck.models.employee import Employee


class Organization:
    """Collection of employees keyed by id.

    Built once per run and only read afterwards. Iteration order carries no
    meaning for any analysis.
    """

    def __init__(self, employees: Iterable[Employee] = ()):
        self._employees: dict[int, Employee] = {}
        for employee in employees:
            self.add_employee(employee)

    def add_employee(self, employee: Employee) -> None:
        """Insert ``employee``, raising DuplicateEmployeeError if its id is taken."""

        if employee.id in self._employees:
            raise DuplicateEmployeeError(employee.id)
        self._employees[employee.id] = employee

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._employees.get(employee_id)

    @property
    def employees(self) -> Mapping[int, Employee]:
        return MappingProxyType(self._employees)

    def all(self) -> tuple[Employee, ...]:
        return tuple(self._employees.values())

    def __len__(self) -> int:
        return len(self._employees)

    def __iter__(self) -> Iterator[Employee]:
        return iter(self._employees.values())

    def __contains__(self, employee_id: object) -> bool:
        return employee_id in self._employees

    def __repr__(self) -> str:
        return f"Organization(employees={len(self._employees)})"
