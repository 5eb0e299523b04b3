from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from orgcheck.analysis import AnalysisResult
from orgcheck.models import Employee


class EmployeeResponse(BaseModel):
    id: int
    first_name: str
    last_name: str
    salary: int
    manager_id: Optional[int]

    @classmethod
    def from_employee(cls, employee: Employee) -> "EmployeeResponse":
        return cls(
            id=employee.id,
            first_name=employee.first_name,
            last_name=employee.last_name,
            salary=employee.salary,
            manager_id=employee.manager_id,
        )


class LongReportingLineResponse(BaseModel):
    employee: EmployeeResponse
    reporting_line: List[int]
    managers_to_root: int


class SalaryAnomalyResponse(BaseModel):
    employee: EmployeeResponse
    amount: float


class AnalysisReportResponse(BaseModel):
    long_reporting_lines: List[LongReportingLineResponse]
    underpaid_managers: List[SalaryAnomalyResponse]
    overpaid_managers: List[SalaryAnomalyResponse]

    @classmethod
    def from_result(cls, result: AnalysisResult) -> "AnalysisReportResponse":
        def anomalies(mapping) -> list[SalaryAnomalyResponse]:
            return [
                SalaryAnomalyResponse(employee=EmployeeResponse.from_employee(employee), amount=amount)
                for employee, amount in sorted(mapping.items(), key=lambda item: item[0].id)
            ]

        return cls(
            long_reporting_lines=[
                LongReportingLineResponse(
                    employee=EmployeeResponse.from_employee(employee),
                    reporting_line=list(line),
                    managers_to_root=len(line),
                )
                for employee, line in sorted(
                    result.long_reporting_lines.items(), key=lambda item: item[0].id
                )
            ],
            underpaid_managers=anomalies(result.underpaid_managers),
            overpaid_managers=anomalies(result.overpaid_managers),
        )
