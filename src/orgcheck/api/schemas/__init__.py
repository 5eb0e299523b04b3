"""Pydantic models for API I/O."""

from .config import ConfigResponse
from .report import (
    AnalysisReportResponse,
    EmployeeResponse,
    LongReportingLineResponse,
    SalaryAnomalyResponse,
)

__all__ = [
    "AnalysisReportResponse",
    "ConfigResponse",
    "EmployeeResponse",
    "LongReportingLineResponse",
    "SalaryAnomalyResponse",
]
