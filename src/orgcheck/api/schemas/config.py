from __future__ import annotations

from pydantic import BaseModel

from orgcheck.config import CsvSourceConfig, ReportingConfig


class ConfigResponse(BaseModel):
    reporting: ReportingConfig
    csv_source: CsvSourceConfig
