"""JSON report sink built on the API response schema."""

from __future__ import annotations

import logging
from pathlib import Path

from orgcheck.analysis import AnalysisResult
from orgcheck.api.schemas import AnalysisReportResponse


logger = logging.getLogger(__name__)


class JsonReportWriter:
    def __init__(self, path: Path):
        self.path = Path(path)

    def write_reports(self, result: AnalysisResult) -> None:
        payload = AnalysisReportResponse.from_result(result)
        self.path.write_text(payload.model_dump_json(indent=2), encoding="utf-8")
        logger.info("Wrote JSON report to %s", self.path)
