"""REST API for running organization checks over uploaded CSVs."""

from __future__ import annotations

import logging

from fastapi import FastAPI, File, Form, HTTPException, UploadFile

from orgcheck.analysis import analyze_organization
from orgcheck.api.schemas import AnalysisReportResponse, ConfigResponse
from orgcheck.config import AnalysisSettings, apply_overrides, load_settings
from orgcheck.errors import ConfigurationError, OrgHierarchyError, SourceUnavailableError
from orgcheck.ingest import load_organization_text


logger = logging.getLogger(__name__)


def create_app(settings: AnalysisSettings | None = None) -> FastAPI:
    app = FastAPI(title="orgcheck")
    app.state.settings = settings if settings is not None else load_settings()

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/config", response_model=ConfigResponse)
    async def config() -> ConfigResponse:
        current: AnalysisSettings = app.state.settings
        return ConfigResponse(reporting=current.reporting, csv_source=current.csv_source)

    @app.post("/analyze", response_model=AnalysisReportResponse)
    async def analyze(
        employees: UploadFile = File(...),
        max_managers_to_root: int | None = Form(None),
        min_salary_factor: float | None = Form(None),
        max_salary_factor: float | None = Form(None),
    ) -> AnalysisReportResponse:
        try:
            run_settings = apply_overrides(
                app.state.settings,
                max_managers_to_root=max_managers_to_root,
                min_salary_factor=min_salary_factor,
                max_salary_factor=max_salary_factor,
            )
        except ConfigurationError as exc:
            raise HTTPException(status_code=422, detail=exc.to_dict()) from exc

        content = await employees.read()
        source = employees.filename or "upload"
        try:
            if not content:
                raise SourceUnavailableError(source, "empty upload")
            try:
                text = content.decode("utf-8-sig")
            except UnicodeDecodeError as exc:
                raise SourceUnavailableError(source, str(exc)) from exc
            organization = load_organization_text(
                text,
                max_record_count=run_settings.csv_source.max_record_count,
                source=source,
            )
            result = analyze_organization(organization, config=run_settings.reporting)
        except OrgHierarchyError as exc:
            logger.warning("Analysis of %s failed: %s", source, exc.message)
            raise HTTPException(status_code=400, detail=exc.to_dict()) from exc
        return AnalysisReportResponse.from_result(result)

    return app


__all__ = ["create_app"]
