"""Load and validate analysis settings from a JSON document."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic.config import ConfigDict

from orgcheck.errors import ConfigurationError


logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "ORGCHECK_CONFIG"
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "defaults.json"


class ReportingConfig(BaseModel):
    """Thresholds used by the reporting-line and salary checks."""

    max_managers_to_root: int = Field(..., gt=0, strict=True)
    min_salary_factor: float = Field(..., gt=0.0)
    max_salary_factor: float = Field(..., gt=0.0)

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    @field_validator("min_salary_factor", "max_salary_factor", mode="before")
    @classmethod
    def _reject_booleans(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("must be a number, not a boolean")
        return value


class CsvSourceConfig(BaseModel):
    default_source: str = Field(..., min_length=1)
    max_record_count: int = Field(..., gt=0, strict=True)

    model_config = ConfigDict(frozen=True)


class AnalysisSettings(BaseModel):
    reporting: ReportingConfig
    csv_source: CsvSourceConfig

    model_config = ConfigDict(frozen=True)


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        setting = ".".join(str(part) for part in error["loc"]) or "<root>"
        parts.append(f"{setting}: {error['msg']}")
    return "; ".join(parts)


def parse_settings(data: Mapping[str, Any]) -> AnalysisSettings:
    """Validate a settings mapping, raising ConfigurationError on any problem."""

    try:
        settings = AnalysisSettings.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid configuration: {_describe_validation_error(exc)}"
        ) from exc
    reporting = settings.reporting
    if reporting.min_salary_factor > reporting.max_salary_factor:
        logger.warning(
            "min_salary_factor %.2f is greater than max_salary_factor %.2f; "
            "a manager may be reported as both underpaid and overpaid",
            reporting.min_salary_factor,
            reporting.max_salary_factor,
        )
    return settings


def _resolve_config_path(path: Path | str | None) -> Path:
    if path:
        return Path(path)
    env_path = os.getenv(CONFIG_PATH_ENV)
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_PATH


def load_settings(path: Path | str | None = None) -> AnalysisSettings:
    """Read settings from ``path``, ``$ORGCHECK_CONFIG`` or the bundled defaults."""

    config_path = _resolve_config_path(path)
    try:
        raw = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Configuration file not readable: {config_path} ({exc})") from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Configuration file is not valid JSON: {config_path} ({exc})") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file must hold a JSON object: {config_path}")
    logger.debug("Loaded configuration from %s", config_path)
    return parse_settings(data)


def apply_overrides(
    settings: AnalysisSettings,
    *,
    max_managers_to_root: Optional[int] = None,
    min_salary_factor: Optional[float] = None,
    max_salary_factor: Optional[float] = None,
    max_record_count: Optional[int] = None,
    default_source: Optional[str] = None,
) -> AnalysisSettings:
    """Return a validated copy of ``settings`` with the non-None overrides applied."""

    reporting = settings.reporting.model_dump()
    csv_source = settings.csv_source.model_dump()
    reporting_updates = {
        "max_managers_to_root": max_managers_to_root,
        "min_salary_factor": min_salary_factor,
        "max_salary_factor": max_salary_factor,
    }
    csv_updates = {
        "max_record_count": max_record_count,
        "default_source": default_source,
    }
    reporting.update({key: value for key, value in reporting_updates.items() if value is not None})
    csv_source.update({key: value for key, value in csv_updates.items() if value is not None})
    return parse_settings({"reporting": reporting, "csv_source": csv_source})
