"""Configuration helpers for analysis thresholds and record sources."""

from .settings import (
    CONFIG_PATH_ENV,
    DEFAULT_CONFIG_PATH,
    AnalysisSettings,
    CsvSourceConfig,
    ReportingConfig,
    apply_overrides,
    load_settings,
    parse_settings,
)

__all__ = [
    "CONFIG_PATH_ENV",
    "DEFAULT_CONFIG_PATH",
    "AnalysisSettings",
    "CsvSourceConfig",
    "ReportingConfig",
    "apply_overrides",
    "load_settings",
    "parse_settings",
]
