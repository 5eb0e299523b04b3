import json
from pathlib import Path

import pytest

from orgcheck.config import (
    CONFIG_PATH_ENV,
    AnalysisSettings,
    apply_overrides,
    load_settings,
    parse_settings,
)
from orgcheck.errors import ConfigurationError


def _settings_payload(**reporting) -> dict:
    payload = {
        "reporting": {
            "max_managers_to_root": 4,
            "min_salary_factor": 1.2,
            "max_salary_factor": 1.5,
        },
        "csv_source": {"default_source": "employees.csv", "max_record_count": 1000},
    }
    payload["reporting"].update(reporting)
    return payload


def test_bundled_defaults_load(monkeypatch):
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)

    settings = load_settings()

    assert isinstance(settings, AnalysisSettings)
    assert settings.reporting.max_managers_to_root == 4
    assert settings.csv_source.max_record_count == 1000


def test_load_settings_from_env_path(tmp_path: Path, monkeypatch):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(_settings_payload(max_managers_to_root=2)), encoding="utf-8")
    monkeypatch.setenv(CONFIG_PATH_ENV, str(path))

    assert load_settings().reporting.max_managers_to_root == 2


@pytest.mark.parametrize(
    "reporting",
    [
        {"max_managers_to_root": 0},
        {"min_salary_factor": -1.0},
        {"max_salary_factor": "lots"},
        {"min_salary_factor": float("inf")},
        {"max_salary_factor": float("nan")},
        {"max_managers_to_root": True},
        {"min_salary_factor": True},
    ],
)
def test_invalid_values_are_configuration_errors(reporting):
    with pytest.raises(ConfigurationError) as excinfo:
        parse_settings(_settings_payload(**reporting))

    assert next(iter(reporting)) in excinfo.value.message


def test_missing_setting_is_configuration_error():
    payload = _settings_payload()
    del payload["csv_source"]["max_record_count"]

    with pytest.raises(ConfigurationError) as excinfo:
        parse_settings(payload)

    assert "csv_source.max_record_count" in excinfo.value.message


def test_missing_file_is_configuration_error(tmp_path: Path):
    with pytest.raises(ConfigurationError):
        load_settings(tmp_path / "nope.json")


def test_invalid_json_is_configuration_error(tmp_path: Path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_settings(path)


def test_apply_overrides_validates_and_ignores_none():
    settings = parse_settings(_settings_payload())

    updated = apply_overrides(settings, max_managers_to_root=2, min_salary_factor=None)

    assert updated.reporting.max_managers_to_root == 2
    assert updated.reporting.min_salary_factor == pytest.approx(1.2)
    assert settings.reporting.max_managers_to_root == 4
    with pytest.raises(ConfigurationError):
        apply_overrides(settings, max_record_count=0)


def test_json_infinity_and_booleans_are_rejected(tmp_path: Path):
    path = tmp_path / "settings.json"
    path.write_text(
        '{"reporting": {"max_managers_to_root": true, "min_salary_factor": Infinity, '
        '"max_salary_factor": 1.5}, "csv_source": {"default_source": "e.csv", "max_record_count": 10}}',
        encoding="utf-8",
    )

    with pytest.raises(ConfigurationError) as excinfo:
        load_settings(path)

    assert "reporting.max_managers_to_root" in excinfo.value.message
    assert "reporting.min_salary_factor" in excinfo.value.message
