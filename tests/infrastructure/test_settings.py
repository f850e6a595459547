"""Tests for infrastructure settings."""

from decimal import Decimal
from pathlib import Path

import pytest

from budget_health.infrastructure import settings as settings_module
from budget_health.infrastructure.settings import BudgetHealthSettings


@pytest.fixture(autouse=True)
def _isolate(monkeypatch, tmp_path: Path):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        settings_module,
        "get_app_logger",
        lambda: _RecordingLogger(),
    )
    for name in (
        "BUDGET_BACKEND",
        "BUDGET_DB_URL",
        "BAR_CURVE_FACTOR",
        "BAR_FORMULA",
        "DASHBOARD_DEBOUNCE_MS",
    ):
        monkeypatch.delenv(name, raising=False)


class _RecordingLogger:
    warnings: list[str] = []

    def warning(self, message: str) -> None:
        self.warnings.append(message)


def test_defaults_without_environment() -> None:
    settings = BudgetHealthSettings.from_env()

    assert settings.backend == "sqlalchemy"
    assert settings.database_url is None
    assert settings.curve_factor == Decimal("1.5")
    assert settings.bar_formula == "curve"
    assert settings.debounce_ms == 100


def test_from_env_reads_every_key(monkeypatch) -> None:
    monkeypatch.setenv("BUDGET_BACKEND", "Demo")
    monkeypatch.setenv("BUDGET_DB_URL", "sqlite:///budget.db")
    monkeypatch.setenv("BAR_CURVE_FACTOR", "1.8")
    monkeypatch.setenv("BAR_FORMULA", "LINEAR")
    monkeypatch.setenv("DASHBOARD_DEBOUNCE_MS", "250")

    settings = BudgetHealthSettings.from_env()

    assert settings.backend == "demo"
    assert settings.database_url == "sqlite:///budget.db"
    assert settings.curve_factor == Decimal("1.8")
    assert settings.bar_formula == "linear"
    assert settings.debounce_ms == 250


def test_from_mapping_uses_dotted_keys() -> None:
    settings = BudgetHealthSettings.from_mapping(
        {"bar.curveFactor": 2, "dashboard.debounceMs": 50, "backend": "demo"}
    )

    assert settings.curve_factor == Decimal("2")
    assert settings.debounce_ms == 50


@pytest.mark.parametrize(
    "values",
    [
        {"bar.curveFactor": "0.5"},
        {"bar.curveFactor": "steep"},
        {"bar.curveFactor": "Infinity"},
        {"bar.formula": "exponential"},
        {"dashboard.debounceMs": "-1"},
        {"dashboard.debounceMs": "soon"},
    ],
)
def test_invalid_values_fall_back_with_warning(values) -> None:
    _RecordingLogger.warnings.clear()

    settings = BudgetHealthSettings.from_mapping({"backend": "demo", **values})

    assert settings.curve_factor == Decimal("1.5")
    assert settings.bar_formula == "curve"
    assert settings.debounce_ms == 100
    assert len(_RecordingLogger.warnings) == 1


def test_default_database_url_uses_single_data_file(tmp_path: Path) -> None:
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "budget.db").touch()

    settings = BudgetHealthSettings.from_env()

    assert settings.database_url == f"sqlite:///{(data_dir / 'budget.db').resolve()}"


def test_default_database_url_is_ambiguous_with_many_files(tmp_path: Path) -> None:
    _RecordingLogger.warnings.clear()
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "a.db").touch()
    (data_dir / "b.db").touch()

    settings = BudgetHealthSettings.from_env()

    assert settings.database_url is None
    assert "Multiple .db files" in _RecordingLogger.warnings[0]
