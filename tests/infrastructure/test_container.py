"""Tests for the composition root."""

from datetime import datetime
from decimal import Decimal

import pytest

from budget_health.application.use_cases.refresh_dashboard import (
    DashboardRefresher,
)
from budget_health.infrastructure import container
from budget_health.infrastructure.budget_repository import (
    SqlAlchemyBudgetRepository,
)
from budget_health.infrastructure.clock import SystemClock
from budget_health.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from budget_health.infrastructure.demo_repository import DemoBudgetRepository
from budget_health.infrastructure.settings import BudgetHealthSettings


@pytest.fixture(autouse=True)
def _quiet_logger(monkeypatch):
    monkeypatch.setattr(container, "get_app_logger", lambda: None)


def test_demo_backend_builds_demo_repository() -> None:
    settings = BudgetHealthSettings(backend="demo")

    repository = container.build_budget_repository(settings)

    assert isinstance(repository, DemoBudgetRepository)


def test_sqlalchemy_backend_builds_sql_repository() -> None:
    settings = BudgetHealthSettings(database_url="sqlite:///budget.db")

    repository = container.build_budget_repository(settings)

    assert isinstance(repository, SqlAlchemyBudgetRepository)


def test_database_adapter_uses_configured_url() -> None:
    settings = BudgetHealthSettings(database_url="sqlite:///budget.db")

    adapter = container.build_database_adapter(settings)

    assert isinstance(adapter, SqlAlchemyDatabaseEngineAdapter)
    assert adapter._db_url == "sqlite:///budget.db"


def test_sqlalchemy_backend_requires_url() -> None:
    with pytest.raises(RuntimeError):
        container.build_budget_repository(BudgetHealthSettings())


def test_unsupported_backend_is_rejected() -> None:
    with pytest.raises(RuntimeError):
        container.build_budget_repository(BudgetHealthSettings(backend="csv"))


def test_bar_calculator_follows_settings() -> None:
    settings = BudgetHealthSettings(
        backend="demo",
        curve_factor=Decimal("2"),
        bar_formula="linear",
    )

    calculator = container.build_bar_calculator(settings)

    assert calculator.curve_factor == Decimal("2")
    assert calculator.formula == "linear"


def test_refresher_uses_configured_debounce() -> None:
    settings = BudgetHealthSettings(backend="demo", debounce_ms=250)

    refresher = container.build_dashboard_refresher(settings)

    assert isinstance(refresher, DashboardRefresher)
    assert refresher._debounce_seconds == 0.25


def test_use_case_builders_accept_a_repository() -> None:
    settings = BudgetHealthSettings(backend="demo")
    repository = DemoBudgetRepository()

    details = container.build_budget_details_use_case(settings, repository)
    listing = container.build_list_transactions_use_case(settings, repository)

    assert details._budget_repository is repository
    assert listing._budget_repository is repository


def test_demo_repository_is_built_around_the_reference_date() -> None:
    settings = BudgetHealthSettings(backend="demo")

    repository = container.build_budget_repository(
        settings,
        reference_date=datetime(2023, 7, 10, 12),
    )

    current = repository.fetch_budgets()[-1]
    assert current.start_date == datetime(2023, 7, 1)


def test_use_cases_receive_the_system_clock() -> None:
    settings = BudgetHealthSettings(backend="demo")

    dashboard = container.build_dashboard_use_case(settings)
    details = container.build_budget_details_use_case(settings)

    assert isinstance(dashboard._clock, SystemClock)
    assert isinstance(details._clock, SystemClock)
