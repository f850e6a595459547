"""Composition root for wiring infrastructure adapters."""

from datetime import datetime

from budget_health.application.ports.budget_snapshot import BudgetSnapshotPort
from budget_health.application.ports.database import DatabaseEnginePort
from budget_health.application.use_cases.get_budget_details import (
    GetBudgetDetailsUseCase,
)
from budget_health.application.use_cases.get_dashboard import GetDashboardUseCase
from budget_health.application.use_cases.list_transactions import (
    ListTransactionsUseCase,
)
from budget_health.application.use_cases.refresh_dashboard import (
    DashboardRefresher,
)
from budget_health.domain.services.bar import BarCalculator
from budget_health.infrastructure.budget_repository import (
    SqlAlchemyBudgetRepository,
)
from budget_health.infrastructure.clock import SystemClock
from budget_health.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from budget_health.infrastructure.demo_repository import DemoBudgetRepository
from budget_health.infrastructure.logging.logger import get_app_logger
from budget_health.infrastructure.settings import (
    SUPPORTED_BACKENDS,
    BudgetHealthSettings,
)


def build_database_adapter(
    settings: BudgetHealthSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter instance.

    Raises:
        RuntimeError: If no database URL is configured.
    """
    settings = settings or BudgetHealthSettings.from_env()
    if not settings.database_url:
        raise RuntimeError(
            "SQLAlchemy backend requires a BUDGET_DB_URL value "
            "or a single data/*.db file."
        )
    return SqlAlchemyDatabaseEngineAdapter(settings.database_url)


def build_budget_repository(
    settings: BudgetHealthSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
    reference_date: datetime | None = None,
) -> BudgetSnapshotPort:
    """Return the configured snapshot repository.

    The demo backend builds its dataset around reference_date, so reports
    evaluated at another date still find an active budget.

    Raises:
        RuntimeError: If the backend is unsupported or lacks a database URL.
    """
    settings = settings or BudgetHealthSettings.from_env()
    if settings.backend not in SUPPORTED_BACKENDS:
        raise RuntimeError(f"Unsupported budget backend: {settings.backend}")
    if settings.backend == "demo":
        return DemoBudgetRepository(reference_date)
    resolved_db = db_port or build_database_adapter(settings)
    return SqlAlchemyBudgetRepository(resolved_db)


def build_bar_calculator(
    settings: BudgetHealthSettings | None = None,
) -> BarCalculator:
    """Return the BAR strategy described by the settings."""
    settings = settings or BudgetHealthSettings.from_env()
    return BarCalculator(
        curve_factor=settings.curve_factor,
        formula=settings.bar_formula,
    )


def build_dashboard_use_case(
    settings: BudgetHealthSettings | None = None,
    budget_repository: BudgetSnapshotPort | None = None,
    reference_date: datetime | None = None,
) -> GetDashboardUseCase:
    settings = settings or BudgetHealthSettings.from_env()
    return GetDashboardUseCase(
        budget_repository
        or build_budget_repository(settings, reference_date=reference_date),
        clock=SystemClock(),
        calculator=build_bar_calculator(settings),
        logger=get_app_logger(),
    )


def build_budget_details_use_case(
    settings: BudgetHealthSettings | None = None,
    budget_repository: BudgetSnapshotPort | None = None,
    reference_date: datetime | None = None,
) -> GetBudgetDetailsUseCase:
    settings = settings or BudgetHealthSettings.from_env()
    return GetBudgetDetailsUseCase(
        budget_repository
        or build_budget_repository(settings, reference_date=reference_date),
        clock=SystemClock(),
        calculator=build_bar_calculator(settings),
        logger=get_app_logger(),
    )


def build_list_transactions_use_case(
    settings: BudgetHealthSettings | None = None,
    budget_repository: BudgetSnapshotPort | None = None,
    reference_date: datetime | None = None,
) -> ListTransactionsUseCase:
    settings = settings or BudgetHealthSettings.from_env()
    return ListTransactionsUseCase(
        budget_repository
        or build_budget_repository(settings, reference_date=reference_date),
        logger=get_app_logger(),
    )


def build_dashboard_refresher(
    settings: BudgetHealthSettings | None = None,
    budget_repository: BudgetSnapshotPort | None = None,
    reference_date: datetime | None = None,
) -> DashboardRefresher:
    """Return a refresher using the configured debounce window."""
    settings = settings or BudgetHealthSettings.from_env()
    return DashboardRefresher(
        build_dashboard_use_case(
            settings,
            budget_repository,
            reference_date,
        ),
        debounce_ms=settings.debounce_ms,
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_budget_repository",
    "build_bar_calculator",
    "build_dashboard_use_case",
    "build_budget_details_use_case",
    "build_list_transactions_use_case",
    "build_dashboard_refresher",
]
