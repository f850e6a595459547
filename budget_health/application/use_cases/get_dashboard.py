"""Use case to build the budget health dashboard."""

from datetime import datetime

from budget_health.application.ports.budget_snapshot import BudgetSnapshotPort
from budget_health.application.ports.clock import ClockPort
from budget_health.domain.models import DashboardView
from budget_health.domain.services.bar import BarCalculator
from budget_health.domain.services.monthly import build_monthly_overview
from budget_health.domain.services.reports import (
    build_reports,
    select_active_budgets,
)
from budget_health.infrastructure.logging.logger import get_app_logger


class GetDashboardUseCase:
    """Build reports for every active budget plus the monthly overview."""

    def __init__(
        self,
        budget_repository: BudgetSnapshotPort,
        clock: ClockPort | None = None,
        calculator: BarCalculator | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            budget_repository: Port returning live budgeting records.
            clock: Optional clock used when no time is passed to execute;
                the local wall clock is read when omitted.
            calculator: Optional BAR strategy; defaults to the curve.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._budget_repository = budget_repository
        self._clock = clock
        self._calculator = calculator or BarCalculator()
        self._logger = logger or get_app_logger()

    def execute(self, now: datetime | None = None) -> DashboardView:
        """Return the dashboard computed from one snapshot.

        Args:
            now: Evaluation time; the clock supplies it when omitted.

        Returns:
            DashboardView: Active budget reports and the overview of the
            month containing now.
        """
        now = now or self._current_time()
        budgets = self._budget_repository.fetch_budgets()
        allocations = self._budget_repository.fetch_allocations()
        transactions = self._budget_repository.fetch_transactions()
        categories = self._budget_repository.fetch_categories()

        reports = build_reports(
            budgets,
            allocations,
            transactions,
            categories,
            now,
            calculator=self._calculator,
            logger=self._logger,
        )
        overview = build_monthly_overview(
            (now.year, now.month),
            transactions,
            select_active_budgets(budgets, now),
            logger=self._logger,
        )
        self._logger.info(
            f"Built {len(reports)} budget reports from {len(budgets)} budgets "
            f"and {len(transactions)} transactions"
        )
        return DashboardView(
            reports=reports,
            monthly_overview=overview,
            generated_at=now,
        )

    def _current_time(self) -> datetime:
        if self._clock is None:
            return datetime.now()
        return self._clock.now()


__all__ = ["GetDashboardUseCase"]
