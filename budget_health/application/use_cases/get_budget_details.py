"""Use case to describe one budget allocation by allocation."""

from datetime import datetime

from budget_health.application.ports.budget_snapshot import BudgetSnapshotPort
from budget_health.application.ports.clock import ClockPort
from budget_health.domain.models import BudgetDetails
from budget_health.domain.services.bar import BarCalculator
from budget_health.domain.services.reports import build_budget_details
from budget_health.infrastructure.logging.logger import get_app_logger


class BudgetNotFoundError(LookupError):
    """Raised when a budget id does not match any live budget."""


class GetBudgetDetailsUseCase:
    """Build the details view of a single budget."""

    def __init__(
        self,
        budget_repository: BudgetSnapshotPort,
        clock: ClockPort | None = None,
        calculator: BarCalculator | None = None,
        logger=None,
    ) -> None:
        self._budget_repository = budget_repository
        self._clock = clock
        self._calculator = calculator or BarCalculator()
        self._logger = logger or get_app_logger()

    def execute(
        self,
        budget_id: str,
        now: datetime | None = None,
    ) -> BudgetDetails:
        """Return the details of a budget.

        Args:
            budget_id: Id of the budget to describe.
            now: Evaluation time; the clock supplies it when omitted.

        Returns:
            BudgetDetails: Allocations, transactions and totals.

        Raises:
            BudgetNotFoundError: If no live budget has that id.
        """
        now = now or self._current_time()
        budget = next(
            (
                item
                for item in self._budget_repository.fetch_budgets()
                if item.id == budget_id
            ),
            None,
        )
        if budget is None:
            self._logger.warning(f"Budget not found: {budget_id}")
            raise BudgetNotFoundError(f"Budget not found: {budget_id}")

        details = build_budget_details(
            budget,
            self._budget_repository.fetch_allocations(),
            self._budget_repository.fetch_transactions(),
            self._budget_repository.fetch_categories(),
            now,
            calculator=self._calculator,
        )
        self._logger.info(
            f"Budget {budget_id}: {len(details.allocations)} allocations, "
            f"{len(details.transactions)} transactions"
        )
        return details

    def _current_time(self) -> datetime:
        if self._clock is None:
            return datetime.now()
        return self._clock.now()


__all__ = ["BudgetNotFoundError", "GetBudgetDetailsUseCase"]
