"""Domain validation helpers."""

from collections.abc import Sequence
from decimal import Decimal
from logging import Logger

from budget_health.domain.models import Allocation, Budget
from budget_health.utils.decimal_utils import finite_amount


def is_valid_budget(budget: Budget) -> bool:
    """Return True when the budget has a usable period and amount."""
    if budget.end_date < budget.start_date:
        return False
    return finite_amount(budget.amount) is not None


def validate_allocation_total(
    budget: Budget,
    allocations: Sequence[Allocation],
    logger: Logger,
) -> None:
    """Warn when allocations exceed the budget amount.

    Args:
        budget: Budget owning the allocations.
        allocations: Allocations of that budget.
        logger: Logger used for warnings.
    """
    budget_amount = finite_amount(budget.amount)
    if budget_amount is None:
        return
    allocated = sum(
        (
            amount
            for amount in (finite_amount(a.amount) for a in allocations)
            if amount is not None
        ),
        Decimal("0"),
    )
    if allocated > budget_amount:
        logger.warning(
            f"Allocations exceed budget {budget.id}: "
            f"allocated={allocated}, amount={budget_amount}"
        )


__all__ = ["is_valid_budget", "validate_allocation_total"]
