"""Domain services for calendar-month spending overviews."""

from collections.abc import Sequence
from datetime import date, datetime, timedelta
from decimal import Decimal
from logging import Logger

from budget_health.domain.models import Budget, MonthlyOverview, Transaction
from budget_health.utils.decimal_utils import finite_amount


def month_bounds(year: int, month: int) -> tuple[datetime, datetime]:
    """Return the first and last instants of a calendar month.

    Raises:
        ValueError: If month is not between 1 and 12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")
    start = datetime(year, month, 1)
    if month == 12:
        next_start = datetime(year + 1, 1, 1)
    else:
        next_start = datetime(year, month + 1, 1)
    return start, next_start - timedelta(microseconds=1)


def build_monthly_overview(
    month: tuple[int, int],
    transactions: Sequence[Transaction],
    active_budgets: Sequence[Budget],
    *,
    logger: Logger | None = None,
) -> MonthlyOverview:
    """Split a month's debit spend into budget-linked and unassigned.

    Args:
        month: ``(year, month_number)`` to summarize.
        transactions: Every live transaction.
        active_budgets: Budgets whose amounts form the percentage base.
        logger: Optional logger used for warnings on skipped records.

    Returns:
        MonthlyOverview: Totals, counts, and the share of the active budgets
        consumed by budget-linked spend.
    """
    year, month_number = month
    start, end = month_bounds(year, month_number)

    budgeted_spent = Decimal("0")
    unassigned_spent = Decimal("0")
    budgeted_count = 0
    unassigned_count = 0
    for transaction in transactions:
        if not transaction.is_debit:
            continue
        if not start <= transaction.transaction_date <= end:
            continue
        amount = finite_amount(transaction.amount)
        if amount is None:
            if logger is not None:
                logger.warning(
                    f"Skipping transaction {transaction.id} with invalid "
                    f"amount: {transaction.amount}"
                )
            continue
        if transaction.budget_id is not None:
            budgeted_spent += amount
            budgeted_count += 1
        else:
            unassigned_spent += amount
            unassigned_count += 1

    total_budgeted = sum(
        (
            amount
            for amount in (finite_amount(b.amount) for b in active_budgets)
            if amount is not None
        ),
        Decimal("0"),
    )
    percentage_spent = (
        budgeted_spent / total_budgeted * Decimal("100")
        if total_budgeted > 0
        else Decimal("0")
    )
    return MonthlyOverview(
        month=date(year, month_number, 1),
        total_spent=budgeted_spent + unassigned_spent,
        budgeted_spent=budgeted_spent,
        unassigned_spent=unassigned_spent,
        budgeted_count=budgeted_count,
        unassigned_count=unassigned_count,
        percentage_spent=percentage_spent,
        total_budgeted_amount=total_budgeted,
    )


__all__ = ["month_bounds", "build_monthly_overview"]
