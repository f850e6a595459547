"""Domain services for per-category chart aggregation."""

from collections.abc import Sequence
from decimal import Decimal
from logging import Logger

from budget_health.domain.constants import (
    UNKNOWN_CATEGORY_ICON,
    UNKNOWN_CATEGORY_NAME,
)
from budget_health.domain.models import (
    Allocation,
    Category,
    ChartDatum,
    Transaction,
)
from budget_health.utils.decimal_utils import finite_amount


def build_chart_data(
    allocations: Sequence[Allocation],
    transactions: Sequence[Transaction],
    categories: Sequence[Category],
    *,
    logger: Logger | None = None,
) -> list[ChartDatum]:
    """Combine allocations and debit spend into one datum per category.

    Args:
        allocations: Allocations of a single budget.
        transactions: Transactions attributed to that budget.
        categories: Every category to chart, in display order.
        logger: Optional logger used for warnings on skipped records.

    Returns:
        list[ChartDatum]: Exactly one entry per category, in input order.
    """
    allocation_by_category = sum_allocations_by_category(
        allocations,
        logger=logger,
    )
    spend_by_category = sum_spend_by_category(transactions, logger=logger)
    return [
        ChartDatum(
            category_id=category.id,
            category_name=category.name,
            category_icon_name=category.icon_name,
            allocation_amount=allocation_by_category.get(
                category.id,
                Decimal("0"),
            ),
            transaction_amount=spend_by_category.get(
                category.id,
                Decimal("0"),
            ),
        )
        for category in categories
    ]


def build_unknown_category_data(
    allocations: Sequence[Allocation],
    transactions: Sequence[Transaction],
    categories: Sequence[Category],
) -> list[ChartDatum]:
    """Return sentinel entries for category ids missing from categories.

    Args:
        allocations: Allocations of a single budget.
        transactions: Transactions attributed to that budget.
        categories: Known categories.

    Returns:
        list[ChartDatum]: One "Unknown Category" entry per dangling id, in
        first-reference order.
    """
    known_ids = {category.id for category in categories}
    allocation_by_category = sum_allocations_by_category(allocations)
    spend_by_category = sum_spend_by_category(transactions)

    dangling: list[str] = []
    for category_id in [*allocation_by_category, *spend_by_category]:
        if category_id not in known_ids and category_id not in dangling:
            dangling.append(category_id)

    return [
        ChartDatum(
            category_id=category_id,
            category_name=UNKNOWN_CATEGORY_NAME,
            category_icon_name=UNKNOWN_CATEGORY_ICON,
            allocation_amount=allocation_by_category.get(
                category_id,
                Decimal("0"),
            ),
            transaction_amount=spend_by_category.get(
                category_id,
                Decimal("0"),
            ),
        )
        for category_id in dangling
    ]


def sum_allocations_by_category(
    allocations: Sequence[Allocation],
    *,
    logger: Logger | None = None,
) -> dict[str, Decimal]:
    """Return allocation totals keyed by category id."""
    totals: dict[str, Decimal] = {}
    for allocation in allocations:
        amount = finite_amount(allocation.amount)
        if amount is None:
            if logger is not None:
                logger.warning(
                    f"Skipping allocation {allocation.id} with invalid "
                    f"amount: {allocation.amount}"
                )
            continue
        totals[allocation.category_id] = (
            totals.get(allocation.category_id, Decimal("0")) + amount
        )
    return totals


def sum_spend_by_category(
    transactions: Sequence[Transaction],
    *,
    logger: Logger | None = None,
) -> dict[str, Decimal]:
    """Return debit totals keyed by category id.

    Credits and uncategorized transactions are left out.
    """
    totals: dict[str, Decimal] = {}
    for transaction in transactions:
        if not transaction.is_debit or transaction.category_id is None:
            continue
        amount = finite_amount(transaction.amount)
        if amount is None:
            if logger is not None:
                logger.warning(
                    f"Skipping transaction {transaction.id} with invalid "
                    f"amount: {transaction.amount}"
                )
            continue
        totals[transaction.category_id] = (
            totals.get(transaction.category_id, Decimal("0")) + amount
        )
    return totals


def sum_debits(
    transactions: Sequence[Transaction],
    *,
    logger: Logger | None = None,
) -> Decimal:
    """Return the total of valid debit amounts."""
    total = Decimal("0")
    for transaction in transactions:
        if not transaction.is_debit:
            continue
        amount = finite_amount(transaction.amount)
        if amount is None:
            if logger is not None:
                logger.warning(
                    f"Skipping transaction {transaction.id} with invalid "
                    f"amount: {transaction.amount}"
                )
            continue
        total += amount
    return total


__all__ = [
    "build_chart_data",
    "build_unknown_category_data",
    "sum_allocations_by_category",
    "sum_spend_by_category",
    "sum_debits",
]
