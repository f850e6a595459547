"""Tests for the monthly spending overview."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from budget_health.domain.models import Budget, Transaction, TransactionType
from budget_health.domain.services.monthly import (
    build_monthly_overview,
    month_bounds,
)


def _transaction(
    transaction_id: str,
    amount: str,
    day: datetime,
    *,
    budget_id: str | None = None,
    transaction_type: TransactionType = TransactionType.DEBIT,
) -> Transaction:
    return Transaction(
        id=transaction_id,
        name=transaction_id,
        amount=Decimal(amount),
        type=transaction_type,
        transaction_date=day,
        budget_id=budget_id,
    )


def _budget(amount: str) -> Budget:
    return Budget(
        id=f"budget-{amount}",
        name="Monthly",
        amount=Decimal(amount),
        start_date=datetime(2024, 12, 1),
        end_date=datetime(2024, 12, 31, 23, 59, 59),
    )


def test_overview_splits_budgeted_and_unassigned_spend() -> None:
    transactions = [
        _transaction("linked", "80", datetime(2024, 12, 3), budget_id="b1"),
        _transaction("loose", "20", datetime(2024, 12, 9)),
        _transaction(
            "salary",
            "3000",
            datetime(2024, 12, 1),
            transaction_type=TransactionType.CREDIT,
        ),
    ]

    overview = build_monthly_overview((2024, 12), transactions, [_budget("400")])

    assert overview.month == date(2024, 12, 1)
    assert overview.budgeted_spent == Decimal("80")
    assert overview.unassigned_spent == Decimal("20")
    assert overview.total_spent == Decimal("100")
    assert overview.budgeted_count == 1
    assert overview.unassigned_count == 1
    assert overview.has_unassigned_spending
    assert overview.percentage_spent == Decimal("20")
    assert overview.total_budgeted_amount == Decimal("400")


def test_overview_ignores_transactions_outside_the_month() -> None:
    transactions = [
        _transaction("before", "10", datetime(2024, 11, 30, 23, 59, 59)),
        _transaction("first", "5", datetime(2024, 12, 1)),
        _transaction("last", "7", datetime(2024, 12, 31, 23, 59, 59, 999999)),
        _transaction("after", "10", datetime(2025, 1, 1)),
    ]

    overview = build_monthly_overview((2024, 12), transactions, [])

    assert overview.total_spent == Decimal("12")
    assert overview.unassigned_count == 2


def test_percentage_is_zero_without_active_budgets() -> None:
    transactions = [
        _transaction("linked", "80", datetime(2024, 12, 3), budget_id="b1"),
    ]

    overview = build_monthly_overview((2024, 12), transactions, [])

    assert overview.percentage_spent == Decimal("0")
    assert not overview.has_unassigned_spending


def test_percentage_sums_every_active_budget() -> None:
    transactions = [
        _transaction("linked", "150", datetime(2024, 12, 3), budget_id="b1"),
    ]

    overview = build_monthly_overview(
        (2024, 12),
        transactions,
        [_budget("100"), _budget("200")],
    )

    assert overview.percentage_spent == Decimal("50")


def test_invalid_amounts_are_skipped_with_a_warning() -> None:
    logger = MagicMock()
    transactions = [
        _transaction("bad", "NaN", datetime(2024, 12, 3)),
        _transaction("good", "12", datetime(2024, 12, 4)),
    ]

    overview = build_monthly_overview((2024, 12), transactions, [], logger=logger)

    assert overview.total_spent == Decimal("12")
    logger.warning.assert_called_once()


def test_month_bounds_handles_december() -> None:
    start, end = month_bounds(2024, 12)

    assert start == datetime(2024, 12, 1)
    assert end == datetime(2024, 12, 31, 23, 59, 59, 999999)


def test_month_bounds_rejects_invalid_month() -> None:
    with pytest.raises(ValueError):
        month_bounds(2024, 13)
