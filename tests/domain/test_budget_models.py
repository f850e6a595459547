"""Tests for budgeting record models."""

from datetime import datetime
from decimal import Decimal

import pytest

from budget_health.domain.models import (
    Budget,
    Category,
    Transaction,
    TransactionType,
)


def _budget() -> Budget:
    return Budget(
        id="b1",
        name="December",
        amount=Decimal("1000"),
        start_date=datetime(2024, 12, 1),
        end_date=datetime(2024, 12, 31, 23, 59, 59),
    )


@pytest.mark.parametrize("raw", ["debit", "DEBIT", " Debit "])
def test_transaction_type_parse_is_case_insensitive(raw) -> None:
    assert TransactionType.parse(raw) is TransactionType.DEBIT


def test_transaction_type_parse_rejects_unknown_values() -> None:
    with pytest.raises(ValueError):
        TransactionType.parse("transfer")


def test_budget_period_helpers() -> None:
    budget = _budget()

    assert budget.total_days() == 31
    assert budget.elapsed_days(datetime(2024, 12, 16, 12)) == 15
    assert budget.elapsed_days(datetime(2024, 11, 1)) == 0
    assert budget.elapsed_days(datetime(2025, 1, 1)) == 31
    assert budget.is_active(budget.start_date)
    assert budget.is_active(budget.end_date)
    assert not budget.is_active(datetime(2025, 1, 1))


def test_with_updated_timestamp_returns_a_new_record() -> None:
    budget = _budget()
    stamp = datetime(2024, 12, 2, 8)

    updated = budget.with_updated_timestamp(stamp)

    assert updated is not budget
    assert updated.updated_at == stamp
    assert budget.updated_at is None
    assert updated.amount == budget.amount


def test_category_and_transaction_updates_keep_other_fields() -> None:
    stamp = datetime(2024, 12, 2)
    category = Category(id="c1", name="Dining", icon_name="restaurant")
    transaction = Transaction(
        id="t1",
        name="Lunch",
        amount=Decimal("12"),
        type=TransactionType.CREDIT,
        transaction_date=datetime(2024, 12, 1),
    )

    assert category.with_updated_timestamp(stamp).name == "Dining"
    updated = transaction.with_updated_timestamp(stamp)
    assert updated.updated_at == stamp
    assert not updated.is_debit
