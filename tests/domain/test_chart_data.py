"""Tests for per-category chart aggregation."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

from budget_health.domain.models import (
    Allocation,
    Category,
    Transaction,
    TransactionType,
)
from budget_health.domain.services.chart import (
    build_chart_data,
    build_unknown_category_data,
    sum_debits,
)

CATEGORIES = [
    Category(id="groceries", name="Groceries", icon_name="shopping_cart"),
    Category(id="dining", name="Dining", icon_name="restaurant"),
    Category(id="entertainment", name="Entertainment", icon_name="movie"),
]


def _allocation(category_id: str, amount: str) -> Allocation:
    return Allocation(
        id=f"alloc-{category_id}",
        budget_id="budget",
        category_id=category_id,
        amount=Decimal(amount),
    )


def _transaction(
    transaction_id: str,
    amount: str,
    category_id: str | None,
    transaction_type: TransactionType = TransactionType.DEBIT,
) -> Transaction:
    return Transaction(
        id=transaction_id,
        name=transaction_id,
        amount=Decimal(amount),
        type=transaction_type,
        transaction_date=datetime(2024, 12, 5),
        category_id=category_id,
    )


def test_every_category_gets_a_datum_including_unallocated_spend() -> None:
    """Groceries, Dining and a miscategorized Entertainment purchase."""
    allocations = [
        _allocation("groceries", "400"),
        _allocation("dining", "300"),
    ]
    transactions = [
        _transaction("t1", "200.50", "groceries"),
        _transaction("t2", "125", "groceries"),
        _transaction("t3", "50", "entertainment"),
    ]

    data = build_chart_data(allocations, transactions, CATEGORIES)

    assert [datum.category_name for datum in data] == [
        "Groceries",
        "Dining",
        "Entertainment",
    ]
    groceries, dining, entertainment = data
    assert groceries.allocation_amount == Decimal("400")
    assert groceries.transaction_amount == Decimal("325.50")
    assert dining.allocation_amount == Decimal("300")
    assert dining.transaction_amount == Decimal("0")
    assert entertainment.allocation_amount == Decimal("0")
    assert entertainment.transaction_amount == Decimal("50")
    assert entertainment.is_overspent
    assert groceries.remaining == Decimal("74.50")


def test_one_datum_per_category_without_any_data() -> None:
    data = build_chart_data([], [], CATEGORIES)

    assert len(data) == len(CATEGORIES)
    assert all(datum.allocation_amount == 0 for datum in data)
    assert all(datum.transaction_amount == 0 for datum in data)


def test_dangling_references_do_not_add_entries() -> None:
    data = build_chart_data(
        [_allocation("archived", "100")],
        [_transaction("t1", "20", "archived")],
        CATEGORIES,
    )

    assert [datum.category_id for datum in data] == [
        "groceries",
        "dining",
        "entertainment",
    ]


def test_repeated_calls_produce_equal_output() -> None:
    allocations = [_allocation("groceries", "400")]
    transactions = [_transaction("t1", "80", "groceries")]

    first = build_chart_data(allocations, transactions, CATEGORIES)
    second = build_chart_data(allocations, transactions, CATEGORIES)

    assert first == second


def test_allocations_of_the_same_category_are_summed() -> None:
    allocations = [
        _allocation("dining", "100"),
        _allocation("dining", "50"),
    ]

    data = build_chart_data(allocations, [], CATEGORIES)

    assert data[1].allocation_amount == Decimal("150")


def test_credits_and_uncategorized_spend_are_excluded() -> None:
    transactions = [
        _transaction("refund", "500", "groceries", TransactionType.CREDIT),
        _transaction("cash", "30", None),
        _transaction("t1", "10", "groceries"),
    ]

    data = build_chart_data([], transactions, CATEGORIES)

    assert data[0].transaction_amount == Decimal("10")
    assert sum_debits(transactions) == Decimal("40")


def test_invalid_amounts_are_skipped_with_a_warning() -> None:
    logger = MagicMock()
    allocations = [
        _allocation("groceries", "400"),
        _allocation("dining", "NaN"),
    ]
    transactions = [
        _transaction("t1", "-5", "groceries"),
        _transaction("t2", "15", "groceries"),
    ]

    data = build_chart_data(allocations, transactions, CATEGORIES, logger=logger)

    assert data[0].transaction_amount == Decimal("15")
    assert data[1].allocation_amount == Decimal("0")
    assert logger.warning.call_count == 2


def test_unknown_category_entries_cover_dangling_ids() -> None:
    allocations = [
        _allocation("groceries", "400"),
        _allocation("archived", "100"),
    ]
    transactions = [
        _transaction("t1", "20", "archived"),
        _transaction("t2", "35", "deleted"),
    ]

    data = build_unknown_category_data(allocations, transactions, CATEGORIES)

    assert [datum.category_id for datum in data] == ["archived", "deleted"]
    assert {datum.category_name for datum in data} == {"Unknown Category"}
    assert {datum.category_icon_name for datum in data} == {"help_outline"}
    assert data[0].allocation_amount == Decimal("100")
    assert data[0].transaction_amount == Decimal("20")
    assert data[1].allocation_amount == Decimal("0")
    assert data[1].transaction_amount == Decimal("35")
