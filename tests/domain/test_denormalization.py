"""Tests for transaction denormalization."""

from datetime import datetime
from decimal import Decimal

from budget_health.domain.models import Category, Transaction, TransactionType
from budget_health.domain.services.denormalization import (
    build_transaction_view,
    index_categories,
    sort_newest_first,
)

CATEGORIES = index_categories(
    [Category(id="dining", name="Dining", icon_name="restaurant")]
)


def _transaction(category_id: str | None, day: int = 1) -> Transaction:
    return Transaction(
        id=f"t{day}",
        name="Lunch",
        amount=Decimal("12.50"),
        type=TransactionType.DEBIT,
        transaction_date=datetime(2024, 12, day),
        category_id=category_id,
        notes="with team",
    )


def test_view_carries_category_display_data() -> None:
    view = build_transaction_view(_transaction("dining"), CATEGORIES)

    assert view.category_name == "Dining"
    assert view.category_icon_name == "restaurant"
    assert view.amount == Decimal("12.50")
    assert view.notes == "with team"


def test_uncategorized_view_has_no_category_fields() -> None:
    view = build_transaction_view(_transaction(None), CATEGORIES)

    assert view.category_name is None
    assert view.category_icon_name is None


def test_dangling_category_uses_sentinel() -> None:
    view = build_transaction_view(_transaction("archived"), CATEGORIES)

    assert view.category_id == "archived"
    assert view.category_name == "Unknown Category"
    assert view.category_icon_name == "help_outline"


def test_views_sort_newest_first() -> None:
    views = [
        build_transaction_view(_transaction("dining", day), CATEGORIES)
        for day in (3, 9, 1)
    ]

    assert [v.id for v in sort_newest_first(views)] == ["t9", "t3", "t1"]
