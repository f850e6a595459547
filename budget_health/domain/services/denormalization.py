"""Join transactions with their category display data."""

from collections.abc import Mapping, Sequence

from budget_health.domain.constants import (
    UNKNOWN_CATEGORY_ICON,
    UNKNOWN_CATEGORY_NAME,
)
from budget_health.domain.models import Category, Transaction, TransactionView


def unknown_category(category_id: str) -> Category:
    """Return the sentinel standing in for a missing category."""
    return Category(
        id=category_id,
        name=UNKNOWN_CATEGORY_NAME,
        icon_name=UNKNOWN_CATEGORY_ICON,
    )


def index_categories(categories: Sequence[Category]) -> dict[str, Category]:
    return {category.id: category for category in categories}


def resolve_category(
    category_id: str,
    categories_by_id: Mapping[str, Category],
) -> Category:
    """Return the category for an id, or the Unknown Category sentinel."""
    category = categories_by_id.get(category_id)
    if category is None:
        return unknown_category(category_id)
    return category


def build_transaction_view(
    transaction: Transaction,
    categories_by_id: Mapping[str, Category],
) -> TransactionView:
    """Denormalize a transaction with its category name and icon.

    Args:
        transaction: Source transaction.
        categories_by_id: Known categories keyed by id.

    Returns:
        TransactionView: Flat view; category fields are None when the
        transaction is uncategorized.
    """
    category = (
        resolve_category(transaction.category_id, categories_by_id)
        if transaction.category_id is not None
        else None
    )
    return TransactionView(
        id=transaction.id,
        name=transaction.name,
        amount=transaction.amount,
        type=transaction.type,
        transaction_date=transaction.transaction_date,
        category_id=transaction.category_id,
        category_name=category.name if category else None,
        category_icon_name=category.icon_name if category else None,
        budget_id=transaction.budget_id,
        notes=transaction.notes,
    )


def sort_newest_first(views: Sequence[TransactionView]) -> list[TransactionView]:
    return sorted(views, key=lambda view: view.transaction_date, reverse=True)


__all__ = [
    "unknown_category",
    "index_categories",
    "resolve_category",
    "build_transaction_view",
    "sort_newest_first",
]
