"""In-memory repository serving a deterministic demo dataset."""

from datetime import datetime, timedelta
from decimal import Decimal

from budget_health.application.ports.budget_snapshot import BudgetSnapshotPort
from budget_health.domain.models import (
    Allocation,
    Budget,
    Category,
    Transaction,
    TransactionType,
)
from budget_health.domain.services.monthly import month_bounds

DEMO_CATEGORIES = (
    ("cat-groceries", "Groceries", "shopping_cart", "#4CAF50"),
    ("cat-dining", "Dining", "restaurant", "#FF9800"),
    ("cat-transport", "Transport", "directions_car", "#2196F3"),
    ("cat-entertainment", "Entertainment", "movie", "#9C27B0"),
    ("cat-utilities", "Utilities", "bolt", "#607D8B"),
)


class DemoBudgetRepository(BudgetSnapshotPort):
    """Snapshot port returning sample records built around a reference date.

    The current month holds an active budget with four allocations, debit
    spend attributed explicitly and through categories, a salary credit, an
    unassigned purchase, and one transaction whose category was removed.
    The previous month holds an inactive budget.
    """

    def __init__(self, reference_date: datetime | None = None) -> None:
        self._reference = reference_date or datetime.now()
        self._start, self._end = month_bounds(
            self._reference.year,
            self._reference.month,
        )
        self._previous_start, self._previous_end = month_bounds(
            *_previous_month(self._reference.year, self._reference.month)
        )

    def fetch_budgets(self) -> list[Budget]:
        return [
            Budget(
                id="budget-previous",
                name="Previous Month",
                amount=Decimal("1100"),
                start_date=self._previous_start,
                end_date=self._previous_end,
                created_at=self._previous_start,
            ),
            Budget(
                id="budget-current",
                name="Monthly Household",
                amount=Decimal("1200"),
                start_date=self._start,
                end_date=self._end,
                created_at=self._start,
            ),
        ]

    def fetch_allocations(self) -> list[Allocation]:
        amounts = (
            ("cat-groceries", "400"),
            ("cat-dining", "300"),
            ("cat-transport", "150"),
            ("cat-utilities", "200"),
        )
        return [
            Allocation(
                id=f"alloc-{category_id}",
                budget_id="budget-current",
                category_id=category_id,
                amount=Decimal(amount),
                created_at=self._start,
            )
            for category_id, amount in amounts
        ]

    def fetch_transactions(self) -> list[Transaction]:
        return [
            self._transaction(
                "txn-groceries-1",
                "Weekly groceries",
                "180.25",
                TransactionType.DEBIT,
                day_offset=1,
                category_id="cat-groceries",
                budget_id="budget-current",
            ),
            self._transaction(
                "txn-groceries-2",
                "Farmers market",
                "145.25",
                TransactionType.DEBIT,
                day_offset=6,
                category_id="cat-groceries",
                budget_id="budget-current",
            ),
            self._transaction(
                "txn-dining-1",
                "Dinner out",
                "62.40",
                TransactionType.DEBIT,
                day_offset=4,
                category_id="cat-dining",
            ),
            self._transaction(
                "txn-utilities-1",
                "Electricity bill",
                "88.10",
                TransactionType.DEBIT,
                day_offset=2,
                category_id="cat-utilities",
                budget_id="budget-current",
            ),
            self._transaction(
                "txn-entertainment-1",
                "Concert tickets",
                "50",
                TransactionType.DEBIT,
                day_offset=5,
                category_id="cat-entertainment",
                notes="One-off purchase",
            ),
            self._transaction(
                "txn-archived-1",
                "Parking pass",
                "35",
                TransactionType.DEBIT,
                day_offset=3,
                category_id="cat-archived",
                budget_id="budget-current",
            ),
            self._transaction(
                "txn-salary",
                "Salary",
                "3000",
                TransactionType.CREDIT,
                day_offset=0,
            ),
        ]

    def fetch_categories(self) -> list[Category]:
        return [
            Category(
                id=category_id,
                name=name,
                icon_name=icon_name,
                color_hex=color_hex,
                created_at=self._start,
            )
            for category_id, name, icon_name, color_hex in DEMO_CATEGORIES
        ]

    def _transaction(
        self,
        transaction_id: str,
        name: str,
        amount: str,
        transaction_type: TransactionType,
        *,
        day_offset: int,
        category_id: str | None = None,
        budget_id: str | None = None,
        notes: str | None = None,
    ) -> Transaction:
        # Keep every demo transaction on or before the reference date.
        transaction_date = min(
            self._start + timedelta(days=day_offset, hours=12),
            self._reference,
        )
        return Transaction(
            id=transaction_id,
            name=name,
            amount=Decimal(amount),
            type=transaction_type,
            transaction_date=transaction_date,
            category_id=category_id,
            budget_id=budget_id,
            notes=notes,
            created_at=transaction_date,
        )


def _previous_month(year: int, month: int) -> tuple[int, int]:
    if month == 1:
        return year - 1, 12
    return year, month - 1


__all__ = ["DemoBudgetRepository"]
