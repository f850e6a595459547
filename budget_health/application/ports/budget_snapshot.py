"""Port for reading live budgeting records."""

from typing import Protocol

from budget_health.domain.models import (
    Allocation,
    Budget,
    Category,
    Transaction,
)


class BudgetSnapshotPort(Protocol):
    """Port exposing read access to live (not soft-deleted) records.

    Each call returns a complete, ordered snapshot of one collection.
    """

    def fetch_budgets(self) -> list[Budget]:
        """Return every live budget."""

    def fetch_allocations(self) -> list[Allocation]:
        """Return every live allocation."""

    def fetch_transactions(self) -> list[Transaction]:
        """Return every live transaction."""

    def fetch_categories(self) -> list[Category]:
        """Return every live category in display order."""


__all__ = ["BudgetSnapshotPort"]
