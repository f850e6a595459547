"""Domain models for budgeting records."""

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum

from budget_health.utils.datetime_utils import days_between


class TransactionType(str, Enum):
    """Direction of a transaction. Only debits count as spend."""

    CREDIT = "credit"
    DEBIT = "debit"

    @classmethod
    def parse(cls, value: "str | TransactionType") -> "TransactionType":
        """Return the member matching a raw value, ignoring case.

        Raises:
            ValueError: If the value is not a known transaction type.
        """
        if isinstance(value, cls):
            return value
        cleaned = str(value).strip().lower()
        for member in cls:
            if member.value == cleaned:
                return member
        raise ValueError(f"Unknown transaction type: {value!r}")


@dataclass(frozen=True)
class Budget:
    """Planned spend over an inclusive period.

    Attributes:
        id: Opaque budget key.
        name: Display name.
        amount: Total planned spend.
        start_date: First instant of the period.
        end_date: Last instant of the period (inclusive).
    """

    id: str
    name: str
    amount: Decimal
    start_date: datetime
    end_date: datetime
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def is_active(self, now: datetime) -> bool:
        """Return True when now falls within the budget period."""
        return self.start_date <= now <= self.end_date

    def total_days(self) -> int:
        """Return the inclusive number of days in the period."""
        return days_between(self.start_date, self.end_date) + 1

    def elapsed_days(self, now: datetime) -> int:
        """Return the days elapsed at now, clamped to the period."""
        total_days = self.total_days()
        if now < self.start_date:
            return 0
        if now > self.end_date:
            return total_days
        return min(days_between(self.start_date, now), total_days)

    def with_updated_timestamp(self, now: datetime) -> "Budget":
        return replace(self, updated_at=now)


@dataclass(frozen=True)
class Category:
    """Spending category; icon_name is an opaque display hint."""

    id: str
    name: str
    icon_name: str
    color_hex: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def with_updated_timestamp(self, now: datetime) -> "Category":
        return replace(self, updated_at=now)


@dataclass(frozen=True)
class Allocation:
    """Planned spend for one category within one budget."""

    id: str
    budget_id: str
    category_id: str
    amount: Decimal
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def with_updated_timestamp(self, now: datetime) -> "Allocation":
        return replace(self, updated_at=now)


@dataclass(frozen=True)
class Transaction:
    """Money movement, optionally linked to a category and a budget."""

    id: str
    name: str
    amount: Decimal
    type: TransactionType
    transaction_date: datetime
    category_id: str | None = None
    budget_id: str | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_debit(self) -> bool:
        return self.type == TransactionType.DEBIT

    def with_updated_timestamp(self, now: datetime) -> "Transaction":
        return replace(self, updated_at=now)


__all__ = [
    "TransactionType",
    "Budget",
    "Category",
    "Allocation",
    "Transaction",
]
