"""Domain models for Budget Adherence Ratio results."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class BarStatus(str, Enum):
    """Interpretation band of a BAR value."""

    UNDER = "under"
    GOOD = "good"
    ON_TRACK = "on_track"
    WARNING = "warning"
    OVER = "over"


@dataclass(frozen=True)
class BarCalculation:
    """Complete BAR evaluation for one budget period.

    Attributes:
        bar: Actual spend divided by expected spend to date.
        status: Interpretation band of the ratio.
        message: Human-readable band description.
        expected_spent: Spend expected by now.
        actual_spent: Spend recorded so far.
        remaining: Budget left, never negative.
        days_remaining: Days left in the period, never negative.
    """

    bar: Decimal
    status: BarStatus
    message: str
    expected_spent: Decimal
    actual_spent: Decimal
    remaining: Decimal
    days_remaining: int


@dataclass(frozen=True)
class SpendingCheckpoint:
    """Cumulative spend recorded on a given day of a past period."""

    day: int
    spent: Decimal


@dataclass(frozen=True)
class HistoricalSpendingPeriod:
    """Spending pattern of a completed budget period."""

    total_days: int
    total_budget: Decimal
    checkpoints: list[SpendingCheckpoint] = field(default_factory=list)


__all__ = [
    "BarStatus",
    "BarCalculation",
    "SpendingCheckpoint",
    "HistoricalSpendingPeriod",
]
