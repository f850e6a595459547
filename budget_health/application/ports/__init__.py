"""Application ports package."""

from .budget_snapshot import BudgetSnapshotPort
from .clock import ClockPort
from .database import DatabaseEnginePort

__all__ = [
    "BudgetSnapshotPort",
    "ClockPort",
    "DatabaseEnginePort",
]
