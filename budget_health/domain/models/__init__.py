"""Domain models package."""

from .bar import (
    BarCalculation,
    BarStatus,
    HistoricalSpendingPeriod,
    SpendingCheckpoint,
)
from .budgets import (
    Allocation,
    Budget,
    Category,
    Transaction,
    TransactionType,
)
from .reports import (
    AllocationDetail,
    BudgetDetails,
    BudgetReport,
    ChartDatum,
    DashboardView,
    MonthlyOverview,
    TransactionPage,
    TransactionView,
)

__all__ = [
    "Allocation",
    "Budget",
    "Category",
    "Transaction",
    "TransactionType",
    "BarCalculation",
    "BarStatus",
    "HistoricalSpendingPeriod",
    "SpendingCheckpoint",
    "AllocationDetail",
    "BudgetDetails",
    "BudgetReport",
    "ChartDatum",
    "DashboardView",
    "MonthlyOverview",
    "TransactionPage",
    "TransactionView",
]
