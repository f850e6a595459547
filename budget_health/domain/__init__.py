"""Domain package for budget health rules and core models."""

from .constants import DEFAULT_CURVE_FACTOR, UNKNOWN_CATEGORY_NAME
from .models import (
    Allocation,
    BarStatus,
    Budget,
    BudgetReport,
    Category,
    ChartDatum,
    MonthlyOverview,
    Transaction,
    TransactionType,
)
from .policies import classify_bar
from .services import (
    BarCalculator,
    build_chart_data,
    build_monthly_overview,
    build_report,
    calculate_bar,
)

__all__ = [
    "DEFAULT_CURVE_FACTOR",
    "UNKNOWN_CATEGORY_NAME",
    "Allocation",
    "BarStatus",
    "Budget",
    "BudgetReport",
    "Category",
    "ChartDatum",
    "MonthlyOverview",
    "Transaction",
    "TransactionType",
    "classify_bar",
    "BarCalculator",
    "build_chart_data",
    "build_monthly_overview",
    "build_report",
    "calculate_bar",
]
