"""Domain services package."""

from .bar import (
    BarCalculator,
    calculate_bar,
    calculate_linear_bar,
    evaluate_bar,
    expected_spend_fraction,
)
from .chart import build_chart_data, build_unknown_category_data
from .denormalization import build_transaction_view, resolve_category
from .monthly import build_monthly_overview, month_bounds
from .reports import (
    build_budget_details,
    build_report,
    build_reports,
    filter_budget_transactions,
    select_active_budgets,
)
from .validation import is_valid_budget, validate_allocation_total

__all__ = [
    "BarCalculator",
    "calculate_bar",
    "calculate_linear_bar",
    "evaluate_bar",
    "expected_spend_fraction",
    "build_chart_data",
    "build_unknown_category_data",
    "build_transaction_view",
    "resolve_category",
    "build_monthly_overview",
    "month_bounds",
    "build_budget_details",
    "build_report",
    "build_reports",
    "filter_budget_transactions",
    "select_active_budgets",
    "is_valid_budget",
    "validate_allocation_total",
]
