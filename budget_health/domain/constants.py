"""Domain constants for budget health analytics."""

from decimal import Decimal

DEFAULT_CURVE_FACTOR = Decimal("1.5")

BAR_FORMULA_CURVE = "curve"
BAR_FORMULA_LINEAR = "linear"
BAR_FORMULAS = (BAR_FORMULA_CURVE, BAR_FORMULA_LINEAR)

# Day offset added to elapsed time by the linear formula.
LINEAR_ELAPSED_OFFSET = Decimal("0.3")

HISTORICAL_BLEND_WEIGHT = Decimal("0.7")
HISTORICAL_RECENCY_DECAY = Decimal("0.8")
MIN_HISTORICAL_PERIODS = 2

UNKNOWN_CATEGORY_NAME = "Unknown Category"
UNKNOWN_CATEGORY_ICON = "help_outline"

REFRESH_SOURCES = ("budgets", "allocations", "transactions", "categories")


__all__ = [
    "DEFAULT_CURVE_FACTOR",
    "BAR_FORMULA_CURVE",
    "BAR_FORMULA_LINEAR",
    "BAR_FORMULAS",
    "LINEAR_ELAPSED_OFFSET",
    "HISTORICAL_BLEND_WEIGHT",
    "HISTORICAL_RECENCY_DECAY",
    "MIN_HISTORICAL_PERIODS",
    "UNKNOWN_CATEGORY_NAME",
    "UNKNOWN_CATEGORY_ICON",
    "REFRESH_SOURCES",
]
