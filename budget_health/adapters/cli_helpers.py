"""Helpers shared by the command-line adapters."""

from datetime import date, datetime, time
from decimal import Decimal

# Reports for a given day are evaluated at midday.
REPORT_TIME = time(12, 0)


def parse_report_time(value: str | None, logger) -> datetime | None:
    """Parse an ISO date string into the evaluation time of that day.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        datetime | None: Midday of the parsed date, or None when missing or
        invalid.
    """
    if not value:
        return None
    try:
        parsed = date.fromisoformat(value.strip())
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None
    return datetime.combine(parsed, REPORT_TIME)


def format_amount(value: Decimal) -> str:
    return f"{value:,.2f}"


def format_ratio(value: Decimal) -> str:
    return f"{value:.2f}"


__all__ = ["parse_report_time", "format_amount", "format_ratio"]
