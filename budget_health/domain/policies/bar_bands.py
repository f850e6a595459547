"""Interpretation bands for Budget Adherence Ratio values."""

from decimal import Decimal

from budget_health.domain.models.bar import BarStatus

_GOOD_FLOOR = Decimal("0.85")
_ON_TRACK_FLOOR = Decimal("0.95")
_ON_TRACK_CEILING = Decimal("1.05")
_WARNING_CEILING = Decimal("1.15")

BAR_STATUS_MESSAGES = {
    BarStatus.UNDER: "Well under budget",
    BarStatus.GOOD: "Slightly under budget",
    BarStatus.ON_TRACK: "Right on track",
    BarStatus.WARNING: "Slightly over budget",
    BarStatus.OVER: "Significantly over budget",
}


def classify_bar(bar: Decimal) -> BarStatus:
    """Return the interpretation band of a BAR value.

    Args:
        bar: Budget Adherence Ratio.

    Returns:
        BarStatus: Band the ratio falls into.
    """
    if bar < _GOOD_FLOOR:
        return BarStatus.UNDER
    if bar < _ON_TRACK_FLOOR:
        return BarStatus.GOOD
    if bar <= _ON_TRACK_CEILING:
        return BarStatus.ON_TRACK
    if bar <= _WARNING_CEILING:
        return BarStatus.WARNING
    return BarStatus.OVER


def describe_bar_status(status: BarStatus) -> str:
    """Return the display message for a BAR band."""
    return BAR_STATUS_MESSAGES[status]


__all__ = ["BAR_STATUS_MESSAGES", "classify_bar", "describe_bar_status"]
