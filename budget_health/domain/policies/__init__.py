"""Domain policies package."""

from .bar_bands import BAR_STATUS_MESSAGES, classify_bar, describe_bar_status

__all__ = ["BAR_STATUS_MESSAGES", "classify_bar", "describe_bar_status"]
