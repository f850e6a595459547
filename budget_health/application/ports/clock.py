"""Port supplying the current time to use cases."""

from datetime import datetime
from typing import Protocol


class ClockPort(Protocol):
    """Port exposing the current local time."""

    def now(self) -> datetime:
        """Return the current time."""


__all__ = ["ClockPort"]
