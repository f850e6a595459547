"""System clock adapter."""

from datetime import datetime

from budget_health.application.ports.clock import ClockPort


class SystemClock(ClockPort):
    """ClockPort implementation reading the local wall clock."""

    def now(self) -> datetime:
        return datetime.now()


__all__ = ["SystemClock"]
