"""Dirty-flag refresh of the dashboard with debounced recomputation.

Writers call ``mark_dirty`` after changing budgets, allocations, transactions
or categories. Readers call ``read``; the dashboard is rebuilt at most once
per burst of changes, after the burst has been quiet for the debounce window.
"""

from dataclasses import dataclass
from datetime import datetime
import threading
import time
from typing import Callable

from budget_health.application.use_cases.get_dashboard import GetDashboardUseCase
from budget_health.domain.constants import REFRESH_SOURCES
from budget_health.domain.models import DashboardView
from budget_health.infrastructure.logging.logger import get_app_logger

STATUS_INITIAL = "initial"
STATUS_LOADING = "loading"
STATUS_SUCCESS = "success"
STATUS_ERROR = "error"


@dataclass(frozen=True)
class DashboardState:
    """Snapshot of the refresher state.

    Attributes:
        status: One of initial, loading, success or error.
        message: Error description when status is error.
        view: Last successfully computed dashboard, if any.
    """

    status: str
    message: str | None = None
    view: DashboardView | None = None


class DashboardRefresher:
    """Recompute the dashboard lazily when its sources changed."""

    def __init__(
        self,
        use_case: GetDashboardUseCase,
        debounce_ms: int = 100,
        logger=None,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the refresher.

        Args:
            use_case: Use case building the dashboard.
            debounce_ms: Quiet window after the last change before rebuilding.
            logger: Optional logger compatible with logging.Logger-like API.
            monotonic: Time source in seconds, injectable for tests.
        """
        self._use_case = use_case
        self._debounce_seconds = max(debounce_ms, 0) / 1000
        self._logger = logger or get_app_logger()
        self._monotonic = monotonic
        self._lock = threading.Lock()
        self._dirty = True
        self._last_change: float | None = None
        self._evaluated_at: datetime | None = None
        self._state = DashboardState(status=STATUS_INITIAL)

    @property
    def state(self) -> DashboardState:
        with self._lock:
            return self._state

    def mark_dirty(self, source: str) -> None:
        """Record that one of the dashboard sources changed.

        Raises:
            ValueError: If source is not a known dashboard source.
        """
        if source not in REFRESH_SOURCES:
            raise ValueError(f"Unknown dashboard source: {source}")
        with self._lock:
            self._dirty = True
            self._last_change = self._monotonic()

    def read(self, now: datetime | None = None) -> DashboardState:
        """Return the dashboard state, rebuilding it when due.

        Args:
            now: Evaluation time forwarded to the use case. A clean view
                computed for another explicit time is rebuilt; omitting now
                returns the cached view as is.

        Returns:
            DashboardState: ``success`` with a fresh view, ``loading`` while a
            burst of changes is still settling, or ``error`` when the rebuild
            failed (the last good view is kept).
        """
        with self._lock:
            if not self._dirty and (now is None or now == self._evaluated_at):
                return self._state
            if self._state.view is not None and not self._settled():
                self._state = DashboardState(
                    status=STATUS_LOADING,
                    view=self._state.view,
                )
                return self._state
            self._recompute(now)
            return self._state

    def _settled(self) -> bool:
        if self._last_change is None:
            return True
        return self._monotonic() - self._last_change >= self._debounce_seconds

    def _recompute(self, now: datetime | None) -> None:
        try:
            view = self._use_case.execute(now)
        except Exception as exc:
            self._logger.error(f"Dashboard refresh failed: {exc}")
            self._state = DashboardState(
                status=STATUS_ERROR,
                message=str(exc),
                view=self._state.view,
            )
            return
        self._dirty = False
        self._evaluated_at = now
        self._state = DashboardState(status=STATUS_SUCCESS, view=view)


__all__ = [
    "DashboardRefresher",
    "DashboardState",
    "STATUS_INITIAL",
    "STATUS_LOADING",
    "STATUS_SUCCESS",
    "STATUS_ERROR",
]
