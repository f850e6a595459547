"""Application use cases package."""

from .get_budget_details import BudgetNotFoundError, GetBudgetDetailsUseCase
from .get_dashboard import GetDashboardUseCase
from .list_transactions import ListTransactionsUseCase
from .refresh_dashboard import DashboardRefresher, DashboardState

__all__ = [
    "BudgetNotFoundError",
    "GetBudgetDetailsUseCase",
    "GetDashboardUseCase",
    "ListTransactionsUseCase",
    "DashboardRefresher",
    "DashboardState",
]
