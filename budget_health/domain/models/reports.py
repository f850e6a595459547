"""Domain models for derived budget reports."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from .bar import BarStatus
from .budgets import Allocation, Budget, Category, TransactionType


@dataclass(frozen=True)
class ChartDatum:
    """Allocated and spent amounts for one category of a budget."""

    category_id: str
    category_name: str
    category_icon_name: str
    allocation_amount: Decimal
    transaction_amount: Decimal

    @property
    def remaining(self) -> Decimal:
        """Return allocation minus spend."""
        return self.allocation_amount - self.transaction_amount

    @property
    def is_overspent(self) -> bool:
        return self.transaction_amount > self.allocation_amount


@dataclass(frozen=True)
class BudgetReport:
    """Renderable health report for one active budget.

    Attributes:
        budget: Source budget.
        bar_value: Budget Adherence Ratio at report time.
        chart_data: Per-category allocated and spent amounts.
        total_budgeted: Sum of the budget's allocation amounts.
        total_spent: Sum of attributed debit transaction amounts.
        bar_status: Interpretation band of bar_value.
        expected_spent: Spend expected by report time.
    """

    budget: Budget
    bar_value: Decimal
    chart_data: list[ChartDatum]
    total_budgeted: Decimal
    total_spent: Decimal
    bar_status: BarStatus = BarStatus.UNDER
    expected_spent: Decimal = Decimal("0")

    @property
    def remaining(self) -> Decimal:
        """Return total_budgeted minus total_spent."""
        return self.total_budgeted - self.total_spent


@dataclass(frozen=True)
class MonthlyOverview:
    """Spending split of a calendar month between budgeted and unassigned."""

    month: date
    total_spent: Decimal
    budgeted_spent: Decimal
    unassigned_spent: Decimal
    budgeted_count: int
    unassigned_count: int
    percentage_spent: Decimal
    total_budgeted_amount: Decimal

    @property
    def has_unassigned_spending(self) -> bool:
        return self.unassigned_count > 0


@dataclass(frozen=True)
class TransactionView:
    """Transaction denormalized with its category display data."""

    id: str
    name: str
    amount: Decimal
    type: TransactionType
    transaction_date: datetime
    category_id: str | None
    category_name: str | None
    category_icon_name: str | None
    budget_id: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class AllocationDetail:
    """Allocation with its category and attributed transactions."""

    allocation: Allocation
    category: Category
    transactions: list[TransactionView]

    @property
    def spent(self) -> Decimal:
        """Return the debit total of the attributed transactions."""
        return sum(
            (
                item.amount
                for item in self.transactions
                if item.type == TransactionType.DEBIT
            ),
            Decimal("0"),
        )

    @property
    def remaining(self) -> Decimal:
        return self.allocation.amount - self.spent

    @property
    def spent_percentage(self) -> Decimal:
        if self.allocation.amount <= 0:
            return Decimal("0")
        return self.spent / self.allocation.amount * Decimal("100")

    @property
    def is_overspent(self) -> bool:
        return self.spent > self.allocation.amount


@dataclass(frozen=True)
class BudgetDetails:
    """Full breakdown of a single budget."""

    budget: Budget
    allocations: list[AllocationDetail]
    transactions: list[TransactionView]
    total_allocated: Decimal
    total_spent: Decimal
    bar_value: Decimal

    @property
    def remaining(self) -> Decimal:
        return self.budget.amount - self.total_spent

    @property
    def unallocated(self) -> Decimal:
        return self.budget.amount - self.total_allocated

    @property
    def spent_percentage(self) -> Decimal:
        """Return spend as a percentage of the budget amount."""
        if self.budget.amount <= 0:
            return Decimal("0")
        return self.total_spent / self.budget.amount * Decimal("100")


@dataclass(frozen=True)
class DashboardView:
    """Reports of every active budget plus the current month overview."""

    reports: list[BudgetReport]
    monthly_overview: MonthlyOverview
    generated_at: datetime


@dataclass(frozen=True)
class TransactionPage:
    """One page of denormalized transactions, newest first."""

    items: list[TransactionView]
    page: int
    has_more: bool


__all__ = [
    "ChartDatum",
    "BudgetReport",
    "MonthlyOverview",
    "TransactionView",
    "AllocationDetail",
    "BudgetDetails",
    "DashboardView",
    "TransactionPage",
]
