"""Domain services building per-budget reports and details."""

from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal
from logging import Logger

from budget_health.domain.models import (
    Allocation,
    AllocationDetail,
    Budget,
    BudgetDetails,
    BudgetReport,
    Category,
    Transaction,
)
from budget_health.domain.services.bar import BarCalculator
from budget_health.domain.services.chart import (
    build_chart_data,
    build_unknown_category_data,
    sum_debits,
)
from budget_health.domain.services.denormalization import (
    build_transaction_view,
    index_categories,
    resolve_category,
    sort_newest_first,
)
from budget_health.domain.services.validation import (
    is_valid_budget,
    validate_allocation_total,
)
from budget_health.utils.decimal_utils import finite_amount


def select_active_budgets(
    budgets: Sequence[Budget],
    now: datetime,
) -> list[Budget]:
    """Return the budgets whose period contains now, in input order."""
    return [budget for budget in budgets if budget.is_active(now)]


def filter_budget_allocations(
    budget: Budget,
    allocations: Sequence[Allocation],
) -> list[Allocation]:
    return [a for a in allocations if a.budget_id == budget.id]


def filter_budget_transactions(
    budget: Budget,
    transactions: Sequence[Transaction],
    budget_allocations: Sequence[Allocation],
) -> list[Transaction]:
    """Return transactions attributed to a budget.

    A transaction belongs to the budget when it is dated within the period
    and is either linked to the budget or categorized under one of the
    budget's allocated categories.

    Args:
        budget: Budget to attribute transactions to.
        transactions: Candidate transactions.
        budget_allocations: Allocations of that budget.

    Returns:
        list[Transaction]: Attributed transactions in input order.
    """
    allocated_categories = {a.category_id for a in budget_allocations}
    return [
        transaction
        for transaction in transactions
        if budget.start_date <= transaction.transaction_date <= budget.end_date
        and (
            transaction.budget_id == budget.id
            or transaction.category_id in allocated_categories
        )
    ]


def build_report(
    budget: Budget,
    allocations: Sequence[Allocation],
    transactions: Sequence[Transaction],
    categories: Sequence[Category],
    now: datetime,
    *,
    calculator: BarCalculator | None = None,
    logger: Logger | None = None,
) -> BudgetReport:
    """Build the health report of one budget.

    Args:
        budget: Budget to report on.
        allocations: Allocations of every budget; filtered here.
        transactions: Every live transaction; filtered here.
        categories: Every live category, in display order.
        now: Evaluation time for the BAR.
        calculator: BAR strategy; defaults to the front-loaded curve.
        logger: Optional logger used for warnings.

    Returns:
        BudgetReport: Chart data, totals, and BAR. Budgets with an invalid
        period or amount yield an empty report with a BAR of 0.
    """
    if not is_valid_budget(budget):
        if logger is not None:
            logger.warning(
                f"Budget {budget.id} has an invalid period or amount; "
                "reporting empty data"
            )
        return BudgetReport(
            budget=budget,
            bar_value=Decimal("0"),
            chart_data=[],
            total_budgeted=Decimal("0"),
            total_spent=Decimal("0"),
        )

    calculator = calculator or BarCalculator()
    budget_allocations = filter_budget_allocations(budget, allocations)
    budget_transactions = filter_budget_transactions(
        budget,
        transactions,
        budget_allocations,
    )
    if logger is not None:
        validate_allocation_total(budget, budget_allocations, logger)

    chart_data = build_chart_data(
        budget_allocations,
        budget_transactions,
        categories,
        logger=logger,
    )
    chart_data.extend(
        build_unknown_category_data(
            budget_allocations,
            budget_transactions,
            categories,
        )
    )

    total_budgeted = _sum_allocations(budget_allocations)
    total_spent = sum_debits(budget_transactions)
    calculation = calculator.evaluate(
        total_budgeted,
        total_spent,
        budget.start_date,
        budget.end_date,
        now,
    )
    return BudgetReport(
        budget=budget,
        bar_value=calculation.bar,
        chart_data=chart_data,
        total_budgeted=total_budgeted,
        total_spent=total_spent,
        bar_status=calculation.status,
        expected_spent=calculation.expected_spent,
    )


def build_reports(
    budgets: Sequence[Budget],
    allocations: Sequence[Allocation],
    transactions: Sequence[Transaction],
    categories: Sequence[Category],
    now: datetime,
    *,
    calculator: BarCalculator | None = None,
    logger: Logger | None = None,
) -> list[BudgetReport]:
    """Build one report per budget active at now."""
    return [
        build_report(
            budget,
            allocations,
            transactions,
            categories,
            now,
            calculator=calculator,
            logger=logger,
        )
        for budget in select_active_budgets(budgets, now)
    ]


def build_budget_details(
    budget: Budget,
    allocations: Sequence[Allocation],
    transactions: Sequence[Transaction],
    categories: Sequence[Category],
    now: datetime,
    *,
    calculator: BarCalculator | None = None,
) -> BudgetDetails:
    """Build the allocation-level breakdown of one budget.

    Args:
        budget: Budget to describe.
        allocations: Allocations of every budget; filtered here.
        transactions: Every live transaction; filtered here.
        categories: Every live category.
        now: Evaluation time for the BAR.
        calculator: BAR strategy; defaults to the front-loaded curve.

    Returns:
        BudgetDetails: Per-allocation transactions and budget totals.
    """
    if not is_valid_budget(budget):
        return BudgetDetails(
            budget=budget,
            allocations=[],
            transactions=[],
            total_allocated=Decimal("0"),
            total_spent=Decimal("0"),
            bar_value=Decimal("0"),
        )

    calculator = calculator or BarCalculator()
    categories_by_id = index_categories(categories)
    budget_allocations = [
        allocation
        for allocation in filter_budget_allocations(budget, allocations)
        if finite_amount(allocation.amount) is not None
    ]
    budget_transactions = [
        transaction
        for transaction in filter_budget_transactions(
            budget,
            transactions,
            budget_allocations,
        )
        if finite_amount(transaction.amount) is not None
    ]
    views = sort_newest_first(
        [build_transaction_view(t, categories_by_id) for t in budget_transactions]
    )

    details = [
        AllocationDetail(
            allocation=allocation,
            category=resolve_category(allocation.category_id, categories_by_id),
            transactions=[
                view for view in views if view.category_id == allocation.category_id
            ],
        )
        for allocation in budget_allocations
    ]
    total_allocated = _sum_allocations(budget_allocations)
    total_spent = sum_debits(budget_transactions)
    return BudgetDetails(
        budget=budget,
        allocations=details,
        transactions=views,
        total_allocated=total_allocated,
        total_spent=total_spent,
        bar_value=calculator.calculate(
            total_allocated,
            total_spent,
            budget.start_date,
            budget.end_date,
            now,
        ),
    )


def _sum_allocations(allocations: Sequence[Allocation]) -> Decimal:
    return sum(
        (
            amount
            for amount in (finite_amount(a.amount) for a in allocations)
            if amount is not None
        ),
        Decimal("0"),
    )


__all__ = [
    "select_active_budgets",
    "filter_budget_allocations",
    "filter_budget_transactions",
    "build_report",
    "build_reports",
    "build_budget_details",
]
