"""CLI adapter printing the details of one budget."""

import os

from budget_health.adapters.cli_helpers import (
    format_amount,
    format_ratio,
    parse_report_time,
)
from budget_health.application.use_cases.get_budget_details import (
    BudgetNotFoundError,
)
from budget_health.infrastructure.container import (
    build_budget_details_use_case,
)
from budget_health.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from budget_health.infrastructure.settings import BudgetHealthSettings


def main() -> None:
    """Print allocations and transactions of the budget named by BUDGET_ID."""
    logger = get_app_logger()
    get_usage_logger().info("budget-health-details")
    budget_id = os.getenv("BUDGET_ID")
    if not budget_id:
        logger.warning("BUDGET_ID is required to show budget details.")
        return
    now = parse_report_time(os.getenv("BUDGET_REPORT_DATE"), logger)
    settings = BudgetHealthSettings.from_env()
    try:
        use_case = build_budget_details_use_case(
            settings,
            reference_date=now,
        )
        details = use_case.execute(budget_id, now)
    except (RuntimeError, BudgetNotFoundError) as exc:
        logger.error(str(exc))
        return

    budget = details.budget
    print(
        f"{budget.name} "
        f"({budget.start_date:%Y-%m-%d} to {budget.end_date:%Y-%m-%d})"
    )
    print(
        f"  Amount: {format_amount(budget.amount)}  "
        f"Allocated: {format_amount(details.total_allocated)}  "
        f"Unallocated: {format_amount(details.unallocated)}"
    )
    print(
        f"  Spent: {format_amount(details.total_spent)} "
        f"({format_ratio(details.spent_percentage)}%)  "
        f"BAR: {format_ratio(details.bar_value)}"
    )
    for detail in details.allocations:
        marker = " !" if detail.is_overspent else ""
        print(
            f"  {detail.category.name}: {format_amount(detail.spent)} / "
            f"{format_amount(detail.allocation.amount)}{marker}"
        )
    print("Transactions")
    for view in details.transactions:
        category = view.category_name or "Uncategorized"
        print(
            f"  {view.transaction_date:%Y-%m-%d} {view.name} "
            f"[{category}] {view.type.value} {format_amount(view.amount)}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
