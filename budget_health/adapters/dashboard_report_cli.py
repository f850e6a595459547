"""CLI adapter printing the budget health dashboard.

This module wires the GetDashboardUseCase to the configured snapshot backend
and prints one block per active budget followed by the monthly overview.
"""

import os

from budget_health.adapters.cli_helpers import (
    format_amount,
    format_ratio,
    parse_report_time,
)
from budget_health.domain.models import BudgetReport, MonthlyOverview
from budget_health.domain.policies.bar_bands import describe_bar_status
from budget_health.infrastructure.container import build_dashboard_use_case
from budget_health.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from budget_health.infrastructure.settings import BudgetHealthSettings


def _print_report(report: BudgetReport) -> None:
    budget = report.budget
    print(
        f"{budget.name} "
        f"({budget.start_date:%Y-%m-%d} to {budget.end_date:%Y-%m-%d})"
    )
    print(
        f"  Budgeted: {format_amount(report.total_budgeted)}  "
        f"Spent: {format_amount(report.total_spent)}  "
        f"Remaining: {format_amount(report.remaining)}"
    )
    print(
        f"  BAR: {format_ratio(report.bar_value)} "
        f"({describe_bar_status(report.bar_status)})"
    )
    for datum in report.chart_data:
        marker = " !" if datum.is_overspent else ""
        print(
            f"    {datum.category_name}: "
            f"{format_amount(datum.transaction_amount)} / "
            f"{format_amount(datum.allocation_amount)}{marker}"
        )


def _print_overview(overview: MonthlyOverview) -> None:
    print(f"Month {overview.month:%Y-%m}")
    print(
        f"  Spent: {format_amount(overview.total_spent)} "
        f"(budgeted {format_amount(overview.budgeted_spent)} in "
        f"{overview.budgeted_count} transactions, unassigned "
        f"{format_amount(overview.unassigned_spent)} in "
        f"{overview.unassigned_count} transactions)"
    )
    print(
        f"  Share of active budgets spent: "
        f"{format_ratio(overview.percentage_spent)}%"
    )
    if overview.has_unassigned_spending:
        print("  Some spending is not assigned to a budget.")


def main() -> None:
    """Print the dashboard for the configured backend."""
    logger = get_app_logger()
    get_usage_logger().info("budget-health-report")
    now = parse_report_time(os.getenv("BUDGET_REPORT_DATE"), logger)
    settings = BudgetHealthSettings.from_env()
    try:
        use_case = build_dashboard_use_case(settings, reference_date=now)
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    view = use_case.execute(now)

    if not view.reports:
        print("No active budgets.")
    for report in view.reports:
        _print_report(report)
    _print_overview(view.monthly_overview)


if __name__ == "__main__":  # pragma: no cover
    main()
