"""Budget Adherence Ratio (BAR) calculations.

BAR compares spend to date with the spend expected to date. The primary model
expects spending along a front-loaded curve ``a*t - (a-1)*t^2`` where ``t`` is
the elapsed fraction of the period, optionally blended with the user's
historical spending pattern. The older linear model is kept as an alternative
formula.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation

from budget_health.domain.constants import (
    BAR_FORMULA_CURVE,
    BAR_FORMULA_LINEAR,
    DEFAULT_CURVE_FACTOR,
    HISTORICAL_BLEND_WEIGHT,
    HISTORICAL_RECENCY_DECAY,
    LINEAR_ELAPSED_OFFSET,
    MIN_HISTORICAL_PERIODS,
)
from budget_health.domain.models.bar import (
    BarCalculation,
    HistoricalSpendingPeriod,
)
from budget_health.domain.policies.bar_bands import (
    classify_bar,
    describe_bar_status,
)
from budget_health.utils.datetime_utils import days_between
from budget_health.utils.decimal_utils import coerce_decimal, finite_amount

_ZERO = Decimal("0")
_ONE = Decimal("1")


def calculate_bar(
    total_budget,
    total_spent,
    start_date: datetime,
    end_date: datetime,
    now: datetime,
    *,
    curve_factor=DEFAULT_CURVE_FACTOR,
    historical_periods: Sequence[HistoricalSpendingPeriod] | None = None,
) -> Decimal:
    """Return the BAR of a period using the front-loaded curve.

    Args:
        total_budget: Planned spend for the whole period.
        total_spent: Spend recorded so far.
        start_date: First instant of the period.
        end_date: Last instant of the period (inclusive).
        now: Evaluation time.
        curve_factor: Front-loading constant ``a`` (>= 1).
        historical_periods: Optional past periods to learn the pace from.

    Returns:
        Decimal: Spent over expected spend, or 0 when the inputs are invalid
        or nothing is expected yet.
    """
    return evaluate_bar(
        total_budget,
        total_spent,
        start_date,
        end_date,
        now,
        curve_factor=curve_factor,
        historical_periods=historical_periods,
    ).bar


def calculate_linear_bar(
    total_budget,
    total_spent,
    start_date: datetime,
    end_date: datetime,
    now: datetime,
) -> Decimal:
    """Return the BAR of a period using the legacy linear model.

    ``BAR = (spent / budget) / ((elapsed + 0.3) / total_days)`` where the
    elapsed day count includes the current day.
    """
    return evaluate_bar(
        total_budget,
        total_spent,
        start_date,
        end_date,
        now,
        formula=BAR_FORMULA_LINEAR,
    ).bar


def evaluate_bar(
    total_budget,
    total_spent,
    start_date: datetime,
    end_date: datetime,
    now: datetime,
    *,
    curve_factor=DEFAULT_CURVE_FACTOR,
    formula: str = BAR_FORMULA_CURVE,
    historical_periods: Sequence[HistoricalSpendingPeriod] | None = None,
) -> BarCalculation:
    """Return the BAR together with the figures it was derived from.

    Args:
        total_budget: Planned spend for the whole period.
        total_spent: Spend recorded so far.
        start_date: First instant of the period.
        end_date: Last instant of the period (inclusive).
        now: Evaluation time.
        curve_factor: Front-loading constant ``a`` (>= 1).
        formula: ``"curve"`` or ``"linear"``.
        historical_periods: Optional past periods for the curve formula.

    Returns:
        BarCalculation: Ratio, band, expected spend and remaining figures.
    """
    budget = finite_amount(total_budget)
    spent = finite_amount(total_spent)
    period = _measure_period(start_date, end_date, now, formula)

    expected = _ZERO
    bar = _ZERO
    days_remaining = 0
    if period is not None:
        elapsed_days, total_days = period
        days_remaining = max(0, total_days - elapsed_days)
        if budget is not None and budget > 0:
            if formula == BAR_FORMULA_LINEAR:
                fraction = _linear_fraction(elapsed_days, total_days)
            else:
                fraction = expected_spend_fraction(
                    elapsed_days,
                    total_days,
                    curve_factor=curve_factor,
                    historical_periods=historical_periods,
                )
            expected = fraction * budget
            if expected > 0 and spent is not None:
                bar = spent / expected

    status = classify_bar(bar)
    remaining = _ZERO
    if budget is not None and spent is not None:
        remaining = max(_ZERO, budget - spent)
    return BarCalculation(
        bar=bar,
        status=status,
        message=describe_bar_status(status),
        expected_spent=expected,
        actual_spent=spent if spent is not None else _ZERO,
        remaining=remaining,
        days_remaining=days_remaining,
    )


def expected_spend_fraction(
    elapsed_days: int,
    total_days: int,
    *,
    curve_factor=DEFAULT_CURVE_FACTOR,
    historical_periods: Sequence[HistoricalSpendingPeriod] | None = None,
) -> Decimal:
    """Return the share of the budget expected to be spent after elapsed_days.

    Args:
        elapsed_days: Days elapsed, clamped to ``[0, total_days]``.
        total_days: Inclusive length of the period.
        curve_factor: Front-loading constant ``a`` (>= 1).
        historical_periods: Past periods; used when at least two are given.

    Returns:
        Decimal: Expected fraction in ``[0, 1]``.
    """
    if total_days <= 0:
        return _ZERO
    elapsed_days = min(max(elapsed_days, 0), total_days)
    t = Decimal(elapsed_days) / Decimal(total_days)
    curve = front_loaded_fraction(t, curve_factor)
    if historical_periods and len(historical_periods) >= MIN_HISTORICAL_PERIODS:
        historical = historical_average_fraction(t, historical_periods)
        return (
            HISTORICAL_BLEND_WEIGHT * historical
            + (_ONE - HISTORICAL_BLEND_WEIGHT) * curve
        )
    return curve


def front_loaded_fraction(t: Decimal, curve_factor=DEFAULT_CURVE_FACTOR) -> Decimal:
    """Return ``a*t - (a-1)*t^2`` capped at 1."""
    a = resolve_curve_factor(curve_factor)
    fraction = a * t - (a - _ONE) * t * t
    return min(max(fraction, _ZERO), _ONE)


def historical_average_fraction(
    t: Decimal,
    periods: Sequence[HistoricalSpendingPeriod],
) -> Decimal:
    """Return the recency-weighted spend ratio of past periods at time t.

    The last period in the sequence is the most recent and weighs 1; each
    earlier period weighs 0.8 times the next one.

    Args:
        t: Elapsed fraction of the period.
        periods: Past periods, oldest first.

    Returns:
        Decimal: Weighted spend ratio, or t when no period has usable data.
    """
    ratios = [
        ratio
        for ratio in (_interpolate_ratio(t, period) for period in periods)
        if ratio is not None
    ]
    if not ratios:
        return t
    count = len(ratios)
    weights = [HISTORICAL_RECENCY_DECAY ** (count - 1 - i) for i in range(count)]
    weighted_sum = sum(
        (ratio * weight for ratio, weight in zip(ratios, weights)),
        _ZERO,
    )
    return weighted_sum / sum(weights, _ZERO)


def resolve_curve_factor(value) -> Decimal:
    """Return a usable curve factor, falling back to the default."""
    try:
        factor = coerce_decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return DEFAULT_CURVE_FACTOR
    if not factor.is_finite() or factor < _ONE:
        return DEFAULT_CURVE_FACTOR
    return factor


@dataclass(frozen=True)
class BarCalculator:
    """BAR strategy configured once and reused across budgets.

    Attributes:
        curve_factor: Front-loading constant ``a``.
        formula: ``"curve"`` or ``"linear"``.
        historical_periods: Optional past periods for the curve formula.
    """

    curve_factor: Decimal = DEFAULT_CURVE_FACTOR
    formula: str = BAR_FORMULA_CURVE
    historical_periods: tuple[HistoricalSpendingPeriod, ...] = field(
        default_factory=tuple
    )

    def calculate(
        self,
        total_budget,
        total_spent,
        start_date: datetime,
        end_date: datetime,
        now: datetime,
    ) -> Decimal:
        return self.evaluate(
            total_budget,
            total_spent,
            start_date,
            end_date,
            now,
        ).bar

    def evaluate(
        self,
        total_budget,
        total_spent,
        start_date: datetime,
        end_date: datetime,
        now: datetime,
    ) -> BarCalculation:
        return evaluate_bar(
            total_budget,
            total_spent,
            start_date,
            end_date,
            now,
            curve_factor=self.curve_factor,
            formula=self.formula,
            historical_periods=self.historical_periods or None,
        )


def _measure_period(
    start_date: datetime,
    end_date: datetime,
    now: datetime,
    formula: str,
) -> tuple[int, int] | None:
    if end_date < start_date:
        return None
    total_days = days_between(start_date, end_date) + 1
    if total_days <= 0:
        return None
    if now < start_date:
        return 0, total_days
    if now > end_date:
        return total_days, total_days
    elapsed = days_between(start_date, now)
    if formula == BAR_FORMULA_LINEAR:
        elapsed += 1
    return min(elapsed, total_days), total_days


def _linear_fraction(elapsed_days: int, total_days: int) -> Decimal:
    return (Decimal(elapsed_days) + LINEAR_ELAPSED_OFFSET) / Decimal(total_days)


def _interpolate_ratio(
    t: Decimal,
    period: HistoricalSpendingPeriod,
) -> Decimal | None:
    total_budget = finite_amount(period.total_budget)
    if not period.checkpoints or total_budget is None or total_budget <= 0:
        return None
    target_day = t * Decimal(period.total_days)
    before = None
    after = None
    for checkpoint in period.checkpoints:
        if checkpoint.day <= target_day:
            before = checkpoint
        if checkpoint.day >= target_day and after is None:
            after = checkpoint
    before_spent = finite_amount(before.spent) if before is not None else None
    after_spent = finite_amount(after.spent) if after is not None else None
    # A period with an unusable neighbouring checkpoint is skipped.
    if (before is not None and before_spent is None) or (
        after is not None and after_spent is None
    ):
        return None
    if before is not None and after is not None and before.day != after.day:
        ratio = (target_day - before.day) / Decimal(after.day - before.day)
        spent = before_spent + ratio * (after_spent - before_spent)
        return spent / total_budget
    if before is not None:
        return before_spent / total_budget
    if after is not None:
        return after_spent / total_budget
    return None


__all__ = [
    "BarCalculator",
    "calculate_bar",
    "calculate_linear_bar",
    "evaluate_bar",
    "expected_spend_fraction",
    "front_loaded_fraction",
    "historical_average_fraction",
    "resolve_curve_factor",
]
