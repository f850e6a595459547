"""Settings helpers for infrastructure adapters."""

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import os

import dotenv

from budget_health.domain.constants import (
    BAR_FORMULA_CURVE,
    BAR_FORMULAS,
    DEFAULT_CURVE_FACTOR,
)
from budget_health.infrastructure.logging.logger import get_app_logger
from budget_health.utils.utils import get_project_root

DEFAULT_BACKEND = "sqlalchemy"
SUPPORTED_BACKENDS = ("sqlalchemy", "demo")
DEFAULT_DEBOUNCE_MS = 100

_ENV_KEYS = {
    "backend": "BUDGET_BACKEND",
    "database_url": "BUDGET_DB_URL",
    "bar.curveFactor": "BAR_CURVE_FACTOR",
    "bar.formula": "BAR_FORMULA",
    "dashboard.debounceMs": "DASHBOARD_DEBOUNCE_MS",
}


@dataclass(frozen=True)
class BudgetHealthSettings:
    """Settings for the budget health engine.

    Attributes:
        backend: Snapshot backend identifier (sqlalchemy or demo).
        database_url: SQLAlchemy URL of the budgeting database.
        curve_factor: Front-loading constant of the BAR curve.
        bar_formula: BAR formula identifier (curve or linear).
        debounce_ms: Quiet window before the dashboard recomputes.
    """

    backend: str = DEFAULT_BACKEND
    database_url: str | None = None
    curve_factor: Decimal = DEFAULT_CURVE_FACTOR
    bar_formula: str = BAR_FORMULA_CURVE
    debounce_ms: int = DEFAULT_DEBOUNCE_MS

    @classmethod
    def from_env(cls) -> "BudgetHealthSettings":
        """Build settings from environment variables.

        A ``.env`` file in the working directory is loaded first.

        Returns:
            BudgetHealthSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        values = {}
        for key, env_name in _ENV_KEYS.items():
            raw = os.getenv(env_name)
            if raw is not None and raw.strip():
                values[key] = raw
        return cls.from_mapping(values)

    @classmethod
    def from_mapping(cls, values: Mapping[str, object]) -> "BudgetHealthSettings":
        """Build settings from a configuration mapping.

        Args:
            values: Mapping using the dotted keys ``backend``,
                ``database_url``, ``bar.curveFactor``, ``bar.formula`` and
                ``dashboard.debounceMs``.

        Returns:
            BudgetHealthSettings: Validated settings; invalid values fall back
            to their defaults with a warning.
        """
        logger = get_app_logger()
        backend = str(values.get("backend") or DEFAULT_BACKEND).strip().lower()
        raw_url = values.get("database_url")
        database_url = str(raw_url).strip() if raw_url else None
        if database_url is None and backend == "sqlalchemy":
            database_url = cls._default_database_url(logger=logger)
        return cls(
            backend=backend,
            database_url=database_url,
            curve_factor=cls._parse_curve_factor(
                values.get("bar.curveFactor"),
                logger=logger,
            ),
            bar_formula=cls._parse_formula(
                values.get("bar.formula"),
                logger=logger,
            ),
            debounce_ms=cls._parse_debounce(
                values.get("dashboard.debounceMs"),
                logger=logger,
            ),
        )

    @staticmethod
    def _parse_curve_factor(raw, logger) -> Decimal:
        if raw is None:
            return DEFAULT_CURVE_FACTOR
        try:
            factor = Decimal(str(raw).strip())
        except (InvalidOperation, ValueError):
            factor = None
        if factor is None or not factor.is_finite() or factor < 1:
            logger.warning(
                f"Invalid BAR curve factor {raw!r}; "
                f"using {DEFAULT_CURVE_FACTOR}"
            )
            return DEFAULT_CURVE_FACTOR
        return factor

    @staticmethod
    def _parse_formula(raw, logger) -> str:
        if raw is None:
            return BAR_FORMULA_CURVE
        formula = str(raw).strip().lower()
        if formula not in BAR_FORMULAS:
            logger.warning(
                f"Unknown BAR formula {raw!r}; using {BAR_FORMULA_CURVE}"
            )
            return BAR_FORMULA_CURVE
        return formula

    @staticmethod
    def _parse_debounce(raw, logger) -> int:
        if raw is None:
            return DEFAULT_DEBOUNCE_MS
        try:
            debounce = int(str(raw).strip())
        except ValueError:
            debounce = -1
        if debounce < 0:
            logger.warning(
                f"Invalid dashboard debounce {raw!r}; "
                f"using {DEFAULT_DEBOUNCE_MS} ms"
            )
            return DEFAULT_DEBOUNCE_MS
        return debounce

    @staticmethod
    def _default_database_url(logger) -> str | None:
        """Return a SQLite URL when data/ holds exactly one database file.

        Args:
            logger: Logger used for warnings.

        Returns:
            str | None: ``sqlite:///`` URL of the single data/*.db file.
        """
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            return None
        matches = sorted(data_dir.glob("*.db"))
        if len(matches) == 1:
            return f"sqlite:///{matches[0].resolve()}"
        if len(matches) > 1:
            logger.warning(
                "Multiple .db files found in data/. "
                "Set BUDGET_DB_URL to choose one."
            )
        return None


__all__ = [
    "BudgetHealthSettings",
    "DEFAULT_BACKEND",
    "DEFAULT_DEBOUNCE_MS",
    "SUPPORTED_BACKENDS",
]
