"""SQLAlchemy-backed repository for live budgeting records."""

from sqlalchemy import text

from budget_health.application.ports.budget_snapshot import BudgetSnapshotPort
from budget_health.application.ports.database import DatabaseEnginePort
from budget_health.domain.models import (
    Allocation,
    Budget,
    Category,
    Transaction,
    TransactionType,
)
from budget_health.utils.datetime_utils import coerce_datetime
from budget_health.utils.decimal_utils import coerce_decimal


class SqlAlchemyBudgetRepository(BudgetSnapshotPort):
    """Repository reading budgets, allocations, transactions and categories.

    Soft-deleted rows (``is_deleted`` set) are filtered out in SQL.
    """

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the budgeting engine.
        """
        self._db_port = db_port

    def fetch_budgets(self) -> list[Budget]:
        query = text(
            """
            SELECT id, name, amount, start_date, end_date,
                   created_at, updated_at
            FROM budgets
            WHERE is_deleted = 0
            ORDER BY start_date, id
            """
        )
        rows = self._fetch_rows(query)
        return [
            Budget(
                id=str(row.id),
                name=row.name,
                amount=coerce_decimal(row.amount),
                start_date=coerce_datetime(row.start_date),
                end_date=coerce_datetime(row.end_date),
                created_at=_optional_datetime(row.created_at),
                updated_at=_optional_datetime(row.updated_at),
            )
            for row in rows
        ]

    def fetch_allocations(self) -> list[Allocation]:
        query = text(
            """
            SELECT id, budget_id, category_id, amount, created_at, updated_at
            FROM allocations
            WHERE is_deleted = 0
            ORDER BY budget_id, id
            """
        )
        rows = self._fetch_rows(query)
        return [
            Allocation(
                id=str(row.id),
                budget_id=str(row.budget_id),
                category_id=str(row.category_id),
                amount=coerce_decimal(row.amount),
                created_at=_optional_datetime(row.created_at),
                updated_at=_optional_datetime(row.updated_at),
            )
            for row in rows
        ]

    def fetch_transactions(self) -> list[Transaction]:
        query = text(
            """
            SELECT id, name, amount, type, transaction_date, category_id,
                   budget_id, notes, created_at, updated_at
            FROM transactions
            WHERE is_deleted = 0
            ORDER BY transaction_date DESC, id
            """
        )
        rows = self._fetch_rows(query)
        return [
            Transaction(
                id=str(row.id),
                name=row.name,
                amount=coerce_decimal(row.amount),
                type=TransactionType.parse(row.type),
                transaction_date=coerce_datetime(row.transaction_date),
                category_id=_optional_id(row.category_id),
                budget_id=_optional_id(row.budget_id),
                notes=row.notes,
                created_at=_optional_datetime(row.created_at),
                updated_at=_optional_datetime(row.updated_at),
            )
            for row in rows
        ]

    def fetch_categories(self) -> list[Category]:
        query = text(
            """
            SELECT id, name, icon_name, color_hex, created_at, updated_at
            FROM categories
            WHERE is_deleted = 0
            ORDER BY created_at, id
            """
        )
        rows = self._fetch_rows(query)
        return [
            Category(
                id=str(row.id),
                name=row.name,
                icon_name=row.icon_name,
                color_hex=row.color_hex,
                created_at=_optional_datetime(row.created_at),
                updated_at=_optional_datetime(row.updated_at),
            )
            for row in rows
        ]

    def _fetch_rows(self, query):
        engine = self._db_port.get_budget_engine()
        with engine.connect() as conn:
            return conn.execute(query).all()


def _optional_datetime(value):
    if value is None:
        return None
    return coerce_datetime(value)


def _optional_id(value) -> str | None:
    if value is None:
        return None
    return str(value)


__all__ = ["SqlAlchemyBudgetRepository"]
