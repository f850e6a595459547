"""Database infrastructure for the budget health engine.

This module exposes concrete helpers to create and reuse SQLAlchemy engines
connected to the budgeting database. It belongs to the infrastructure layer
because it deals with external systems (SQLite or any SQLAlchemy backend).
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from budget_health.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    A ``.env`` file is loaded first so local settings are honored.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_budget_engine: Optional[Engine] = None


def get_budget_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the BUDGET_DB_URL database.

    Returns:
        Engine: Lazily initialized engine connected to the budgeting database.
    """
    global _budget_engine
    if _budget_engine is None:
        db_url = _get_env_var("BUDGET_DB_URL")
        _budget_engine = _create_engine(db_url)
    return _budget_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by SQLAlchemy engines.

    Without an explicit URL the adapter shares the engine configured through
    BUDGET_DB_URL; with one it lazily creates and keeps its own engine.
    """

    def __init__(self, db_url: str | None = None) -> None:
        self._db_url = db_url
        self._engine: Optional[Engine] = None

    def get_budget_engine(self) -> Engine:
        """Get the engine for the budgeting database.

        Returns:
            Engine: SQLAlchemy engine connected to the budgeting database.
        """
        if self._db_url is None:
            return get_budget_engine()
        if self._engine is None:
            self._engine = _create_engine(self._db_url)
        return self._engine


__all__ = [
    "get_budget_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
