"""Tests for the infrastructure.db module."""

import pytest

from budget_health.infrastructure import db as db_module


def test_get_env_var_reads_environment(monkeypatch):
    """_get_env_var should load .env and return the requested value."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("BUDGET_DB_URL", "sqlite:///budget.db")

    assert db_module._get_env_var("BUDGET_DB_URL") == "sqlite:///budget.db"


def test_get_env_var_raises_when_missing(monkeypatch):
    """Missing env vars should raise a RuntimeError."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.delenv("BUDGET_DB_URL", raising=False)

    with pytest.raises(RuntimeError):
        db_module._get_env_var("BUDGET_DB_URL")


def test_create_engine_passes_pool_configuration(monkeypatch):
    """_create_engine should configure QueuePool with health checks."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    engine = db_module._create_engine("sqlite:///budget.db")

    assert engine == "engine"
    assert captured["db_url"] == "sqlite:///budget.db"
    assert captured["kwargs"]["poolclass"] is db_module.QueuePool
    assert captured["kwargs"]["pool_size"] == 5
    assert captured["kwargs"]["max_overflow"] == 5
    assert captured["kwargs"]["pool_pre_ping"] is True
    assert captured["kwargs"]["future"] is True


def test_get_budget_engine_caches_engine(monkeypatch):
    """get_budget_engine should memoize the created engine."""
    monkeypatch.setattr(db_module, "_budget_engine", None)
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("BUDGET_DB_URL", "sqlite:///budget.db")

    engine_one = db_module.get_budget_engine()
    engine_two = db_module.get_budget_engine()

    assert engine_one is engine_two
    assert engine_one == "engine:sqlite:///budget.db"
    assert created == ["sqlite:///budget.db"]


def test_adapter_with_url_keeps_its_own_engine(monkeypatch):
    created = []

    def fake_create_engine(url):
        created.append(url)
        return object()

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    adapter = db_module.SqlAlchemyDatabaseEngineAdapter("sqlite:///other.db")

    assert adapter.get_budget_engine() is adapter.get_budget_engine()
    assert created == ["sqlite:///other.db"]


def test_adapter_without_url_delegates_to_shared_engine(monkeypatch):
    sentinel = object()
    monkeypatch.setattr(db_module, "get_budget_engine", lambda: sentinel)

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter()

    assert adapter.get_budget_engine() is sentinel
