"""Shared fixtures for the watchstore test suite."""

from __future__ import annotations

import pytest

from watchstore.infrastructure.persistence.database import (
    create_tables,
    init_engine_from_url,
    make_session_factory,
)
from watchstore.infrastructure.persistence.sql_unit_of_work import SqlAlchemyUnitOfWork
from watchstore.logging_config import reset_logging


@pytest.fixture(autouse=True)
def _isolated_logging():
    """Undo configure_logging() so caplog keeps seeing watchstore records."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def sql_engine(tmp_path):
    engine = init_engine_from_url(f"sqlite:///{tmp_path / 'watchstore.db'}")
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sql_uow_factory(sql_engine):
    session_factory = make_session_factory(sql_engine)
    return lambda: SqlAlchemyUnitOfWork(session_factory)
