"""Composition root: turns Settings into a unit-of-work factory.

Handlers and CLI commands only ever see ``UnitOfWorkFactory``; the engine,
session factory and schema creation are decided here.
"""

from __future__ import annotations

from sqlalchemy.engine import Engine

from watchstore.config import Settings
from watchstore.domain.repository.unit_of_work import UnitOfWork, UnitOfWorkFactory
from watchstore.infrastructure.persistence.database import (
    create_tables,
    init_engine_from_url,
    make_session_factory,
)
from watchstore.infrastructure.persistence.sql_unit_of_work import SqlAlchemyUnitOfWork

# One engine per database URL for the lifetime of the process.
_engines: dict[str, Engine] = {}


def engine_for(settings: Settings) -> Engine:
    engine = _engines.get(settings.database_url)
    if engine is None:
        engine = init_engine_from_url(settings.database_url, echo=settings.sql_echo)
        create_tables(engine)
        _engines[settings.database_url] = engine
    return engine


def unit_of_work_factory(settings: Settings | None = None) -> UnitOfWorkFactory:
    settings = settings or Settings.from_env()
    session_factory = make_session_factory(engine_for(settings))

    def unit_of_work() -> UnitOfWork:
        return SqlAlchemyUnitOfWork(session_factory)

    return unit_of_work


def dispose_engines() -> None:
    for engine in _engines.values():
        engine.dispose()
    _engines.clear()
