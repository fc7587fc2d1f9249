"""Engine and session factory construction.

Every transaction in the application is a session created from the
factory returned here, wrapped by ``SqlAlchemyUnitOfWork``.

Stock safety does not depend on the isolation level: decrements are
conditional UPDATE statements, so READ COMMITTED (PostgreSQL's default)
and SQLite's serialized writers both keep stock non-negative.
"""

from __future__ import annotations

from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from watchstore.infrastructure.persistence.orm import Base
from watchstore.logging_config import get_logger

logger = get_logger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def init_engine_from_url(database_url: str, echo: bool = False) -> Engine:
    """Create an engine for ``database_url``.

    SQLite URLs get their parent directory created, foreign keys
    switched on, and (for in-memory databases) a single shared
    connection so every session sees the same data.
    """
    url = make_url(database_url)
    kwargs: dict = {}

    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        if not url.database or url.database == ":memory:":
            kwargs["poolclass"] = StaticPool
        else:
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    else:
        kwargs["pool_pre_ping"] = True

    engine = create_engine(url, echo=echo, **kwargs)

    if url.get_backend_name() == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)

    logger.info(
        "engine_initialized",
        extra={"dialect": url.get_backend_name(), "echo": echo},
    )
    return engine


def make_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, expire_on_commit=False)


def create_tables(engine: Engine) -> None:
    """Create every table that does not exist yet."""
    Base.metadata.create_all(engine)
    logger.info("tables_created", extra={"tables": sorted(Base.metadata.tables)})
