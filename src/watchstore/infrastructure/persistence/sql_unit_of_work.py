"""SQLAlchemy unit of work: one session, one transaction."""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from watchstore.domain.exceptions import TransactionError
from watchstore.domain.repository.unit_of_work import UnitOfWork
from watchstore.infrastructure.persistence.sql_catalog_repository import (
    SqlAlchemyComponentRepository,
    SqlAlchemyWatchRepository,
)
from watchstore.infrastructure.persistence.sql_custom_watch_repository import (
    SqlAlchemyCustomWatchRepository,
)
from watchstore.infrastructure.persistence.sql_order_repository import (
    SqlAlchemyOrderRepository,
)
from watchstore.infrastructure.persistence.sql_stock_repository import (
    SqlAlchemyStockRepository,
)
from watchstore.logging_config import get_logger

logger = get_logger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory
        self._session: Session | None = None

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        self._session = self._session_factory()
        self.watches = SqlAlchemyWatchRepository(self._session)
        self.components = SqlAlchemyComponentRepository(self._session)
        self.custom_watches = SqlAlchemyCustomWatchRepository(self._session)
        self.orders = SqlAlchemyOrderRepository(self._session)
        self.stock = SqlAlchemyStockRepository(self._session)
        super().__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            super().__exit__(exc_type, exc, tb)
        finally:
            self.session.close()
        if isinstance(exc, SQLAlchemyError):
            # Store-level failures mid-transaction (lock timeouts, constraint
            # violations on flush) surface as one domain error.
            raise TransactionError(
                "The store rejected the transaction; nothing was saved"
            ) from exc

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("Unit of work used outside of a 'with' block")
        return self._session

    def commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.warning("transaction_commit_failed", exc_info=True)
            raise TransactionError(
                "The store rejected the transaction; nothing was saved"
            ) from exc
        logger.debug("transaction_committed")

    def rollback(self) -> None:
        if self.session.in_transaction():
            self.session.rollback()
            logger.debug("transaction_rolled_back")
