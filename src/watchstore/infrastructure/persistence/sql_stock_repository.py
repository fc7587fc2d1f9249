"""SQLAlchemy implementation of StockRepository.

Every write is a single UPDATE statement; the decrement carries its
own ``stock >= quantity`` guard so the check and the write cannot be
separated by another transaction.
"""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from watchstore.domain.model.value_objects import ProductKind, ProductRef
from watchstore.domain.repository.stock_repository import StockRepository
from watchstore.infrastructure.persistence.orm import ComponentRow, WatchRow

_MODELS = {
    ProductKind.WATCH: WatchRow,
    ProductKind.COMPONENT: ComponentRow,
}


class SqlAlchemyStockRepository(StockRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def current(self, ref: ProductRef) -> int | None:
        table = _MODELS[ref.kind].__table__
        return self._session.execute(
            select(table.c.stock).where(table.c.id == ref.id)
        ).scalar_one_or_none()

    def decrement_if_available(self, ref: ProductRef, quantity: int) -> bool:
        table = _MODELS[ref.kind].__table__
        result = self._session.execute(
            update(table)
            .where(table.c.id == ref.id, table.c.stock >= quantity)
            .values(stock=table.c.stock - quantity)
        )
        self._expire(ref)
        return result.rowcount == 1

    def increment(self, ref: ProductRef, quantity: int) -> None:
        table = _MODELS[ref.kind].__table__
        self._session.execute(
            update(table)
            .where(table.c.id == ref.id)
            .values(stock=table.c.stock + quantity)
        )
        self._expire(ref)

    def _expire(self, ref: ProductRef) -> None:
        """Drop the cached stock of a loaded row so the next read hits the store."""
        model = _MODELS[ref.kind]
        row = self._session.identity_map.get(self._session.identity_key(model, ref.id))
        if row is not None:
            self._session.expire(row, ["stock"])
