"""Two sessions race for the last unit of stock in a real database file."""

import threading

from tests.fakes import make_watch
from watchstore.application.create_order import CreateOrderHandler
from watchstore.application.dto import (
    Caller,
    CreateOrderRequest,
    OrderDTO,
    OrderLineRequest,
    Role,
)
from watchstore.application.show_order import ListOrdersHandler
from watchstore.domain.exceptions import InsufficientStockError
from watchstore.domain.model.value_objects import ProductRef
from watchstore.domain.repository.stock_repository import StockRepository
from watchstore.infrastructure.persistence.database import make_session_factory
from watchstore.infrastructure.persistence.sql_unit_of_work import SqlAlchemyUnitOfWork


class _GatedStock(StockRepository):
    """Holds every decrement until all racers have validated their order."""

    def __init__(self, inner: StockRepository, gate: threading.Barrier) -> None:
        self._inner = inner
        self._gate = gate

    def current(self, ref):
        return self._inner.current(ref)

    def decrement_if_available(self, ref, quantity):
        self._gate.wait(timeout=5)
        return self._inner.decrement_if_available(ref, quantity)

    def increment(self, ref, quantity):
        self._inner.increment(ref, quantity)


class _GatedUnitOfWork(SqlAlchemyUnitOfWork):

    def __init__(self, session_factory, gate):
        super().__init__(session_factory)
        self._gate = gate

    def __enter__(self):
        super().__enter__()
        self.stock = _GatedStock(self.stock, self._gate)
        return self


def test_both_pass_validation_only_one_gets_the_watch(sql_engine):
    session_factory = make_session_factory(sql_engine)
    with SqlAlchemyUnitOfWork(session_factory) as uow:
        uow.watches.add(make_watch("w-1", stock=1))
        uow.commit()

    gate = threading.Barrier(2)
    handler = CreateOrderHandler(lambda: _GatedUnitOfWork(session_factory, gate))
    results: list[object] = []

    def place(user_id: str) -> None:
        try:
            results.append(handler.handle(
                Caller(user_id),
                CreateOrderRequest(items=[OrderLineRequest(watch_id="w-1", quantity=1)]),
            ))
        except InsufficientStockError as exc:
            results.append(exc)

    threads = [threading.Thread(target=place, args=(u,)) for u in ("alice", "bob")]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)

    assert len(results) == 2
    assert len([r for r in results if isinstance(r, OrderDTO)]) == 1
    loser = next(r for r in results if not isinstance(r, OrderDTO))
    assert isinstance(loser, InsufficientStockError)
    assert "Diver 300" in str(loser)

    with SqlAlchemyUnitOfWork(session_factory) as uow:
        assert uow.stock.current(ProductRef.watch("w-1")) == 0
    assert len(ListOrdersHandler(lambda: SqlAlchemyUnitOfWork(session_factory)).handle(
        Caller("admin", Role.ADMIN)
    )) == 1
