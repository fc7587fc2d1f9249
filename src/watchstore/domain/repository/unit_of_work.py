"""Abstract unit of work: one transaction over every repository.

Handlers receive a unit-of-work *factory*, open one per request and
call ``commit()`` explicitly. Leaving the ``with`` block without a
commit (including by exception) rolls everything back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from watchstore.domain.repository.catalog_repository import (
    ComponentRepository,
    WatchRepository,
)
from watchstore.domain.repository.custom_watch_repository import CustomWatchRepository
from watchstore.domain.repository.order_repository import OrderRepository
from watchstore.domain.repository.stock_repository import StockRepository


class UnitOfWork(ABC):

    watches: WatchRepository
    components: ComponentRepository
    custom_watches: CustomWatchRepository
    orders: OrderRepository
    stock: StockRepository

    def __enter__(self) -> UnitOfWork:
        return self

    def __exit__(self, *exc_info) -> None:
        self.rollback()

    @abstractmethod
    def commit(self) -> None:
        """Make every change of this unit of work durable at once.

        Raises TransactionError if the store refuses the commit.
        """

    @abstractmethod
    def rollback(self) -> None:
        """Discard uncommitted changes. A no-op after ``commit()``."""


UnitOfWorkFactory = Callable[[], UnitOfWork]
