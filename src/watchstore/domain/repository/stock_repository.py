"""Abstract storage of the stock counters behind the inventory ledger."""

from __future__ import annotations

from abc import ABC, abstractmethod

from watchstore.domain.model.value_objects import ProductRef


class StockRepository(ABC):

    @abstractmethod
    def current(self, ref: ProductRef) -> int | None:
        """Return the stock of a product, or None if it does not exist."""

    @abstractmethod
    def decrement_if_available(self, ref: ProductRef, quantity: int) -> bool:
        """Subtract ``quantity`` in a single conditional write.

        Implementations must perform the check and the write atomically
        (``UPDATE ... WHERE stock >= quantity``) and return False when
        no row was changed.
        """

    @abstractmethod
    def increment(self, ref: ProductRef, quantity: int) -> None:
        """Add ``quantity`` to the product's stock."""
