"""Domain service: Inventory Ledger.

The only writer of stock counters. Order creation, custom-watch
assembly and cancellation all go through it, inside their own unit
of work, so every stock change commits or rolls back with the order
or custom watch that caused it.

Decrements never read-then-write: the store applies a conditional
decrement and reports whether a row changed, so two transactions that
both saw the last unit cannot both take it.
"""

from __future__ import annotations

from watchstore.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from watchstore.domain.model.value_objects import ProductRef
from watchstore.domain.repository.stock_repository import StockRepository
from watchstore.logging_config import get_logger

logger = get_logger(__name__)


class InventoryLedger:

    def __init__(self, stock_repo: StockRepository) -> None:
        self._stock_repo = stock_repo

    def available(self, ref: ProductRef) -> int:
        stock = self._stock_repo.current(ref)
        if stock is None:
            raise EntityNotFoundError(f"No stock record for {ref}")
        return stock

    def decrement_stock(
        self, ref: ProductRef, quantity: int, product_name: str | None = None
    ) -> None:
        """Take ``quantity`` units out of stock.

        Raises InsufficientStockError if fewer than ``quantity`` remain
        at the moment of the write.
        """
        if quantity <= 0:
            raise ValidationError("Decrement quantity must be positive")

        if not self._stock_repo.decrement_if_available(ref, quantity):
            available = self.available(ref)
            logger.warning(
                "stock_decrement_refused",
                extra={"product": str(ref), "requested": quantity, "available": available},
            )
            raise InsufficientStockError(
                product_name or str(ref), requested=quantity, available=available
            )

        logger.info(
            "stock_decremented", extra={"product": str(ref), "quantity": quantity}
        )

    def increment_stock(self, ref: ProductRef, quantity: int) -> None:
        """Return ``quantity`` units to stock (cancellation compensation)."""
        if quantity <= 0:
            raise ValidationError("Increment quantity must be positive")
        if self._stock_repo.current(ref) is None:
            raise EntityNotFoundError(f"No stock record for {ref}")
        self._stock_repo.increment(ref, quantity)
        logger.info(
            "stock_incremented", extra={"product": str(ref), "quantity": quantity}
        )
