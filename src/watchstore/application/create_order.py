"""Application service: Create Order use case.

Orchestrates the flow between the catalog, the inventory ledger and
the Order aggregate. Validation, pricing, persistence and stock
decrements all run inside one unit of work: either the order, its
items and every stock change commit together, or none of them do.
"""

from __future__ import annotations

from watchstore.application.dto import (
    Caller,
    CreateOrderRequest,
    OrderDTO,
    OrderLineRequest,
)
from watchstore.application.mapping import custom_watches_on, order_to_dto
from watchstore.application.validation import unwrap, validate_create_order
from watchstore.domain.exceptions import InsufficientStockError
from watchstore.domain.model.order import Order, OrderItem
from watchstore.domain.model.value_objects import ProductRef
from watchstore.domain.repository.unit_of_work import UnitOfWorkFactory
from watchstore.domain.service.catalog_lookup import CatalogLookup
from watchstore.domain.service.inventory_ledger import InventoryLedger
from watchstore.logging_config import get_logger

logger = get_logger(__name__)


class CreateOrderHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, caller: Caller, request: CreateOrderRequest) -> OrderDTO:
        """Create a new PENDING order for ``caller``.

        Steps:
        1. Validate the request shape (quantities, one reference per line).
        2. Resolve each line in input order and snapshot its current price.
        3. Let the Order aggregate compute the total.
        4. Persist the order and decrement standard-watch stock, then commit.
        """
        request = unwrap(validate_create_order(request))

        with self._uow_factory() as uow:
            catalog = CatalogLookup(uow)
            items = [self._price_line(catalog, caller, line) for line in request.items]

            order = Order.create(user_id=caller.user_id, items=items)
            uow.orders.add(order)

            # Custom-watch lines already consumed their components at assembly.
            ledger = InventoryLedger(uow.stock)
            for item in order.items:
                if item.watch_id is not None:
                    ledger.decrement_stock(
                        ProductRef.watch(item.watch_id),
                        item.quantity.value,
                        item.product_name,
                    )

            custom_watches = custom_watches_on(uow, [order])
            uow.commit()

        logger.info(
            "order_created",
            extra={
                "order_id": order.id,
                "user_id": caller.user_id,
                "items": len(order.items),
                "total_amount": order.total_amount.amount,
            },
        )
        return order_to_dto(order, custom_watches)

    @staticmethod
    def _price_line(catalog: CatalogLookup, caller: Caller, line: OrderLineRequest) -> OrderItem:
        quantity: int = line.quantity  # type: ignore[assignment]

        if line.watch_id is not None:
            watch = catalog.watch(line.watch_id)
            if watch.stock < quantity:
                raise InsufficientStockError(
                    watch.name, requested=quantity, available=watch.stock
                )
            return OrderItem.for_watch(
                watch.id, watch.name, quantity, watch.price  # <-- price snapshot
            )

        custom_watch = catalog.custom_watch_for(caller.user_id, line.custom_watch_id)  # type: ignore[arg-type]
        return OrderItem.for_custom_watch(
            custom_watch.id, custom_watch.name, quantity, custom_watch.total_price
        )
