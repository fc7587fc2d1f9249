"""Application service: Set Order Status use case.

Moving an order to CANCELLED returns every standard watch on it to
stock, in the same transaction as the status change. Custom-watch
lines are not restocked: their components stay consumed.

Re-cancelling a cancelled order changes nothing, so stock is never
credited twice. The status write is conditional on the status read
here; if another request changed it in between, the whole transition
is rolled back.
"""

from __future__ import annotations

from watchstore.application.dto import Caller, OrderDTO
from watchstore.application.mapping import custom_watches_on, order_to_dto
from watchstore.domain.exceptions import EntityNotFoundError, TransactionError
from watchstore.domain.model.order import OrderStatus
from watchstore.domain.repository.unit_of_work import UnitOfWorkFactory
from watchstore.domain.service.inventory_ledger import InventoryLedger
from watchstore.logging_config import get_logger

logger = get_logger(__name__)


class SetOrderStatusHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, caller: Caller, order_id: str, new_status: str | OrderStatus) -> OrderDTO:
        caller.require_admin()
        status = OrderStatus.parse(new_status)

        with self._uow_factory() as uow:
            order = uow.orders.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError(f"Order #{order_id} not found")

            custom_watches = custom_watches_on(uow, [order])
            previous = order.status
            if not order.transition_to(status):
                return order_to_dto(order, custom_watches)

            if not uow.orders.compare_and_set_status(order.id, previous, status):
                raise TransactionError(
                    f"Order #{order_id} was modified concurrently; please retry"
                )

            restocked = 0
            if status == OrderStatus.CANCELLED:
                ledger = InventoryLedger(uow.stock)
                for ref, quantity in order.restock_lines():
                    ledger.increment_stock(ref, quantity)
                    restocked += quantity

            uow.commit()

        logger.info(
            "order_status_changed",
            extra={
                "order_id": order.id,
                "from_status": previous.value,
                "to_status": status.value,
                "admin_id": caller.user_id,
            },
        )
        if status == OrderStatus.CANCELLED:
            logger.info(
                "order_cancelled_restocked",
                extra={"order_id": order.id, "units_restocked": restocked},
            )
        return order_to_dto(order, custom_watches)
