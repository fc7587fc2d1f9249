"""Application service: order queries."""

from __future__ import annotations

from watchstore.application.dto import Caller, OrderDTO
from watchstore.application.mapping import custom_watches_on, order_to_dto
from watchstore.domain.exceptions import EntityNotFoundError
from watchstore.domain.model.order import OrderStatus
from watchstore.domain.repository.unit_of_work import UnitOfWorkFactory


class ShowOrderHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, caller: Caller, order_id: str) -> OrderDTO:
        """Return one order. Users only ever see their own."""
        with self._uow_factory() as uow:
            order = uow.orders.get_by_id(order_id)
            if order is None or not (caller.is_admin or order.is_owned_by(caller.user_id)):
                raise EntityNotFoundError(f"Order #{order_id} not found")
            custom_watches = custom_watches_on(uow, [order])
        return order_to_dto(order, custom_watches)


class ListOrdersHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, caller: Caller, status: str | None = None) -> list[OrderDTO]:
        """List the caller's orders, newest first (every order for admins)."""
        status_filter = OrderStatus.parse(status) if status else None
        with self._uow_factory() as uow:
            if caller.is_admin:
                orders = uow.orders.list_all(status_filter)
            else:
                orders = uow.orders.list_for_user(caller.user_id, status_filter)
            custom_watches = custom_watches_on(uow, orders)
        return [order_to_dto(order, custom_watches) for order in orders]
