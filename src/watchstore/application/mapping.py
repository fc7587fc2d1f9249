"""Domain → DTO mapping shared by the command and query handlers."""

from __future__ import annotations

from datetime import datetime
from typing import Mapping

from watchstore.application.dto import (
    CustomWatchComponentDTO,
    CustomWatchDTO,
    OrderDTO,
    OrderItemDTO,
)
from watchstore.domain.model.custom_watch import CustomWatch
from watchstore.domain.model.order import Order
from watchstore.domain.repository.unit_of_work import UnitOfWork


def _timestamp(value: datetime) -> str:
    return value.strftime("%Y-%m-%d %H:%M UTC")


def _components(custom_watch: CustomWatch | None) -> list[CustomWatchComponentDTO]:
    if custom_watch is None:
        return []
    return [
        CustomWatchComponentDTO(
            component_id=link.component_id,
            name=link.component_name,
            type=link.component_type.value,
            price=str(link.unit_price),
        )
        for link in custom_watch.components
    ]


def custom_watches_on(uow: UnitOfWork, orders: list[Order]) -> dict[str, CustomWatch]:
    """Load the custom watches referenced by ``orders``, keyed by id."""
    found: dict[str, CustomWatch] = {}
    for order in orders:
        for item in order.items:
            if item.custom_watch_id is None or item.custom_watch_id in found:
                continue
            custom_watch = uow.custom_watches.get_by_id(item.custom_watch_id)
            if custom_watch is not None:
                found[custom_watch.id] = custom_watch
    return found


def order_to_dto(
    order: Order, custom_watches: Mapping[str, CustomWatch] | None = None
) -> OrderDTO:
    custom_watches = custom_watches or {}
    return OrderDTO(
        id=order.id,
        user_id=order.user_id,
        status=order.status.value,
        items=[
            OrderItemDTO(
                id=item.id,
                product_name=item.product_name,
                product_id=item.custom_watch_id if item.is_custom else item.watch_id,  # type: ignore[arg-type]
                is_custom=item.is_custom,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                line_total=str(item.line_total),
                components=_components(custom_watches.get(item.custom_watch_id)),
            )
            for item in order.items
        ],
        total=str(order.total_amount),
        created_at=_timestamp(order.created_at),
    )


def custom_watch_to_dto(custom_watch: CustomWatch) -> CustomWatchDTO:
    return CustomWatchDTO(
        id=custom_watch.id,
        user_id=custom_watch.user_id,
        name=custom_watch.name,
        total_price=str(custom_watch.total_price),
        components=_components(custom_watch),
        created_at=_timestamp(custom_watch.created_at),
    )
