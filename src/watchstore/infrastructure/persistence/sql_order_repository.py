"""SQLAlchemy implementation of OrderRepository."""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from watchstore.domain.model.order import Order, OrderItem, OrderStatus
from watchstore.domain.model.value_objects import Money, Quantity
from watchstore.domain.repository.order_repository import OrderRepository
from watchstore.infrastructure.persistence.orm import OrderItemRow, OrderRow


class SqlAlchemyOrderRepository(OrderRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: str) -> Order | None:
        row = self._session.get(OrderRow, order_id)
        return self._to_domain(row) if row is not None else None

    def list_for_user(self, user_id: str, status: OrderStatus | None = None) -> list[Order]:
        stmt = select(OrderRow).where(OrderRow.user_id == user_id)
        if status is not None:
            stmt = stmt.where(OrderRow.status == status.value)
        rows = self._session.scalars(stmt.order_by(OrderRow.created_at.desc()))
        return [self._to_domain(row) for row in rows]

    def list_all(self, status: OrderStatus | None = None) -> list[Order]:
        stmt = select(OrderRow)
        if status is not None:
            stmt = stmt.where(OrderRow.status == status.value)
        rows = self._session.scalars(stmt.order_by(OrderRow.created_at.desc()))
        return [self._to_domain(row) for row in rows]

    def add(self, order: Order) -> None:
        self._session.add(
            OrderRow(
                id=order.id,
                user_id=order.user_id,
                total_amount=order.total_amount.amount,
                status=order.status.value,
                created_at=order.created_at,
                items=[
                    OrderItemRow(
                        id=item.id,
                        position=position,
                        quantity=item.quantity.value,
                        price=item.unit_price.amount,
                        watch_id=item.watch_id,
                        custom_watch_id=item.custom_watch_id,
                    )
                    for position, item in enumerate(order.items)
                ],
            )
        )

    def compare_and_set_status(
        self, order_id: str, expected: OrderStatus, new: OrderStatus
    ) -> bool:
        self._session.flush()
        table = OrderRow.__table__
        result = self._session.execute(
            update(table)
            .where(table.c.id == order_id, table.c.status == expected.value)
            .values(status=new.value)
        )
        row = self._session.identity_map.get(self._session.identity_key(OrderRow, order_id))
        if row is not None:
            self._session.expire(row, ["status"])
        return result.rowcount == 1

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_domain(row: OrderRow) -> Order:
        return Order(
            id=row.id,
            user_id=row.user_id,
            items=[
                OrderItem(
                    id=item.id,
                    product_name=_product_name(item),
                    quantity=Quantity(item.quantity),
                    unit_price=Money(item.price),
                    watch_id=item.watch_id,
                    custom_watch_id=item.custom_watch_id,
                )
                for item in row.items
            ],
            total_amount=Money(row.total_amount),
            status=OrderStatus(row.status),
            created_at=row.created_at,
        )


def _product_name(item: OrderItemRow) -> str:
    if item.watch is not None:
        return item.watch.name
    if item.custom_watch is not None:
        return item.custom_watch.name
    return "Unknown product"
