"""Order aggregate: a customer's purchase of watches and custom watches.

The order owns its items. Each item carries the unit price read when the
order was placed, so the total never moves with later catalog changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from watchstore.domain.exceptions import (
    InvalidStatusError,
    InvalidStatusTransitionError,
    ValidationError,
)
from watchstore.domain.model.value_objects import Money, ProductRef, Quantity, new_id


class OrderStatus(Enum):
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"

    @classmethod
    def parse(cls, raw: str) -> OrderStatus:
        if isinstance(raw, OrderStatus):
            return raw
        try:
            return cls(str(raw).strip().upper())
        except ValueError as exc:
            raise InvalidStatusError(f"Invalid order status: {raw!r}") from exc

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.CANCELLED, OrderStatus.DELIVERED)


@dataclass
class OrderItem:
    """Captures the price of a product at order-creation time.

    References exactly one of a standard watch or a custom watch.
    ``quantity`` and ``unit_price`` never change after creation.
    """

    id: str
    product_name: str
    quantity: Quantity
    unit_price: Money
    watch_id: str | None = None
    custom_watch_id: str | None = None

    @staticmethod
    def for_watch(watch_id: str, name: str, quantity: int, unit_price: Money) -> OrderItem:
        return OrderItem(
            id=new_id(),
            product_name=name,
            quantity=Quantity(quantity),
            unit_price=unit_price,
            watch_id=watch_id,
        )

    @staticmethod
    def for_custom_watch(
        custom_watch_id: str, name: str, quantity: int, unit_price: Money
    ) -> OrderItem:
        return OrderItem(
            id=new_id(),
            product_name=name,
            quantity=Quantity(quantity),
            unit_price=unit_price,
            custom_watch_id=custom_watch_id,
        )

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity

    @property
    def is_custom(self) -> bool:
        return self.custom_watch_id is not None

    @property
    def restock_ref(self) -> ProductRef | None:
        """Stock counter to credit back on cancellation, if any.

        Custom-watch lines return None: their components are not restocked.
        """
        if self.watch_id is None:
            return None
        return ProductRef.watch(self.watch_id)


@dataclass
class Order:
    """Aggregate root for purchase orders.

    New orders come from ``Order.create()``. Repositories rebuild stored
    orders through the plain constructor.
    """

    id: str
    user_id: str
    items: list[OrderItem]
    total_amount: Money
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(user_id: str, items: list[OrderItem]) -> Order:
        """Create a new PENDING order, enforcing all invariants."""
        if not user_id:
            raise ValidationError("Order owner is required")
        if not items:
            raise ValidationError("Order must contain at least one item")
        for item in items:
            if (item.watch_id is None) == (item.custom_watch_id is None):
                raise ValidationError(
                    f"Order item '{item.product_name}' must reference exactly "
                    f"one of a watch or a custom watch"
                )

        return Order(
            id=new_id(),
            user_id=user_id,
            items=list(items),
            total_amount=Money.sum([item.line_total for item in items]),
        )

    def transition_to(self, new_status: OrderStatus) -> bool:
        """Move to ``new_status``; return False when nothing changes.

        CANCELLED and DELIVERED are terminal: the only accepted target is
        the current status itself, which is a no-op.
        """
        if new_status == self.status:
            return False
        if self.status.is_terminal:
            raise InvalidStatusTransitionError(
                f"Order #{self.id} is {self.status.value} and cannot become "
                f"{new_status.value}"
            )
        self.status = new_status
        return True

    @property
    def items_total(self) -> Money:
        return Money.sum([item.line_total for item in self.items])

    def is_owned_by(self, user_id: str) -> bool:
        return self.user_id == user_id

    def restock_lines(self) -> list[tuple[ProductRef, int]]:
        """Stock to return for each standard-watch item."""
        return [
            (item.restock_ref, item.quantity.value)
            for item in self.items
            if item.restock_ref is not None
        ]
