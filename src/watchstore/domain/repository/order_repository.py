"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from watchstore.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_for_user(self, user_id: str, status: OrderStatus | None = None) -> list[Order]:
        """Return the user's orders, newest first."""

    @abstractmethod
    def list_all(self, status: OrderStatus | None = None) -> list[Order]:
        """Return every order, newest first."""

    @abstractmethod
    def add(self, order: Order) -> None:
        """Persist a new order together with its items."""

    @abstractmethod
    def compare_and_set_status(
        self, order_id: str, expected: OrderStatus, new: OrderStatus
    ) -> bool:
        """Set the status only if it is still ``expected``.

        Returns False when another transaction changed it first.
        """
