"""Unit tests for the Order aggregate."""

import pytest

from watchstore.domain.exceptions import (
    InvalidStatusError,
    InvalidStatusTransitionError,
    ValidationError,
)
from watchstore.domain.model.order import Order, OrderItem, OrderStatus
from watchstore.domain.model.value_objects import Money, ProductRef


def _watch_item(qty: int = 2, price: str = "200.00") -> OrderItem:
    return OrderItem.for_watch("w-1", "Diver 300", qty, Money.of(price))


def _custom_item(qty: int = 1, price: str = "200.00") -> OrderItem:
    return OrderItem.for_custom_watch("cw-1", "My Diver", qty, Money.of(price))


# ── Creation ─────────────────────────────────────────────────────────────────


class TestOrderCreate:

    def test_starts_pending(self):
        order = Order.create("u1", [_watch_item()])
        assert order.status == OrderStatus.PENDING
        assert order.user_id == "u1"

    def test_total_is_sum_of_lines(self):
        order = Order.create("u1", [_watch_item(2, "200.00"), _custom_item(1, "150.00")])
        assert order.total_amount == Money.of("550.00")
        assert order.total_amount == order.items_total

    def test_empty_order_rejected(self):
        with pytest.raises(ValidationError, match="at least one item"):
            Order.create("u1", [])

    def test_missing_owner_rejected(self):
        with pytest.raises(ValidationError, match="owner"):
            Order.create("", [_watch_item()])

    def test_item_with_both_references_rejected(self):
        item = _watch_item()
        item.custom_watch_id = "cw-1"
        with pytest.raises(ValidationError, match="exactly one"):
            Order.create("u1", [item])

    def test_total_does_not_follow_later_price_changes(self):
        item = _watch_item(1, "200.00")
        order = Order.create("u1", [item])
        # Catalog price changes never reach the item; only a new order would see them.
        assert order.items[0].unit_price == Money.of("200.00")
        assert order.total_amount == Money.of("200.00")


# ── Items ────────────────────────────────────────────────────────────────────


class TestOrderItem:

    def test_line_total(self):
        assert _watch_item(3, "10.00").line_total == Money.of("30.00")

    def test_watch_item_restocks_watch(self):
        item = _watch_item()
        assert not item.is_custom
        assert item.restock_ref == ProductRef.watch("w-1")

    def test_custom_item_has_no_restock(self):
        item = _custom_item()
        assert item.is_custom
        assert item.restock_ref is None

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError):
            _watch_item(qty=0)


# ── Status ───────────────────────────────────────────────────────────────────


class TestOrderStatus:

    def test_parse_is_case_insensitive(self):
        assert OrderStatus.parse("shipped") == OrderStatus.SHIPPED

    def test_parse_unknown(self):
        with pytest.raises(InvalidStatusError, match="Invalid order status"):
            OrderStatus.parse("LOST")

    def test_terminal_states(self):
        assert OrderStatus.CANCELLED.is_terminal
        assert OrderStatus.DELIVERED.is_terminal
        assert not OrderStatus.SHIPPED.is_terminal


class TestTransitions:

    def test_transition_changes_status(self):
        order = Order.create("u1", [_watch_item()])
        assert order.transition_to(OrderStatus.PROCESSING) is True
        assert order.status == OrderStatus.PROCESSING

    def test_same_status_is_no_op(self):
        order = Order.create("u1", [_watch_item()])
        assert order.transition_to(OrderStatus.PENDING) is False

    def test_recancel_is_no_op(self):
        order = Order.create("u1", [_watch_item()])
        order.transition_to(OrderStatus.CANCELLED)
        assert order.transition_to(OrderStatus.CANCELLED) is False

    @pytest.mark.parametrize("terminal", [OrderStatus.CANCELLED, OrderStatus.DELIVERED])
    def test_terminal_status_is_final(self, terminal):
        order = Order.create("u1", [_watch_item()])
        order.transition_to(terminal)
        with pytest.raises(InvalidStatusTransitionError):
            order.transition_to(OrderStatus.PROCESSING)
        assert order.status == terminal

    def test_restock_lines_skip_custom_watches(self):
        order = Order.create("u1", [_watch_item(2), _custom_item(1)])
        assert order.restock_lines() == [(ProductRef.watch("w-1"), 2)]
