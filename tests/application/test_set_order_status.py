"""Integration tests for the SetOrderStatus use case (admin only)."""

import logging

import pytest

from tests.fakes import InMemoryStore, fake_uow_factory, make_component, make_watch
from watchstore.application.assemble_custom_watch import AssembleCustomWatchHandler
from watchstore.application.create_order import CreateOrderHandler
from watchstore.application.dto import (
    AssembleCustomWatchRequest,
    Caller,
    CreateOrderRequest,
    OrderLineRequest,
    Role,
)
from watchstore.application.set_order_status import SetOrderStatusHandler
from watchstore.domain.exceptions import (
    EntityNotFoundError,
    InvalidStatusError,
    InvalidStatusTransitionError,
    PermissionDeniedError,
)
from watchstore.domain.model.order import OrderStatus

ALICE = Caller("alice")
ADMIN = Caller("admin", Role.ADMIN)


def _setup():
    """Store with one PENDING order: 2 x Diver 300 plus 1 custom watch."""
    store = InMemoryStore(
        watches=[make_watch("w-1", "Diver 300", "200.00", stock=5)],
        components=[
            make_component("c-1", "Steel case", price="80.00", stock=1),
            make_component("c-2", "Blue dial", price="120.00", stock=1),
        ],
    )
    uow_factory = fake_uow_factory(store)
    cw = AssembleCustomWatchHandler(uow_factory).handle(
        ALICE, AssembleCustomWatchRequest("My Diver", ["c-1", "c-2"])
    )
    order = CreateOrderHandler(uow_factory).handle(ALICE, CreateOrderRequest(items=[
        OrderLineRequest(watch_id="w-1", quantity=2),
        OrderLineRequest(custom_watch_id=cw.id, quantity=1),
    ]))
    return SetOrderStatusHandler(uow_factory), store, order.id


class TestStatusChange:

    def test_moves_to_new_status(self):
        handler, store, order_id = _setup()
        dto = handler.handle(ADMIN, order_id, "PROCESSING")
        assert dto.status == "PROCESSING"
        assert store.orders[order_id].status == OrderStatus.PROCESSING

    def test_status_is_case_insensitive(self):
        handler, _, order_id = _setup()
        assert handler.handle(ADMIN, order_id, "shipped").status == "SHIPPED"

    def test_non_cancel_status_leaves_stock_alone(self):
        handler, store, order_id = _setup()
        handler.handle(ADMIN, order_id, OrderStatus.SHIPPED)
        assert store.stock_of("w-1") == 3

    def test_same_status_is_no_op(self):
        handler, store, order_id = _setup()
        commits = store.commits
        dto = handler.handle(ADMIN, order_id, "PENDING")
        assert dto.status == "PENDING"
        assert store.commits == commits

    def test_logs_transition(self, caplog):
        handler, _, order_id = _setup()
        with caplog.at_level(logging.INFO, logger="watchstore"):
            handler.handle(ADMIN, order_id, "PROCESSING")
        record = next(r for r in caplog.records if r.getMessage() == "order_status_changed")
        assert record.from_status == "PENDING"
        assert record.to_status == "PROCESSING"


class TestCancellation:

    def test_cancel_restocks_standard_watches(self):
        handler, store, order_id = _setup()
        assert store.stock_of("w-1") == 3

        dto = handler.handle(ADMIN, order_id, "CANCELLED")

        assert dto.status == "CANCELLED"
        assert store.stock_of("w-1") == 5

    def test_cancel_does_not_restock_components(self):
        handler, store, order_id = _setup()
        handler.handle(ADMIN, order_id, "CANCELLED")
        assert store.stock_of("c-1") == 0
        assert store.stock_of("c-2") == 0

    def test_recancel_restocks_only_once(self):
        handler, store, order_id = _setup()
        handler.handle(ADMIN, order_id, "CANCELLED")
        dto = handler.handle(ADMIN, order_id, "CANCELLED")
        assert dto.status == "CANCELLED"
        assert store.stock_of("w-1") == 5

    def test_cancel_after_shipping_still_restocks(self):
        handler, store, order_id = _setup()
        handler.handle(ADMIN, order_id, "SHIPPED")
        handler.handle(ADMIN, order_id, "CANCELLED")
        assert store.stock_of("w-1") == 5

    def test_cancelled_order_cannot_be_reopened(self):
        handler, store, order_id = _setup()
        handler.handle(ADMIN, order_id, "CANCELLED")
        with pytest.raises(InvalidStatusTransitionError):
            handler.handle(ADMIN, order_id, "PENDING")
        assert store.orders[order_id].status == OrderStatus.CANCELLED
        assert store.stock_of("w-1") == 5

    def test_delivered_order_cannot_be_cancelled(self):
        handler, store, order_id = _setup()
        handler.handle(ADMIN, order_id, "DELIVERED")
        with pytest.raises(InvalidStatusTransitionError):
            handler.handle(ADMIN, order_id, "CANCELLED")
        assert store.stock_of("w-1") == 3


class TestStatusChangeRejections:

    def test_requires_admin(self):
        handler, store, order_id = _setup()
        with pytest.raises(PermissionDeniedError):
            handler.handle(ALICE, order_id, "CANCELLED")
        assert store.orders[order_id].status == OrderStatus.PENDING
        assert store.stock_of("w-1") == 3

    def test_unknown_status(self):
        handler, _, order_id = _setup()
        with pytest.raises(InvalidStatusError):
            handler.handle(ADMIN, order_id, "LOST")

    def test_unknown_order(self):
        handler, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Order #nope not found"):
            handler.handle(ADMIN, "nope", "SHIPPED")
