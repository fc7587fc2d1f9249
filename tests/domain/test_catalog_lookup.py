"""Unit tests for the CatalogLookup domain service."""

import pytest

from tests.fakes import FakeUnitOfWork, InMemoryStore, make_component, make_watch
from watchstore.domain.exceptions import EntityNotFoundError, UnknownComponentError
from watchstore.domain.model.custom_watch import CustomWatch
from watchstore.domain.model.value_objects import Money, ProductRef
from watchstore.domain.service.catalog_lookup import CatalogLookup


def _store() -> InMemoryStore:
    store = InMemoryStore(
        watches=[make_watch("w-1", "Diver 300", "200.00", stock=4)],
        components=[
            make_component("c-1", "Steel case", price="80.00"),
            make_component("c-2", "Blue dial", price="120.00"),
        ],
    )
    cw = CustomWatch.assemble("alice", "My Diver", list(store.components.values()))
    store.custom_watches[cw.id] = cw
    return store


class TestCatalogLookup:

    def test_watch(self):
        with FakeUnitOfWork(_store()) as uow:
            assert CatalogLookup(uow).watch("w-1").name == "Diver 300"

    def test_unknown_watch(self):
        with FakeUnitOfWork(_store()) as uow:
            with pytest.raises(EntityNotFoundError, match="Watch 'nope' does not exist"):
                CatalogLookup(uow).watch("nope")

    def test_components_in_request_order(self):
        with FakeUnitOfWork(_store()) as uow:
            found = CatalogLookup(uow).components(["c-2", "c-1"])
        assert [c.id for c in found] == ["c-2", "c-1"]

    def test_unknown_components_all_reported(self):
        with FakeUnitOfWork(_store()) as uow:
            with pytest.raises(UnknownComponentError) as exc_info:
                CatalogLookup(uow).components(["c-1", "x", "y"])
        assert exc_info.value.component_ids == ["x", "y"]

    def test_custom_watch_of_other_user_is_not_found(self):
        store = _store()
        cw_id = next(iter(store.custom_watches))
        with FakeUnitOfWork(store) as uow:
            lookup = CatalogLookup(uow)
            assert lookup.custom_watch_for("alice", cw_id).id == cw_id
            with pytest.raises(EntityNotFoundError, match="does not exist"):
                lookup.custom_watch_for("bob", cw_id)

    def test_price_and_stock(self):
        with FakeUnitOfWork(_store()) as uow:
            snapshot = CatalogLookup(uow).price_and_stock(ProductRef.watch("w-1"))
        assert snapshot.price == Money.of("200.00")
        assert snapshot.stock == 4
