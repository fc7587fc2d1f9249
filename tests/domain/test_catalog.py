"""Unit tests for the catalog aggregates."""

import pytest

from watchstore.domain.exceptions import ValidationError
from watchstore.domain.model.catalog import Component, ComponentType, Watch
from watchstore.domain.model.value_objects import Money


class TestComponentType:

    def test_parse_is_case_insensitive(self):
        assert ComponentType.parse(" dial ") == ComponentType.DIAL

    def test_parse_unknown_lists_allowed_values(self):
        with pytest.raises(ValidationError, match="expected one of CASE"):
            ComponentType.parse("gear")


class TestWatchCreate:

    def test_creates_watch(self):
        watch = Watch.create("Diver 300", "D-300", Money.of("200"), 5)
        assert watch.id
        assert watch.name == "Diver 300"
        assert watch.stock == 5
        assert watch.ref.id == watch.id

    def test_trims_name_and_reference(self):
        watch = Watch.create("  Pilot  ", " P-1 ", Money.of("150"), 0)
        assert watch.name == "Pilot"
        assert watch.reference == "P-1"

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Watch.create("  ", "X", Money.of("1"), 1)

    def test_blank_reference_rejected(self):
        with pytest.raises(ValidationError, match="reference is required"):
            Watch.create("Pilot", "", Money.of("1"), 1)

    def test_zero_price_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            Watch.create("Pilot", "P-1", Money.zero(), 1)

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="non-negative"):
            Watch.create("Pilot", "P-1", Money.of("1"), -1)


class TestPriceUpdate:

    def test_watch_price_update(self):
        watch = Watch.create("Pilot", "P-1", Money.of("150"), 1)
        watch.update_price(Money.of("175"))
        assert watch.price == Money.of("175")

    def test_component_price_update_rejects_zero(self):
        component = Component.create("Dial", ComponentType.DIAL, Money.of("20"), 3)
        with pytest.raises(ValidationError):
            component.update_price(Money.zero())
        assert component.price == Money.of("20")


class TestComponent:

    def test_in_stock(self):
        component = Component.create("Dial", ComponentType.DIAL, Money.of("20"), 1)
        assert component.in_stock
        component.stock = 0
        assert not component.in_stock

    def test_ref_kind(self):
        component = Component.create("Dial", ComponentType.DIAL, Money.of("20"), 1)
        assert str(component.ref) == f"component:{component.id}"
