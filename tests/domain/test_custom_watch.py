"""Unit tests for the CustomWatch aggregate."""

import pytest

from tests.fakes import make_component
from watchstore.domain.exceptions import ValidationError
from watchstore.domain.model.catalog import ComponentType
from watchstore.domain.model.custom_watch import CustomWatch
from watchstore.domain.model.value_objects import Money


def _components():
    return [
        make_component("c-case", "Steel case", ComponentType.CASE, "80.00"),
        make_component("c-dial", "Blue dial", ComponentType.DIAL, "120.00"),
    ]


class TestAssemble:

    def test_total_is_sum_of_component_prices(self):
        cw = CustomWatch.assemble("u1", "My Diver", _components())
        assert cw.total_price == Money.of("200.00")
        assert cw.user_id == "u1"

    def test_keeps_component_order(self):
        cw = CustomWatch.assemble("u1", "My Diver", _components())
        assert [c.component_id for c in cw.components] == ["c-case", "c-dial"]

    def test_snapshots_component_prices(self):
        components = _components()
        cw = CustomWatch.assemble("u1", "My Diver", components)
        components[0].update_price(Money.of("999.00"))
        assert cw.components[0].unit_price == Money.of("80.00")
        assert cw.total_price == Money.of("200.00")

    def test_name_is_trimmed(self):
        cw = CustomWatch.assemble("u1", "  My Diver ", _components())
        assert cw.name == "My Diver"

    def test_short_name_rejected(self):
        with pytest.raises(ValidationError, match="at least 2 characters"):
            CustomWatch.assemble("u1", "X", _components())

    def test_no_components_rejected(self):
        with pytest.raises(ValidationError, match="at least one component"):
            CustomWatch.assemble("u1", "My Diver", [])

    def test_ownership(self):
        cw = CustomWatch.assemble("u1", "My Diver", _components())
        assert cw.is_owned_by("u1")
        assert not cw.is_owned_by("u2")
