"""Catalog aggregates: standard watches and custom-watch components.

Both live independently of orders. Prices change over time; orders and
custom watches capture a price snapshot so those changes never leak
backwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from watchstore.domain.exceptions import ValidationError
from watchstore.domain.model.value_objects import Money, ProductRef, new_id


class ComponentType(Enum):
    CASE = "CASE"
    DIAL = "DIAL"
    HANDS = "HANDS"
    BEZEL = "BEZEL"
    STRAP = "STRAP"
    MOVEMENT = "MOVEMENT"
    CRYSTAL = "CRYSTAL"
    CROWN = "CROWN"
    OTHER = "OTHER"

    @classmethod
    def parse(cls, raw: str) -> ComponentType:
        try:
            return cls(raw.strip().upper())
        except ValueError as exc:
            allowed = ", ".join(t.value for t in cls)
            raise ValidationError(
                f"Invalid component type '{raw}' (expected one of {allowed})"
            ) from exc


def _require_name(name: str, what: str) -> str:
    if not name or not name.strip():
        raise ValidationError(f"{what} name is required")
    return name.strip()


def _require_price(price: Money, what: str) -> Money:
    if price.amount <= 0:
        raise ValidationError(f"{what} price must be greater than zero")
    return price


def _require_stock(stock: int) -> int:
    if not isinstance(stock, int) or stock < 0:
        raise ValidationError("Stock must be a non-negative integer")
    return stock


@dataclass
class Watch:
    """A standard, ready-made watch.

    ``stock`` on an instance is the snapshot read from the store. It is
    changed only through the inventory ledger, never by saving a Watch.
    """

    id: str
    name: str
    description: str
    price: Money
    stock: int
    reference: str
    category_id: str | None = None

    @staticmethod
    def create(
        name: str,
        reference: str,
        price: Money,
        stock: int,
        description: str = "",
        category_id: str | None = None,
    ) -> Watch:
        if not reference or not reference.strip():
            raise ValidationError("Watch reference is required")
        return Watch(
            id=new_id(),
            name=_require_name(name, "Watch"),
            description=description.strip(),
            price=_require_price(price, "Watch"),
            stock=_require_stock(stock),
            reference=reference.strip(),
            category_id=category_id,
        )

    @property
    def ref(self) -> ProductRef:
        return ProductRef.watch(self.id)

    def update_price(self, new_price: Money) -> None:
        """Change the catalog price.

        Existing order items keep the price they were sold at.
        """
        self.price = _require_price(new_price, "Watch")


@dataclass
class Component:
    """A part sold only inside a custom watch."""

    id: str
    name: str
    type: ComponentType
    price: Money
    stock: int

    @staticmethod
    def create(name: str, type: ComponentType, price: Money, stock: int) -> Component:
        return Component(
            id=new_id(),
            name=_require_name(name, "Component"),
            type=type,
            price=_require_price(price, "Component"),
            stock=_require_stock(stock),
        )

    @property
    def ref(self) -> ProductRef:
        return ProductRef.component(self.id)

    @property
    def in_stock(self) -> bool:
        return self.stock > 0

    def update_price(self, new_price: Money) -> None:
        """Change the catalog price.

        Custom watches already assembled keep their stored total.
        """
        self.price = _require_price(new_price, "Component")
