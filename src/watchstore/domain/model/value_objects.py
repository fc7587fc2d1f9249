"""Value objects shared by the catalog, custom watches and orders."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum

from watchstore.domain.exceptions import ValidationError

CURRENCY = "EUR"
_CENTS = Decimal("0.01")


def new_id() -> str:
    """Identifier for a freshly created entity."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Money:
    """A euro amount with cent precision.

    Prices are stored as ``Numeric(12, 2)``, so an amount that cannot be
    expressed in whole cents is rejected rather than silently rounded.
    Totals are exact: three items at 0.10 cost 0.30, never 0.30000000000000004.
    """

    amount: Decimal
    currency: str = CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < 0:
            raise ValidationError(f"Money amount cannot be negative, got {self.amount}")
        if self.amount != self.amount.quantize(_CENTS):
            raise ValidationError(f"Money amount {self.amount} has fractions of a cent")

    @staticmethod
    def of(amount: str | int | Decimal) -> Money:
        """Parse user or store input (``"249.00"``, ``249``) into Money."""
        try:
            return Money(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0.00"))

    @staticmethod
    def sum(amounts: list[Money]) -> Money:
        total = Money.zero()
        for amount in amounts:
            total = total + amount
        return total

    def __add__(self, other: Money) -> Money:
        if self.currency != other.currency:
            raise ValidationError(f"Cannot combine {self.currency} with {other.currency}")
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, quantity: int | Quantity) -> Money:
        if isinstance(quantity, Quantity):
            quantity = quantity.value
        if not isinstance(quantity, int) or isinstance(quantity, bool):
            raise TypeError(f"Money can only be multiplied by a quantity, got {quantity!r}")
        return Money(self.amount * quantity, self.currency)

    def __str__(self) -> str:
        return f"€{self.amount.quantize(_CENTS)}"


@dataclass(frozen=True)
class Quantity:
    """How many units of one product an order line asks for (at least 1)."""

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


class ProductKind(Enum):
    WATCH = "WATCH"
    COMPONENT = "COMPONENT"


@dataclass(frozen=True)
class ProductRef:
    """Key of a stock counter in the inventory ledger."""

    kind: ProductKind
    id: str

    @staticmethod
    def watch(watch_id: str) -> ProductRef:
        return ProductRef(ProductKind.WATCH, watch_id)

    @staticmethod
    def component(component_id: str) -> ProductRef:
        return ProductRef(ProductKind.COMPONENT, component_id)

    def __str__(self) -> str:
        return f"{self.kind.value.lower()}:{self.id}"
