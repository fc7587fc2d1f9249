"""Requests into and responses out of the application handlers.

Responses hold display-ready values (formatted money, ids as text) so
the CLI never needs the domain model.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from watchstore.domain.exceptions import PermissionDeniedError


class Role(Enum):
    USER = "USER"
    ADMIN = "ADMIN"


@dataclass(frozen=True)
class Caller:
    """The authenticated user on whose behalf a handler runs.

    Resolved by the session layer; handlers trust it as given.
    """

    user_id: str
    role: Role = Role.USER

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def require_admin(self) -> None:
        if not self.is_admin:
            raise PermissionDeniedError("This operation is restricted to administrators")


# --- Requests -------------------------------------------------------------------


@dataclass(frozen=True)
class OrderLineRequest:
    """Input: one requested line (watch or custom watch) and its quantity."""

    watch_id: str | None = None
    custom_watch_id: str | None = None
    quantity: int | None = None


@dataclass(frozen=True)
class CreateOrderRequest:
    items: list[OrderLineRequest] = field(default_factory=list)


@dataclass(frozen=True)
class AssembleCustomWatchRequest:
    name: str
    component_ids: list[str] = field(default_factory=list)


# --- Responses ------------------------------------------------------------------


@dataclass(frozen=True)
class CustomWatchComponentDTO:
    component_id: str
    name: str
    type: str
    price: str


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single order line as displayed to the user.

    Custom-watch lines also list the components the watch was assembled
    from, at the prices captured at assembly.
    """

    id: str
    product_name: str
    product_id: str
    is_custom: bool
    quantity: int
    unit_price: str  # formatted, e.g. "€150.00"
    line_total: str
    components: list[CustomWatchComponentDTO] = field(default_factory=list)


@dataclass(frozen=True)
class OrderDTO:

    id: str
    user_id: str
    status: str
    items: list[OrderItemDTO]
    total: str
    created_at: str


@dataclass(frozen=True)
class CustomWatchDTO:
    id: str
    user_id: str
    name: str
    total_price: str
    components: list[CustomWatchComponentDTO]
    created_at: str


@dataclass(frozen=True)
class StockDTO:
    kind: str
    id: str
    name: str
    price: str
    stock: int


@dataclass(frozen=True)
class LowStockLineDTO:
    kind: str
    id: str
    name: str
    stock: int
    threshold: int
