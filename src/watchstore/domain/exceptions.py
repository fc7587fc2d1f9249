"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    """One offending input field, e.g. ``items[1].quantity``."""

    field: str
    code: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""

    def __init__(self, message: str, errors: list[FieldError] | None = None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])

    @classmethod
    def from_errors(cls, errors: list[FieldError]) -> ValidationError:
        details = "; ".join(str(e) for e in errors)
        return cls(f"Invalid request ({details})", errors)


class InvalidLineError(ValidationError):
    """An order line names neither or both of watch and custom watch."""


class InvalidStatusError(ValidationError):
    """A status value is not one of the known order statuses."""


class InvalidStatusTransitionError(ValidationError):
    """The order is in a terminal status and cannot move elsewhere."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist (or is not visible to the caller)."""


class UnknownComponentError(EntityNotFoundError):

    def __init__(self, component_ids: list[str]) -> None:
        super().__init__(f"Unknown components: {', '.join(component_ids)}")
        self.component_ids = list(component_ids)


class InsufficientStockError(DomainException):
    """Requested quantity exceeds the stock left for a product."""

    def __init__(
        self,
        product_name: str,
        requested: int,
        available: int,
        message: str | None = None,
    ) -> None:
        super().__init__(
            message
            or f"Insufficient stock for {product_name} "
            f"(requested {requested}, available {available})"
        )
        self.product_name = product_name
        self.requested = requested
        self.available = available

    @property
    def shortfall(self) -> int:
        return self.requested - self.available


class OutOfStockError(InsufficientStockError):
    """One or more components picked for a custom watch have no stock left."""

    def __init__(self, component_names: list[str]) -> None:
        super().__init__(
            ", ".join(component_names),
            requested=1,
            available=0,
            message=f"Components out of stock: {', '.join(component_names)}",
        )
        self.component_names = list(component_names)


class TransactionError(DomainException):
    """The store refused the commit; nothing from the unit of work persisted."""


class PermissionDeniedError(DomainException):
    """The caller's role does not allow the operation."""
