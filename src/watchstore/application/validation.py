"""Request validation.

Each validator inspects a request DTO and returns a tagged result:
``Valid(value)`` with the normalized request, or ``Invalid(errors)``
listing every offending field. Nothing here touches the store.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from watchstore.application.dto import (
    AssembleCustomWatchRequest,
    CreateOrderRequest,
    OrderLineRequest,
)
from watchstore.domain.exceptions import FieldError, InvalidLineError, ValidationError
from watchstore.domain.model.custom_watch import MIN_NAME_LENGTH

T = TypeVar("T")

INVALID_LINE = "invalid_line"

# Largest value the quantity columns (32-bit INTEGER) can hold.
MAX_QUANTITY = 2**31 - 1


@dataclass(frozen=True)
class Valid(Generic[T]):
    value: T


@dataclass(frozen=True)
class Invalid:
    errors: list[FieldError]


ValidationResult = Union[Valid[T], Invalid]


def unwrap(result: ValidationResult[T]) -> T:
    """Return the validated value or raise the matching ValidationError."""
    if isinstance(result, Valid):
        return result.value
    if any(e.code == INVALID_LINE for e in result.errors):
        raise InvalidLineError.from_errors(result.errors)
    raise ValidationError.from_errors(result.errors)


def _present(value: str | None) -> str | None:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _validate_quantity(prefix: str, quantity, errors: list[FieldError]) -> None:
    field_name = f"{prefix}.quantity"
    if quantity is None:
        errors.append(FieldError(field_name, "required", "quantity is required"))
    elif not isinstance(quantity, int) or isinstance(quantity, bool):
        errors.append(FieldError(field_name, "type", "quantity must be an integer"))
    elif quantity <= 0:
        errors.append(FieldError(field_name, "positive", "quantity must be positive"))
    elif quantity > MAX_QUANTITY:
        errors.append(
            FieldError(field_name, "max", f"quantity must be at most {MAX_QUANTITY}")
        )


def validate_create_order(request: CreateOrderRequest) -> ValidationResult[CreateOrderRequest]:
    errors: list[FieldError] = []
    if not request.items:
        errors.append(FieldError("items", "min_items", "at least one item is required"))

    lines: list[OrderLineRequest] = []
    for index, line in enumerate(request.items):
        prefix = f"items[{index}]"
        watch_id = _present(line.watch_id)
        custom_watch_id = _present(line.custom_watch_id)
        if (watch_id is None) == (custom_watch_id is None):
            errors.append(
                FieldError(
                    prefix,
                    INVALID_LINE,
                    "specify exactly one of watch_id or custom_watch_id",
                )
            )
        _validate_quantity(prefix, line.quantity, errors)
        lines.append(
            OrderLineRequest(
                watch_id=watch_id,
                custom_watch_id=custom_watch_id,
                quantity=line.quantity,
            )
        )

    if errors:
        return Invalid(errors)
    return Valid(CreateOrderRequest(items=lines))


def validate_assembly(
    request: AssembleCustomWatchRequest,
) -> ValidationResult[AssembleCustomWatchRequest]:
    errors: list[FieldError] = []
    name = (request.name or "").strip()
    if len(name) < MIN_NAME_LENGTH:
        errors.append(
            FieldError(
                "name",
                "min_length",
                f"name must be at least {MIN_NAME_LENGTH} characters",
            )
        )

    component_ids: list[str] = []
    if not request.component_ids:
        errors.append(
            FieldError("component_ids", "min_items", "at least one component is required")
        )
    seen: set[str] = set()
    for index, raw in enumerate(request.component_ids or []):
        component_id = _present(raw)
        if component_id is None:
            errors.append(
                FieldError(f"component_ids[{index}]", "required", "component id is empty")
            )
            continue
        if component_id in seen:
            errors.append(
                FieldError(
                    f"component_ids[{index}]",
                    "unique",
                    f"component '{component_id}' is listed more than once",
                )
            )
            continue
        seen.add(component_id)
        component_ids.append(component_id)

    if errors:
        return Invalid(errors)
    return Valid(AssembleCustomWatchRequest(name=name, component_ids=component_ids))
