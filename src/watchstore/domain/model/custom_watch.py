"""CustomWatch aggregate: a user-assembled bundle of components."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from watchstore.domain.exceptions import ValidationError
from watchstore.domain.model.catalog import Component, ComponentType
from watchstore.domain.model.value_objects import Money, new_id

MIN_NAME_LENGTH = 2


@dataclass(frozen=True)
class CustomWatchComponent:
    """Link between a custom watch and one component.

    ``unit_price`` is the component price at assembly time.
    """

    component_id: str
    component_name: str
    component_type: ComponentType
    unit_price: Money


@dataclass
class CustomWatch:
    """Aggregate root for custom watches.

    Immutable once assembled: ``total_price`` is a snapshot of the
    component prices at creation and is never recomputed, and the
    component links are never added to or removed.
    """

    id: str
    user_id: str
    name: str
    total_price: Money
    components: tuple[CustomWatchComponent, ...]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def assemble(user_id: str, name: str, components: list[Component]) -> CustomWatch:
        """Build a new custom watch from resolved components."""
        name = (name or "").strip()
        if len(name) < MIN_NAME_LENGTH:
            raise ValidationError(
                f"Custom watch name must be at least {MIN_NAME_LENGTH} characters"
            )
        if not components:
            raise ValidationError("A custom watch needs at least one component")

        links = tuple(
            CustomWatchComponent(
                component_id=c.id,
                component_name=c.name,
                component_type=c.type,
                unit_price=c.price,  # <-- price snapshot
            )
            for c in components
        )
        return CustomWatch(
            id=new_id(),
            user_id=user_id,
            name=name,
            total_price=Money.sum([link.unit_price for link in links]),
            components=links,
        )

    def is_owned_by(self, user_id: str) -> bool:
        return self.user_id == user_id
