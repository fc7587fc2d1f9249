"""Application service: Add Watch / Add Component use cases."""

from __future__ import annotations

from watchstore.application.dto import Caller
from watchstore.domain.exceptions import ValidationError
from watchstore.domain.model.catalog import Component, ComponentType, Watch
from watchstore.domain.model.value_objects import Money
from watchstore.domain.repository.unit_of_work import UnitOfWorkFactory


class AddWatchHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(
        self,
        caller: Caller,
        name: str,
        reference: str,
        price: str,
        stock: int,
        description: str = "",
        category_id: str | None = None,
    ) -> Watch:
        """Add a new watch to the catalog with its initial stock."""
        caller.require_admin()
        watch = Watch.create(
            name=name,
            reference=reference,
            price=Money.of(price),
            stock=stock,
            description=description,
            category_id=category_id,
        )

        with self._uow_factory() as uow:
            if uow.watches.get_by_reference(watch.reference) is not None:
                raise ValidationError(f"Watch reference '{watch.reference}' already exists")
            uow.watches.add(watch)
            uow.commit()
        return watch


class AddComponentHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, caller: Caller, name: str, type: str, price: str, stock: int) -> Component:
        """Add a new component to the catalog with its initial stock."""
        caller.require_admin()
        component = Component.create(
            name=name,
            type=ComponentType.parse(type),
            price=Money.of(price),
            stock=stock,
        )

        with self._uow_factory() as uow:
            uow.components.add(component)
            uow.commit()
        return component
