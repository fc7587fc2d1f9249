"""Application service: Update Price use case."""

from __future__ import annotations

from watchstore.application.dto import Caller
from watchstore.domain.model.value_objects import Money, ProductKind, ProductRef
from watchstore.domain.repository.unit_of_work import UnitOfWorkFactory
from watchstore.domain.service.catalog_lookup import CatalogLookup


class UpdatePriceHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, caller: Caller, ref: ProductRef, new_price: str) -> None:
        """Update the catalog price of a watch or component.

        This does NOT affect existing orders or custom watches; they
        captured a price snapshot at creation time.
        """
        caller.require_admin()
        price = Money.of(new_price)

        with self._uow_factory() as uow:
            catalog = CatalogLookup(uow)
            if ref.kind == ProductKind.WATCH:
                watch = catalog.watch(ref.id)
                watch.update_price(price)
                uow.watches.save(watch)
            else:
                component = catalog.component(ref.id)
                component.update_price(price)
                uow.components.save(component)
            uow.commit()
