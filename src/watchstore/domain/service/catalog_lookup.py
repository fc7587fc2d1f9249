"""Domain service: Catalog Lookup.

Resolves order-line and assembly references to their current price
and stock. Read-only; always used through the same unit of work as
the mutation that follows, so validation never runs against a
different transaction's view of stock.
"""

from __future__ import annotations

from dataclasses import dataclass

from watchstore.domain.exceptions import EntityNotFoundError, UnknownComponentError
from watchstore.domain.model.catalog import Component, Watch
from watchstore.domain.model.custom_watch import CustomWatch
from watchstore.domain.model.value_objects import Money, ProductKind, ProductRef
from watchstore.domain.repository.unit_of_work import UnitOfWork


@dataclass(frozen=True)
class StockSnapshot:
    ref: ProductRef
    name: str
    price: Money
    stock: int


class CatalogLookup:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def watch(self, watch_id: str) -> Watch:
        watch = self._uow.watches.get_by_id(watch_id)
        if watch is None:
            raise EntityNotFoundError(f"Watch '{watch_id}' does not exist")
        return watch

    def component(self, component_id: str) -> Component:
        component = self._uow.components.get_by_id(component_id)
        if component is None:
            raise EntityNotFoundError(f"Component '{component_id}' does not exist")
        return component

    def components(self, component_ids: list[str]) -> list[Component]:
        """Resolve every id, in request order.

        Raises UnknownComponentError naming all ids that did not resolve.
        """
        found = {c.id: c for c in self._uow.components.get_many(component_ids)}
        missing = [cid for cid in component_ids if cid not in found]
        if missing:
            raise UnknownComponentError(missing)
        return [found[cid] for cid in component_ids]

    def custom_watch_for(self, user_id: str, custom_watch_id: str) -> CustomWatch:
        """Resolve a custom watch owned by ``user_id``.

        A custom watch owned by someone else is reported exactly like
        one that does not exist.
        """
        custom_watch = self._uow.custom_watches.get_for_user(custom_watch_id, user_id)
        if custom_watch is None:
            raise EntityNotFoundError(
                f"Custom watch '{custom_watch_id}' does not exist"
            )
        return custom_watch

    def price_and_stock(self, ref: ProductRef) -> StockSnapshot:
        if ref.kind == ProductKind.WATCH:
            product: Watch | Component = self.watch(ref.id)
        else:
            product = self.component(ref.id)
        return StockSnapshot(
            ref=ref, name=product.name, price=product.price, stock=product.stock
        )
