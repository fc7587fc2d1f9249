"""Application service: stock queries."""

from __future__ import annotations

from watchstore.application.dto import Caller, LowStockLineDTO, StockDTO
from watchstore.domain.model.value_objects import ProductKind, ProductRef
from watchstore.domain.repository.unit_of_work import UnitOfWorkFactory
from watchstore.domain.service.catalog_lookup import CatalogLookup

DEFAULT_WATCH_THRESHOLD = 5
DEFAULT_COMPONENT_THRESHOLD = 10


class ShowStockHandler:
    """Current price and stock of one product."""

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, ref: ProductRef) -> StockDTO:
        with self._uow_factory() as uow:
            snapshot = CatalogLookup(uow).price_and_stock(ref)
        return StockDTO(
            kind=ref.kind.value,
            id=ref.id,
            name=snapshot.name,
            price=str(snapshot.price),
            stock=snapshot.stock,
        )


class LowStockReportHandler:
    """Watches and components at or below their restocking threshold."""

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        watch_threshold: int = DEFAULT_WATCH_THRESHOLD,
        component_threshold: int = DEFAULT_COMPONENT_THRESHOLD,
    ) -> None:
        self._uow_factory = uow_factory
        self._watch_threshold = watch_threshold
        self._component_threshold = component_threshold

    def handle(self, caller: Caller) -> list[LowStockLineDTO]:
        caller.require_admin()
        with self._uow_factory() as uow:
            watches = uow.watches.list_low_stock(self._watch_threshold)
            components = uow.components.list_low_stock(self._component_threshold)

        lines = [
            LowStockLineDTO(
                kind=ProductKind.WATCH.value,
                id=w.id,
                name=w.name,
                stock=w.stock,
                threshold=self._watch_threshold,
            )
            for w in watches
        ]
        lines.extend(
            LowStockLineDTO(
                kind=ProductKind.COMPONENT.value,
                id=c.id,
                name=c.name,
                stock=c.stock,
                threshold=self._component_threshold,
            )
            for c in components
        )
        return lines
