"""Application service: Assemble Custom Watch use case.

Turns a user's component selection into a persisted, priced custom
watch. Each selected component gives up exactly one unit of stock,
in the same transaction that stores the custom watch.
"""

from __future__ import annotations

from watchstore.application.dto import (
    AssembleCustomWatchRequest,
    Caller,
    CustomWatchDTO,
)
from watchstore.application.mapping import custom_watch_to_dto
from watchstore.application.validation import unwrap, validate_assembly
from watchstore.domain.exceptions import InsufficientStockError, OutOfStockError
from watchstore.domain.model.custom_watch import CustomWatch
from watchstore.domain.repository.unit_of_work import UnitOfWorkFactory
from watchstore.domain.service.catalog_lookup import CatalogLookup
from watchstore.domain.service.inventory_ledger import InventoryLedger
from watchstore.logging_config import get_logger

logger = get_logger(__name__)


class AssembleCustomWatchHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, caller: Caller, request: AssembleCustomWatchRequest) -> CustomWatchDTO:
        """Assemble a custom watch for ``caller``.

        Steps:
        1. Validate the request shape (name, non-empty unique id list).
        2. Resolve every component (fail with all unknown ids).
        3. Reject components with no stock left (fail with their names).
        4. Persist the custom watch and take one unit of each component.
        """
        request = unwrap(validate_assembly(request))

        with self._uow_factory() as uow:
            components = CatalogLookup(uow).components(request.component_ids)

            out_of_stock = [c.name for c in components if not c.in_stock]
            if out_of_stock:
                raise OutOfStockError(out_of_stock)

            custom_watch = CustomWatch.assemble(
                user_id=caller.user_id, name=request.name, components=components
            )
            uow.custom_watches.add(custom_watch)

            ledger = InventoryLedger(uow.stock)
            for component in components:
                try:
                    ledger.decrement_stock(component.ref, 1, component.name)
                except InsufficientStockError as exc:
                    raise OutOfStockError([component.name]) from exc

            uow.commit()

        logger.info(
            "custom_watch_assembled",
            extra={
                "custom_watch_id": custom_watch.id,
                "user_id": caller.user_id,
                "total_price": custom_watch.total_price.amount,
                "components": len(custom_watch.components),
            },
        )
        return custom_watch_to_dto(custom_watch)
