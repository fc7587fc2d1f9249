"""Application service: custom watch queries."""

from __future__ import annotations

from watchstore.application.dto import Caller, CustomWatchDTO
from watchstore.application.mapping import custom_watch_to_dto
from watchstore.domain.repository.unit_of_work import UnitOfWorkFactory
from watchstore.domain.service.catalog_lookup import CatalogLookup


class ShowCustomWatchHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, caller: Caller, custom_watch_id: str) -> CustomWatchDTO:
        with self._uow_factory() as uow:
            custom_watch = CatalogLookup(uow).custom_watch_for(
                caller.user_id, custom_watch_id
            )
        return custom_watch_to_dto(custom_watch)


class ListCustomWatchesHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, caller: Caller) -> list[CustomWatchDTO]:
        with self._uow_factory() as uow:
            custom_watches = uow.custom_watches.list_for_user(caller.user_id)
        return [custom_watch_to_dto(cw) for cw in custom_watches]
