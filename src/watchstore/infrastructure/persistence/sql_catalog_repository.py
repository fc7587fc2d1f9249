"""SQLAlchemy implementations of WatchRepository and ComponentRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from watchstore.domain.model.catalog import Component, ComponentType, Watch
from watchstore.domain.model.value_objects import Money
from watchstore.domain.repository.catalog_repository import (
    ComponentRepository,
    WatchRepository,
)
from watchstore.infrastructure.persistence.orm import ComponentRow, WatchRow


class SqlAlchemyWatchRepository(WatchRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- WatchRepository interface --------------------------------------------

    def get_by_id(self, watch_id: str) -> Watch | None:
        row = self._session.get(WatchRow, watch_id)
        return self._to_domain(row) if row is not None else None

    def get_by_reference(self, reference: str) -> Watch | None:
        row = self._session.scalars(
            select(WatchRow).where(WatchRow.reference == reference)
        ).one_or_none()
        return self._to_domain(row) if row is not None else None

    def list_all(self) -> list[Watch]:
        rows = self._session.scalars(select(WatchRow).order_by(WatchRow.name))
        return [self._to_domain(row) for row in rows]

    def list_low_stock(self, threshold: int) -> list[Watch]:
        rows = self._session.scalars(
            select(WatchRow)
            .where(WatchRow.stock <= threshold)
            .order_by(WatchRow.stock, WatchRow.name)
        )
        return [self._to_domain(row) for row in rows]

    def add(self, watch: Watch) -> None:
        self._session.add(
            WatchRow(
                id=watch.id,
                name=watch.name,
                description=watch.description,
                price=watch.price.amount,
                stock=watch.stock,
                reference=watch.reference,
                category_id=watch.category_id,
            )
        )

    def save(self, watch: Watch) -> None:
        row = self._session.get(WatchRow, watch.id)
        if row is None:
            raise LookupError(f"Watch '{watch.id}' is not persisted")
        row.name = watch.name
        row.description = watch.description
        row.price = watch.price.amount
        row.category_id = watch.category_id

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_domain(row: WatchRow) -> Watch:
        return Watch(
            id=row.id,
            name=row.name,
            description=row.description,
            price=Money(row.price),
            stock=row.stock,
            reference=row.reference,
            category_id=row.category_id,
        )


class SqlAlchemyComponentRepository(ComponentRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- ComponentRepository interface ----------------------------------------

    def get_by_id(self, component_id: str) -> Component | None:
        row = self._session.get(ComponentRow, component_id)
        return self._to_domain(row) if row is not None else None

    def get_many(self, component_ids: list[str]) -> list[Component]:
        if not component_ids:
            return []
        rows = self._session.scalars(
            select(ComponentRow).where(ComponentRow.id.in_(component_ids))
        )
        return [self._to_domain(row) for row in rows]

    def list_all(self, type: ComponentType | None = None) -> list[Component]:
        stmt = select(ComponentRow).order_by(ComponentRow.type, ComponentRow.name)
        if type is not None:
            stmt = stmt.where(ComponentRow.type == type.value)
        return [self._to_domain(row) for row in self._session.scalars(stmt)]

    def list_low_stock(self, threshold: int) -> list[Component]:
        rows = self._session.scalars(
            select(ComponentRow)
            .where(ComponentRow.stock <= threshold)
            .order_by(ComponentRow.stock, ComponentRow.name)
        )
        return [self._to_domain(row) for row in rows]

    def add(self, component: Component) -> None:
        self._session.add(
            ComponentRow(
                id=component.id,
                name=component.name,
                type=component.type.value,
                price=component.price.amount,
                stock=component.stock,
            )
        )

    def save(self, component: Component) -> None:
        row = self._session.get(ComponentRow, component.id)
        if row is None:
            raise LookupError(f"Component '{component.id}' is not persisted")
        row.name = component.name
        row.type = component.type.value
        row.price = component.price.amount

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_domain(row: ComponentRow) -> Component:
        return Component(
            id=row.id,
            name=row.name,
            type=ComponentType(row.type),
            price=Money(row.price),
            stock=row.stock,
        )
