"""SQLAlchemy implementation of CustomWatchRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from watchstore.domain.model.catalog import ComponentType
from watchstore.domain.model.custom_watch import CustomWatch, CustomWatchComponent
from watchstore.domain.model.value_objects import Money
from watchstore.domain.repository.custom_watch_repository import CustomWatchRepository
from watchstore.infrastructure.persistence.orm import (
    CustomWatchComponentRow,
    CustomWatchRow,
)


class SqlAlchemyCustomWatchRepository(CustomWatchRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- CustomWatchRepository interface --------------------------------------

    def get_by_id(self, custom_watch_id: str) -> CustomWatch | None:
        row = self._session.get(CustomWatchRow, custom_watch_id)
        return to_domain(row) if row is not None else None

    def list_for_user(self, user_id: str) -> list[CustomWatch]:
        rows = self._session.scalars(
            select(CustomWatchRow)
            .where(CustomWatchRow.user_id == user_id)
            .order_by(CustomWatchRow.created_at.desc())
        )
        return [to_domain(row) for row in rows]

    def add(self, custom_watch: CustomWatch) -> None:
        self._session.add(
            CustomWatchRow(
                id=custom_watch.id,
                user_id=custom_watch.user_id,
                name=custom_watch.name,
                total_price=custom_watch.total_price.amount,
                created_at=custom_watch.created_at,
                components=[
                    CustomWatchComponentRow(
                        component_id=link.component_id,
                        position=position,
                        unit_price=link.unit_price.amount,
                    )
                    for position, link in enumerate(custom_watch.components)
                ],
            )
        )


def to_domain(row: CustomWatchRow) -> CustomWatch:
    return CustomWatch(
        id=row.id,
        user_id=row.user_id,
        name=row.name,
        total_price=Money(row.total_price),
        components=tuple(
            CustomWatchComponent(
                component_id=link.component_id,
                component_name=link.component.name,
                component_type=ComponentType(link.component.type),
                unit_price=Money(link.unit_price),
            )
            for link in row.components
        ),
        created_at=row.created_at,
    )
