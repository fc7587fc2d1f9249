"""SQLAlchemy table mappings.

Rows are persistence shapes only; repositories translate them to and
from the domain dataclasses. Stock columns carry a CHECK constraint so
the store itself refuses a negative counter.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import ClassVar

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Declarative base for every watchstore table."""

    type_annotation_map: ClassVar[dict] = {
        # Prices are euros with cent precision
        Decimal: Numeric(12, 2),
        datetime: DateTime(timezone=True),
    }


class WatchRow(Base):
    __tablename__ = "watches"
    __table_args__ = (
        CheckConstraint("stock >= 0", name="ck_watches_stock_non_negative"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    price: Mapped[Decimal] = mapped_column(nullable=False)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    reference: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    category_id: Mapped[str | None] = mapped_column(String(36), nullable=True)


class ComponentRow(Base):
    __tablename__ = "components"
    __table_args__ = (
        CheckConstraint("stock >= 0", name="ck_components_stock_non_negative"),
        Index("idx_components_type", "type"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    price: Mapped[Decimal] = mapped_column(nullable=False)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class CustomWatchRow(Base):
    __tablename__ = "custom_watches"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    user_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    total_price: Mapped[Decimal] = mapped_column(nullable=False)
    created_at: Mapped[datetime] = mapped_column(nullable=False)

    components: Mapped[list[CustomWatchComponentRow]] = relationship(
        order_by="CustomWatchComponentRow.position",
        cascade="all, delete-orphan",
        lazy="selectin",
    )


class CustomWatchComponentRow(Base):
    __tablename__ = "custom_watch_components"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    custom_watch_id: Mapped[str] = mapped_column(
        ForeignKey("custom_watches.id"), nullable=False, index=True
    )
    component_id: Mapped[str] = mapped_column(ForeignKey("components.id"), nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    # Component price at assembly time
    unit_price: Mapped[Decimal] = mapped_column(nullable=False)

    component: Mapped[ComponentRow] = relationship(lazy="joined")


class OrderRow(Base):
    __tablename__ = "orders"
    __table_args__ = (
        Index("idx_orders_user_created", "user_id", "created_at"),
        Index("idx_orders_status", "status"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    user_id: Mapped[str] = mapped_column(String(64), nullable=False)
    total_amount: Mapped[Decimal] = mapped_column(nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    created_at: Mapped[datetime] = mapped_column(nullable=False)

    items: Mapped[list[OrderItemRow]] = relationship(
        order_by="OrderItemRow.position",
        cascade="all, delete-orphan",
        lazy="selectin",
    )


class OrderItemRow(Base):
    __tablename__ = "order_items"
    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_order_items_quantity_positive"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    order_id: Mapped[str] = mapped_column(ForeignKey("orders.id"), nullable=False, index=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    # Unit price at order time
    price: Mapped[Decimal] = mapped_column(nullable=False)
    watch_id: Mapped[str | None] = mapped_column(ForeignKey("watches.id"), nullable=True)
    custom_watch_id: Mapped[str | None] = mapped_column(
        ForeignKey("custom_watches.id"), nullable=True
    )

    watch: Mapped[WatchRow | None] = relationship(lazy="joined")
    custom_watch: Mapped[CustomWatchRow | None] = relationship(lazy="joined")
