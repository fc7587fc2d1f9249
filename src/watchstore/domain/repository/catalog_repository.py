"""Abstract repositories for the catalog aggregates.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQL, in-memory)
live in the infrastructure layer and in the test fakes.

``save`` persists catalog fields only; stock counters are written
exclusively through ``StockRepository``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from watchstore.domain.model.catalog import Component, ComponentType, Watch


class WatchRepository(ABC):

    @abstractmethod
    def get_by_id(self, watch_id: str) -> Watch | None:
        """Return a watch by its ID, or None if not found."""

    @abstractmethod
    def get_by_reference(self, reference: str) -> Watch | None:
        """Return a watch by its unique reference code, or None."""

    @abstractmethod
    def list_all(self) -> list[Watch]:
        """Return every watch in the catalog, by name."""

    @abstractmethod
    def list_low_stock(self, threshold: int) -> list[Watch]:
        """Return watches whose stock is at or below ``threshold``."""

    @abstractmethod
    def add(self, watch: Watch) -> None:
        """Persist a new watch, including its initial stock."""

    @abstractmethod
    def save(self, watch: Watch) -> None:
        """Persist catalog changes (name, description, price) of a watch."""


class ComponentRepository(ABC):

    @abstractmethod
    def get_by_id(self, component_id: str) -> Component | None:
        """Return a component by its ID, or None if not found."""

    @abstractmethod
    def get_many(self, component_ids: list[str]) -> list[Component]:
        """Return the components that exist among ``component_ids``."""

    @abstractmethod
    def list_all(self, type: ComponentType | None = None) -> list[Component]:
        """Return every component, optionally of a single type."""

    @abstractmethod
    def list_low_stock(self, threshold: int) -> list[Component]:
        """Return components whose stock is at or below ``threshold``."""

    @abstractmethod
    def add(self, component: Component) -> None:
        """Persist a new component, including its initial stock."""

    @abstractmethod
    def save(self, component: Component) -> None:
        """Persist catalog changes (name, type, price) of a component."""
