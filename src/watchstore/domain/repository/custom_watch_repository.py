"""Abstract repository for CustomWatch aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from watchstore.domain.model.custom_watch import CustomWatch


class CustomWatchRepository(ABC):

    @abstractmethod
    def get_by_id(self, custom_watch_id: str) -> CustomWatch | None:
        """Return a custom watch regardless of owner, or None."""

    @abstractmethod
    def list_for_user(self, user_id: str) -> list[CustomWatch]:
        """Return the user's custom watches, newest first."""

    @abstractmethod
    def add(self, custom_watch: CustomWatch) -> None:
        """Persist a new custom watch together with its component links."""

    def get_for_user(self, custom_watch_id: str, user_id: str) -> CustomWatch | None:
        """Return the custom watch only if ``user_id`` owns it."""
        custom_watch = self.get_by_id(custom_watch_id)
        if custom_watch is None or not custom_watch.is_owned_by(user_id):
            return None
        return custom_watch
