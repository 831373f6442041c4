"""Key/value storage interface backing the virtual file store."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseStorage(ABC):
    """Durable string storage addressed by key."""

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete a key; missing keys are ignored."""
