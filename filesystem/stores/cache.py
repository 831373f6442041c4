"""Dictionary-backed storage for tests and ephemeral sessions."""

from __future__ import annotations

from filesystem.stores.base_storage import BaseStorage


class MemoryStorage(BaseStorage):
    """Keeps values in process memory only."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._store: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._store.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._store[key] = value

    def remove_item(self, key: str) -> None:
        self._store.pop(key, None)
