"""Virtual file store: a flat, name-keyed mock filesystem.

Buckets are addressed by folder name, globally. A folder's contents live in
the bucket named after it no matter where the folder entry is listed, so two
folders sharing a name share one bucket. Deleting a folder entry leaves its
bucket in place.

Every effective mutation rewrites the whole store to durable storage under a
single key. Storage failures are logged and never reach the caller.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import ValidationError

from core.event_bus import FS_CHANGED, EventBus
from filesystem.defaults import TRASH, default_file_system
from filesystem.schemas import FileEntry, FileSystemSnapshot, snapshot_adapter
from filesystem.stores.base_storage import BaseStorage

DEFAULT_STORAGE_KEY = "deskshell.filesystem"

logger = logging.getLogger("deskshell.file_store")


def serialize(file_system: FileSystemSnapshot) -> str:
    """Encode buckets as the persisted JSON object."""
    payload = {
        bucket: [entry.model_dump(exclude_none=True) for entry in entries]
        for bucket, entries in file_system.items()
    }
    return json.dumps(payload, ensure_ascii=False)


def deserialize(payload: str) -> FileSystemSnapshot:
    """Decode the persisted JSON object; raises ValidationError when malformed."""
    return snapshot_adapter.validate_json(payload)


class VirtualFileStore:
    """Owns the bucket mapping and keeps durable storage in sync with it."""

    def __init__(
        self,
        storage: BaseStorage,
        storage_key: str = DEFAULT_STORAGE_KEY,
        event_bus: EventBus | None = None,
    ) -> None:
        self.storage = storage
        self.storage_key = storage_key
        self.event_bus = event_bus or EventBus()
        self._buckets: FileSystemSnapshot = self._load()

    @property
    def file_system(self) -> FileSystemSnapshot:
        return {bucket: list(entries) for bucket, entries in self._buckets.items()}

    def list_bucket(self, bucket_key: str) -> list[FileEntry]:
        return list(self._buckets.get(bucket_key, []))

    def get_entry(self, bucket_key: str, name: str) -> FileEntry | None:
        for entry in self._buckets.get(bucket_key, []):
            if entry.name == name:
                return entry
        return None

    def add_file(self, bucket_key: str, entry: FileEntry | dict[str, Any]) -> None:
        """Append an entry unless its name is already taken in the bucket."""
        if not isinstance(entry, FileEntry):
            entry = FileEntry.model_validate(entry)
        if self.get_entry(bucket_key, entry.name) is not None:
            return
        self._buckets[bucket_key] = [*self._buckets.get(bucket_key, []), entry]
        if entry.type == "folder" and entry.name not in self._buckets:
            self._buckets[entry.name] = []
        self._commit("add", bucket_key, entry.name)

    def create_folder(self, bucket_key: str, folder_name: str) -> None:
        self.add_file(bucket_key, FileEntry(name=folder_name, type="folder", date="Today"))

    def delete_file(self, bucket_key: str, file_name: str) -> None:
        """Remove an entry; the bucket its name may address is left untouched."""
        if self.get_entry(bucket_key, file_name) is None:
            return
        self._buckets[bucket_key] = [
            entry for entry in self._buckets[bucket_key] if entry.name != file_name
        ]
        self._commit("delete", bucket_key, file_name)

    def update_file(self, bucket_key: str, entry: FileEntry | dict[str, Any]) -> None:
        """Shallow-merge the provided fields over the entry with the same name."""
        if isinstance(entry, FileEntry):
            fields = entry.model_dump(exclude_unset=True)
        else:
            fields = dict(entry)
        name = fields.get("name")
        current = self.get_entry(bucket_key, name) if name is not None else None
        if current is None:
            return
        merged = FileEntry.model_validate({**current.model_dump(), **fields})
        self._buckets[bucket_key] = [
            merged if existing.name == name else existing
            for existing in self._buckets[bucket_key]
        ]
        self._commit("update", bucket_key, name)

    def empty_trash(self) -> None:
        self._buckets[TRASH] = []
        self._commit("empty_trash", TRASH, None)

    def serialize(self) -> str:
        return serialize(self._buckets)

    def _load(self) -> FileSystemSnapshot:
        try:
            raw = self.storage.get_item(self.storage_key)
        except Exception as exc:
            logger.warning("Failed to read file system from storage: %s", exc)
            return default_file_system()
        if raw is None:
            return default_file_system()
        try:
            return deserialize(raw)
        except ValidationError as exc:
            logger.warning(
                "Stored file system under '%s' is corrupt, using defaults: %s",
                self.storage_key,
                exc,
            )
            return default_file_system()

    def _commit(self, op: str, bucket_key: str, name: str | None) -> None:
        try:
            self.storage.set_item(self.storage_key, self.serialize())
        except Exception as exc:
            logger.warning("Failed to persist file system after %s: %s", op, exc)
        self.event_bus.emit(FS_CHANGED, {"op": op, "bucket": bucket_key, "name": name})
