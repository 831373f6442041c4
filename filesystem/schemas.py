"""Pydantic schemas for virtual file store entries."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, TypeAdapter

EntryType = Literal["folder", "file", "app"]


class FileEntry(BaseModel):
    """One file, folder or application shortcut inside a bucket."""

    model_config = ConfigDict(extra="forbid")

    name: str
    type: EntryType
    size: str | None = None
    date: str | None = None
    content: str | None = None


FileSystemSnapshot = dict[str, list[FileEntry]]

snapshot_adapter: TypeAdapter[FileSystemSnapshot] = TypeAdapter(FileSystemSnapshot)
