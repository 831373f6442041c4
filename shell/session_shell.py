"""Session shell wiring user gestures to the window and file engines."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from core.event_bus import FS_CHANGED, WINDOW_CLOSED, EventBus
from filesystem.defaults import DESKTOP, TRASH
from filesystem.file_store import VirtualFileStore
from filesystem.schemas import FileEntry
from os_controller.window_manager import WindowSessionManager
from shell.context_menu import ContextMenuOption, position_menu, separator
from world_model.app_catalog import AppID, all_apps, resolve_app_id
from world_model.desktop_state import Position

DEFAULT_MENU_TITLE = "Finder"
NEW_FOLDER_NAME = "untitled folder"


@dataclass
class DockItem:
    app_id: str
    title: str
    icon: str
    color: str
    is_open: bool


@dataclass
class DragSession:
    window_id: str
    offset_x: float
    offset_y: float


class SessionShell:
    """Composition layer for the dock, menu bar, desktop icons and drags.

    Holds transient UI state only (icon selection, the drag in progress);
    all durable state lives in the two engines.
    """

    def __init__(
        self,
        windows: WindowSessionManager,
        files: VirtualFileStore,
        event_bus: EventBus,
    ) -> None:
        self.windows = windows
        self.files = files
        self.event_bus = event_bus
        self.selected_icon: str | None = None
        self.drag: DragSession | None = None
        self.logger = logging.getLogger("deskshell.shell")
        event_bus.subscribe(WINDOW_CLOSED, self._on_window_closed)
        event_bus.subscribe(FS_CHANGED, self._on_fs_changed)

    # Dock and menu bar

    def dock_items(self) -> list[DockItem]:
        open_ids = set(self.windows.open_app_ids())
        return [
            DockItem(
                app_id=app.id.value,
                title=app.title,
                icon=app.icon,
                color=app.color,
                is_open=app.id.value in open_ids,
            )
            for app in all_apps()
        ]

    def click_dock(self, app_id: AppID | str) -> None:
        self.windows.open_app(app_id)

    def active_app_title(self) -> str:
        active = self.windows.active_window
        return active.title if active is not None else DEFAULT_MENU_TITLE

    # Desktop icons

    def desktop_icons(self) -> list[FileEntry]:
        return self.files.list_bucket(DESKTOP)

    def select_icon(self, name: str) -> None:
        if self.files.get_entry(DESKTOP, name) is not None:
            self.selected_icon = name

    def clear_selection(self) -> None:
        self.selected_icon = None

    def double_click_icon(self, name: str) -> str | None:
        """Open a desktop entry; returns a notice for plain files."""
        entry = self.files.get_entry(DESKTOP, name)
        if entry is None:
            return None
        self.selected_icon = None
        return self.open_entry(entry)

    def open_entry(self, entry: FileEntry) -> str | None:
        if entry.type == "folder":
            self.windows.open_app(AppID.FINDER, {"path": entry.name})
            return None
        if entry.type == "app":
            app_id = resolve_app_id(entry.content or entry.name)
            if app_id is None:
                self.logger.warning("Shortcut '%s' points at an unknown app", entry.name)
                return None
            self.windows.open_app(app_id)
            return None
        self.logger.info("Opening file %s", entry.name)
        return f"Opening {entry.name}..."

    # Window dragging

    def begin_drag(self, window_id: str, pointer_x: float, pointer_y: float) -> bool:
        """Start dragging from the title bar; maximized windows only get focus."""
        self.windows.focus_window(window_id)
        window = self.windows.get_window(window_id)
        if window is None or window.is_maximized:
            return False
        self.drag = DragSession(
            window_id=window_id,
            offset_x=pointer_x - window.position.x,
            offset_y=pointer_y - window.position.y,
        )
        return True

    def drag_to(self, pointer_x: float, pointer_y: float) -> None:
        if self.drag is None:
            return
        self.windows.update_window_position(
            self.drag.window_id,
            pointer_x - self.drag.offset_x,
            pointer_y - self.drag.offset_y,
        )

    def end_drag(self) -> None:
        self.drag = None

    # File actions

    def new_folder(self, bucket_key: str = DESKTOP) -> str:
        """Create the first free 'untitled folder' name in the bucket."""
        name = NEW_FOLDER_NAME
        counter = 2
        while self.files.get_entry(bucket_key, name) is not None:
            name = f"{NEW_FOLDER_NAME} {counter}"
            counter += 1
        self.files.create_folder(bucket_key, name)
        return name

    def move_to_trash(self, bucket_key: str, name: str) -> bool:
        """Move an entry into Trash; refused when Trash already holds that name."""
        entry = self.files.get_entry(bucket_key, name)
        if entry is None or bucket_key == TRASH:
            return False
        if self.files.get_entry(TRASH, name) is not None:
            self.logger.warning("Trash already holds '%s', leaving it in %s", name, bucket_key)
            return False
        self.files.add_file(TRASH, entry)
        self.files.delete_file(bucket_key, name)
        return True

    # Context menus

    def desktop_context_menu(self) -> list[ContextMenuOption]:
        return [
            ContextMenuOption("New Folder", action=lambda: self.new_folder(DESKTOP)),
            separator(),
            ContextMenuOption(
                "Empty Trash",
                action=self.files.empty_trash,
                disabled=not self.files.list_bucket(TRASH),
            ),
        ]

    def icon_context_menu(self, name: str, bucket_key: str = DESKTOP) -> list[ContextMenuOption]:
        entry = self.files.get_entry(bucket_key, name)
        if entry is None:
            return []
        return [
            ContextMenuOption("Open", action=lambda: self.open_entry(entry)),
            separator(),
            ContextMenuOption(
                "Move to Trash",
                action=lambda: self.move_to_trash(bucket_key, name),
                disabled=entry.name == TRASH,
            ),
        ]

    def place_menu(self, x: float, y: float, options: list[ContextMenuOption]) -> Position:
        return position_menu(x, y, len(options), self.windows.layout.viewport)

    def _on_window_closed(self, payload: dict[str, Any]) -> None:
        if self.drag is not None and self.drag.window_id == payload.get("window_id"):
            self.drag = None

    def _on_fs_changed(self, payload: dict[str, Any]) -> None:
        if self.selected_icon is None:
            return
        if self.files.get_entry(DESKTOP, self.selected_icon) is None:
            self.selected_icon = None
