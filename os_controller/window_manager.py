"""Window session manager: lifecycle, stacking order, focus and geometry."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import replace
from typing import Any

from core.event_bus import (
    WINDOW_CLOSED,
    WINDOW_FOCUSED,
    WINDOW_MAXIMIZED,
    WINDOW_MINIMIZED,
    WINDOW_MOVED,
    WINDOW_OPENED,
    WINDOW_RESTORED,
    EventBus,
)
from core.state_manager import SessionState
from world_model.app_catalog import AppID, get_app
from world_model.desktop_state import DesktopLayout, Position, Size, WindowRecord


class WindowSessionManager:
    """Owns the live set of windows for one desktop session.

    Every operation is total: an unknown window id is a silent no-op.
    Only one window per application may exist; reopening an app focuses it.
    """

    def __init__(
        self,
        layout: DesktopLayout | None = None,
        event_bus: EventBus | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.layout = layout or DesktopLayout()
        self.event_bus = event_bus or EventBus()
        self.clock = clock
        self.state = SessionState(next_z_index=self.layout.z_index_base)
        self.logger = logging.getLogger("deskshell.window_manager")

    @property
    def windows(self) -> list[WindowRecord]:
        return list(self.state.windows)

    @property
    def active_window_id(self) -> str | None:
        return self.state.active_window_id

    @property
    def active_window(self) -> WindowRecord | None:
        if self.state.active_window_id is None:
            return None
        return self.state.find(self.state.active_window_id)

    def get_window(self, window_id: str) -> WindowRecord | None:
        return self.state.find(window_id)

    def open_app_ids(self) -> list[str]:
        """Unique app ids of open windows, in opening order."""
        seen: list[str] = []
        for window in self.state.windows:
            if window.app_id not in seen:
                seen.append(window.app_id)
        return seen

    def set_viewport(self, width: float, height: float) -> None:
        self.layout.viewport = Size(width, height)

    def open_app(self, app_id: AppID | str, launch_props: dict[str, Any] | None = None) -> None:
        """Open an app window, or focus the existing one."""
        try:
            app = get_app(app_id)
        except ValueError:
            self.logger.warning("Ignoring open request for unknown app '%s'", app_id)
            return
        existing = next((w for w in self.state.windows if w.app_id == app.id.value), None)
        if existing is not None:
            if launch_props:
                existing.launch_props = dict(launch_props)
            self.focus_window(existing.id)
            return

        offset = len(self.state.windows) * self.layout.cascade_step
        viewport = self.layout.viewport
        size = replace(app.default_size)
        position = Position(
            x=max(self.layout.min_margin, viewport.width / 2 - size.width / 2 + offset),
            y=max(self.layout.min_margin, viewport.height / 2 - size.height / 2 + offset),
        )
        window = WindowRecord(
            id=f"{app.id.value}-{int(self.clock() * 1000)}",
            app_id=app.id.value,
            title=app.title,
            position=position,
            size=size,
            z_index=self.state.mint_z_index(),
            launch_props=dict(launch_props or {}),
        )
        self.state.windows.append(window)
        self.state.active_window_id = window.id
        self.logger.debug("Opened %s at z=%d", window.id, window.z_index)
        self._emit(WINDOW_OPENED, window)

    def close_window(self, window_id: str) -> None:
        window = self.state.find(window_id)
        if window is None:
            return
        self.state.windows = [w for w in self.state.windows if w.id != window_id]
        if self.state.active_window_id == window_id:
            self.state.active_window_id = None
        self.logger.debug("Closed %s", window_id)
        self._emit(WINDOW_CLOSED, window)

    def minimize_window(self, window_id: str) -> None:
        window = self.state.find(window_id)
        if window is None:
            return
        window.is_minimized = True
        # Minimizing always deactivates, whichever window was active.
        self.state.active_window_id = None
        self._emit(WINDOW_MINIMIZED, window)

    def maximize_window(self, window_id: str) -> None:
        """Toggle between full-screen geometry and the app's default geometry."""
        window = self.state.find(window_id)
        if window is None:
            return
        layout = self.layout
        if window.is_maximized:
            window.is_maximized = False
            window.size = replace(get_app(window.app_id).default_size)
            window.position = replace(layout.restore_position)
            event = WINDOW_RESTORED
        else:
            window.is_maximized = True
            window.position = Position(0, layout.menu_bar_height)
            window.size = Size(
                width=layout.viewport.width,
                height=layout.viewport.height - layout.menu_bar_height - layout.dock_height,
            )
            event = WINDOW_MAXIMIZED
        self._emit(event, window)
        self.focus_window(window_id)

    def focus_window(self, window_id: str) -> None:
        """Activate a window, bring it to the front and un-minimize it."""
        window = self.state.find(window_id)
        if window is None:
            return
        self.state.active_window_id = window_id
        window.z_index = self.state.mint_z_index()
        window.is_minimized = False
        self._emit(WINDOW_FOCUSED, window)

    def update_window_position(self, window_id: str, x: float, y: float) -> None:
        window = self.state.find(window_id)
        if window is None:
            return
        window.position = Position(x, y)
        self._emit(WINDOW_MOVED, window)

    def set_window_title(self, window_id: str, title: str) -> None:
        window = self.state.find(window_id)
        if window is not None:
            window.title = title

    def _emit(self, event_name: str, window: WindowRecord) -> None:
        self.event_bus.emit(
            event_name,
            {"window_id": window.id, "app_id": window.app_id, "z_index": window.z_index},
        )
