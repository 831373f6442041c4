"""Session state aggregate shared by every open window."""

from __future__ import annotations

from dataclasses import dataclass, field

from world_model.desktop_state import WindowRecord


@dataclass
class SessionState:
    """Mutable in-memory state for a single desktop session."""

    windows: list[WindowRecord] = field(default_factory=list)
    active_window_id: str | None = None
    next_z_index: int = 10

    def mint_z_index(self) -> int:
        """Return the next stacking value and advance the counter."""
        value = self.next_z_index
        self.next_z_index += 1
        return value

    def find(self, window_id: str) -> WindowRecord | None:
        for window in self.windows:
            if window.id == window_id:
                return window
        return None
