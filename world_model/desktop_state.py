"""Window and desktop layout state schema."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Position:
    x: float
    y: float


@dataclass
class Size:
    width: float
    height: float


@dataclass
class WindowRecord:
    """Live state of one open mock-application window."""

    id: str
    app_id: str
    title: str
    position: Position
    size: Size
    z_index: int
    is_open: bool = True
    is_minimized: bool = False
    is_maximized: bool = False
    launch_props: dict[str, Any] = field(default_factory=dict)


@dataclass
class DesktopLayout:
    """Viewport and reserved bands used for window geometry."""

    viewport: Size = field(default_factory=lambda: Size(1440, 900))
    menu_bar_height: int = 32
    dock_height: int = 80
    cascade_step: int = 20
    min_margin: int = 50
    restore_position: Position = field(default_factory=lambda: Position(100, 100))
    z_index_base: int = 10

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> DesktopLayout:
        """Build a layout from the `desktop` config section, keeping defaults for gaps."""
        layout = cls()
        viewport = config.get("viewport", {})
        layout.viewport = Size(
            width=viewport.get("width", layout.viewport.width),
            height=viewport.get("height", layout.viewport.height),
        )
        restore = config.get("restore_position", {})
        layout.restore_position = Position(
            x=restore.get("x", layout.restore_position.x),
            y=restore.get("y", layout.restore_position.y),
        )
        for key in ("menu_bar_height", "dock_height", "cascade_step", "min_margin", "z_index_base"):
            if key in config:
                setattr(layout, key, int(config[key]))
        return layout
