"""Context-menu contract shared by desktop collaborators."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from world_model.desktop_state import Position, Size

MENU_WIDTH = 200
ITEM_HEIGHT = 30
MENU_PADDING = 20


@dataclass
class ContextMenuOption:
    label: str
    action: Callable[[], None] | None = None
    disabled: bool = False
    separator: bool = False


def separator() -> ContextMenuOption:
    return ContextMenuOption(label="", separator=True)


def invoke_option(options: list[ContextMenuOption], index: int) -> bool:
    """Run the option at `index`; returns False when nothing was run."""
    if not 0 <= index < len(options):
        return False
    option = options[index]
    if option.separator or option.disabled or option.action is None:
        return False
    option.action()
    return True


def position_menu(x: float, y: float, option_count: int, viewport: Size) -> Position:
    """Shift a menu opened at (x, y) so it stays inside the viewport."""
    return Position(
        x=min(x, viewport.width - MENU_WIDTH),
        y=min(y, viewport.height - (option_count * ITEM_HEIGHT + MENU_PADDING)),
    )
