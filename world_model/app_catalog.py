"""Static catalog of the mock applications hosted by the desktop."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from world_model.desktop_state import Size


class AppID(str, Enum):
    """Identity of every mock application."""

    FINDER = "finder"
    TERMINAL = "terminal"
    NOTES = "notes"
    CALCULATOR = "calculator"
    GEMINI = "gemini"
    PHOTOS = "photos"
    SETTINGS = "settings"


@dataclass(frozen=True)
class AppConfig:
    """Per-application display metadata and default geometry."""

    id: AppID
    title: str
    icon: str
    default_size: Size
    color: str


APPS: dict[AppID, AppConfig] = {
    AppID.FINDER: AppConfig(AppID.FINDER, "Finder", "folder", Size(640, 400), "blue-500"),
    AppID.TERMINAL: AppConfig(AppID.TERMINAL, "Terminal", "terminal", Size(580, 360), "gray-800"),
    AppID.GEMINI: AppConfig(
        AppID.GEMINI, "Gemini Assistant", "bot", Size(400, 600), "blue-400/purple-500"
    ),
    AppID.NOTES: AppConfig(AppID.NOTES, "Notes", "sticky-note", Size(400, 500), "yellow-400"),
    AppID.CALCULATOR: AppConfig(
        AppID.CALCULATOR, "Calculator", "calculator", Size(260, 380), "orange-500"
    ),
    AppID.PHOTOS: AppConfig(AppID.PHOTOS, "Photos", "image", Size(700, 500), "pink-500"),
    AppID.SETTINGS: AppConfig(AppID.SETTINGS, "Settings", "settings", Size(500, 350), "gray-500"),
}


def get_app(app_id: AppID | str) -> AppConfig:
    """Look up an application config; raises ValueError for unknown ids."""
    return APPS[AppID(app_id)]


def resolve_app_id(value: str) -> AppID | None:
    """Match an app id or title case-insensitively."""
    needle = value.strip().lower()
    for app in APPS.values():
        if needle in {app.id.value, app.title.lower()}:
            return app.id
    return None


def all_apps() -> list[AppConfig]:
    """Return catalog entries in dock order."""
    return list(APPS.values())
