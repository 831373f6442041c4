"""Built-in dataset used when no persisted file system is available."""

from __future__ import annotations

from filesystem.schemas import FileEntry, FileSystemSnapshot
from world_model.app_catalog import all_apps

ROOT = "root"
DESKTOP = "Desktop"
TRASH = "Trash"

WALLPAPER_URL = (
    "https://images.unsplash.com/photo-1477346611705-65d1883cee1e"
    "?q=80&w=2070&auto=format&fit=crop"
)


def default_file_system() -> FileSystemSnapshot:
    """Return a fresh copy of the default buckets."""
    return {
        ROOT: [
            FileEntry(name="Applications", type="folder", date="Today, 9:41 AM"),
            FileEntry(name="Desktop", type="folder", date="Today, 10:02 AM"),
            FileEntry(name="Documents", type="folder", date="Yesterday, 4:12 PM"),
            FileEntry(name="Downloads", type="folder", date="Oct 24, 2023"),
            FileEntry(name="Pictures", type="folder", date="Jul 20, 2023"),
            FileEntry(name="Projects", type="folder", date="Today, 10:23 AM"),
        ],
        "Applications": [
            FileEntry(name=app.title, type="app", content=app.id.value) for app in all_apps()
        ],
        DESKTOP: [
            FileEntry(
                name="Notes.txt",
                type="file",
                size="2 KB",
                date="Today, 10:05 AM",
                content="Welcome to the desktop. Double-click a folder to open it in Finder.",
            ),
            FileEntry(
                name="Screenshot.png",
                type="file",
                size="3.1 MB",
                date="Today, 9:58 AM",
                content=WALLPAPER_URL,
            ),
            FileEntry(name="Work", type="folder", date="Yesterday, 6:30 PM"),
        ],
        "Documents": [
            FileEntry(name="Resume.pdf", type="file", size="1.2 MB", date="Aug 15, 2023"),
            FileEntry(name="Budget.xlsx", type="file", size="24 KB", date="Sep 01, 2023"),
        ],
        "Downloads": [],
        "Pictures": [
            FileEntry(
                name="vacation_photo.jpg",
                type="file",
                size="4.5 MB",
                date="Jul 20, 2023",
                content=WALLPAPER_URL,
            ),
        ],
        "Projects": [],
        "Work": [],
        TRASH: [
            FileEntry(name="old_draft.txt", type="file", size="8 KB", date="Sep 12, 2023"),
        ],
    }
