"""Session shell gesture wiring tests."""

from __future__ import annotations

from core.event_bus import EventBus
from filesystem.file_store import VirtualFileStore
from filesystem.schemas import FileEntry
from filesystem.stores.cache import MemoryStorage
from os_controller.window_manager import WindowSessionManager
from shell.context_menu import invoke_option, position_menu
from shell.session_shell import SessionShell
from world_model.app_catalog import AppID
from world_model.desktop_state import Position, Size


def build_shell() -> SessionShell:
    bus = EventBus()
    files = VirtualFileStore(storage=MemoryStorage(), event_bus=bus)
    windows = WindowSessionManager(event_bus=bus)
    return SessionShell(windows=windows, files=files, event_bus=bus)


def test_end_to_end_finder_and_folder_creation() -> None:
    shell = build_shell()

    shell.click_dock(AppID.FINDER)
    shell.click_dock(AppID.FINDER)
    shell.files.create_folder("root", "Projects2")

    assert len(shell.windows.windows) == 1
    assert shell.files.get_entry("root", "Projects2").type == "folder"
    assert shell.files.file_system["Projects2"] == []


def test_dock_marks_open_apps() -> None:
    shell = build_shell()
    shell.click_dock("terminal")

    items = {item.app_id: item.is_open for item in shell.dock_items()}

    assert items["terminal"] is True
    assert items["finder"] is False
    assert len(items) == 7


def test_menu_title_follows_active_window() -> None:
    shell = build_shell()
    assert shell.active_app_title() == "Finder"

    shell.click_dock(AppID.CALCULATOR)
    assert shell.active_app_title() == "Calculator"

    shell.windows.minimize_window(shell.windows.windows[0].id)
    assert shell.active_app_title() == "Finder"


def test_double_click_folder_opens_finder_with_path() -> None:
    shell = build_shell()
    shell.select_icon("Work")

    notice = shell.double_click_icon("Work")

    assert notice is None
    assert shell.selected_icon is None
    finder = shell.windows.windows[0]
    assert finder.app_id == "finder"
    assert finder.launch_props == {"path": "Work"}


def test_double_click_file_returns_notice() -> None:
    shell = build_shell()

    assert shell.double_click_icon("Notes.txt") == "Opening Notes.txt..."
    assert shell.windows.windows == []
    assert shell.double_click_icon("missing") is None


def test_app_shortcut_opens_its_app() -> None:
    shell = build_shell()
    shell.files.add_file("Desktop", FileEntry(name="Terminal", type="app", content="terminal"))

    shell.double_click_icon("Terminal")

    assert shell.windows.open_app_ids() == ["terminal"]


def test_select_icon_ignores_unknown_and_clears_on_delete() -> None:
    shell = build_shell()
    shell.select_icon("nope")
    assert shell.selected_icon is None

    shell.select_icon("Notes.txt")
    shell.files.delete_file("Desktop", "Notes.txt")

    assert shell.selected_icon is None


def test_drag_moves_window_by_pointer_delta() -> None:
    shell = build_shell()
    shell.click_dock(AppID.NOTES)
    window = shell.windows.windows[0]
    start = Position(window.position.x, window.position.y)

    assert shell.begin_drag(window.id, start.x + 15, start.y + 5) is True
    shell.drag_to(start.x + 115, start.y + 55)
    shell.drag_to(start.x + 215, start.y + 105)
    shell.end_drag()
    shell.drag_to(0, 0)

    assert shell.windows.get_window(window.id).position == Position(start.x + 200, start.y + 100)


def test_drag_refused_for_maximized_window_but_focuses() -> None:
    shell = build_shell()
    shell.click_dock(AppID.NOTES)
    shell.click_dock(AppID.PHOTOS)
    notes = shell.windows.windows[0]
    shell.windows.maximize_window(notes.id)
    shell.windows.focus_window(shell.windows.windows[1].id)

    assert shell.begin_drag(notes.id, 10, 40) is False
    assert shell.windows.active_window_id == notes.id
    assert shell.drag is None


def test_closing_window_cancels_drag() -> None:
    shell = build_shell()
    shell.click_dock(AppID.NOTES)
    window_id = shell.windows.windows[0].id
    shell.begin_drag(window_id, 0, 0)

    shell.windows.close_window(window_id)

    assert shell.drag is None


def test_new_folder_picks_free_name() -> None:
    shell = build_shell()

    assert shell.new_folder() == "untitled folder"
    assert shell.new_folder() == "untitled folder 2"
    assert shell.files.list_bucket("untitled folder 2") == []


def test_move_to_trash() -> None:
    shell = build_shell()

    assert shell.move_to_trash("Desktop", "Notes.txt") is True

    assert shell.files.get_entry("Desktop", "Notes.txt") is None
    assert shell.files.get_entry("Trash", "Notes.txt") is not None


def test_move_to_trash_refuses_name_already_in_trash() -> None:
    shell = build_shell()
    shell.files.add_file("Documents", FileEntry(name="old_draft.txt", type="file", content="keep me"))

    assert shell.move_to_trash("Documents", "old_draft.txt") is False

    kept = shell.files.get_entry("Documents", "old_draft.txt")
    assert kept is not None
    assert kept.content == "keep me"
    trashed = [e for e in shell.files.list_bucket("Trash") if e.name == "old_draft.txt"]
    assert len(trashed) == 1
    assert trashed[0].size == "8 KB"


def test_desktop_context_menu_actions() -> None:
    shell = build_shell()
    menu = shell.desktop_context_menu()
    assert [o.label for o in menu] == ["New Folder", "", "Empty Trash"]
    assert menu[2].disabled is False

    assert invoke_option(menu, 1) is False
    assert invoke_option(menu, 0) is True
    assert invoke_option(menu, 2) is True

    assert shell.files.get_entry("Desktop", "untitled folder") is not None
    assert shell.desktop_context_menu()[2].disabled is True
    assert invoke_option(shell.desktop_context_menu(), 2) is False
    assert invoke_option(menu, 9) is False


def test_icon_context_menu_move_to_trash() -> None:
    shell = build_shell()
    menu = shell.icon_context_menu("Screenshot.png")

    invoke_option(menu, 2)

    assert shell.files.get_entry("Trash", "Screenshot.png") is not None
    assert shell.icon_context_menu("missing") == []


def test_menu_is_kept_inside_viewport() -> None:
    viewport = Size(1000, 800)

    assert position_menu(50, 60, 3, viewport) == Position(50, 60)
    assert position_menu(950, 790, 3, viewport) == Position(800, 800 - 110)
