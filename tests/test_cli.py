"""CLI and gesture dispatcher tests."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from core.orchestrator import Orchestrator
from ui.cli.cli import app
from ui.cli import commands
from ui.cli.commands import handle_gesture

runner = CliRunner()


def test_fs_changes_persist_across_invocations(tmp_path: Path) -> None:
    result = runner.invoke(app, ["--root", str(tmp_path), "fs", "mkdir", "root", "Archive"])
    assert result.exit_code == 0, result.output

    listing = runner.invoke(app, ["--root", str(tmp_path), "fs", "ls", "root"])
    assert "Archive" in listing.output
    assert (tmp_path / "workspace" / "deskshell.db").exists()


def test_fs_trash_and_empty(tmp_path: Path) -> None:
    root = ["--root", str(tmp_path)]
    runner.invoke(app, [*root, "fs", "trash", "Desktop", "Notes.txt"])
    trash = runner.invoke(app, [*root, "fs", "ls", "Trash"])
    assert "Notes.txt" in trash.output

    runner.invoke(app, [*root, "fs", "empty-trash"])
    assert "Trash: empty" in runner.invoke(app, [*root, "fs", "ls", "Trash"]).output


def test_fs_trash_reports_refusal(tmp_path: Path) -> None:
    root = ["--root", str(tmp_path)]
    runner.invoke(app, [*root, "fs", "touch", "Documents", "old_draft.txt", "--content", "keep me"])

    result = runner.invoke(app, [*root, "fs", "trash", "Documents", "old_draft.txt"])

    assert "Could not move old_draft.txt to Trash" in result.output
    files = Orchestrator(root=tmp_path).build().files
    assert files.get_entry("Documents", "old_draft.txt").content == "keep me"


def test_logging_is_configured_before_store_loads(tmp_path: Path, monkeypatch) -> None:
    calls: list[str] = []
    build = Orchestrator.build

    def record_build(self):
        calls.append("build")
        return build(self)

    monkeypatch.setattr(commands, "_configure_logging", lambda config: calls.append("logging"))
    monkeypatch.setattr(Orchestrator, "build", record_build)

    result = runner.invoke(app, ["--root", str(tmp_path), "fs", "ls", "root"])

    assert result.exit_code == 0, result.output
    assert calls == ["logging", "build"]


def test_fs_touch_creates_then_updates(tmp_path: Path) -> None:
    root = ["--root", str(tmp_path)]
    first = runner.invoke(app, [*root, "fs", "touch", "Documents", "todo.txt", "--content", "a"])
    second = runner.invoke(app, [*root, "fs", "touch", "Documents", "todo.txt", "--size", "1 KB"])

    assert "Created" in first.output
    assert "Updated" in second.output
    files = Orchestrator(root=tmp_path).build().files
    todo = files.get_entry("Documents", "todo.txt")
    assert (todo.content, todo.size) == ("a", "1 KB")


def test_apps_list() -> None:
    result = runner.invoke(app, ["apps", "list"])

    assert result.exit_code == 0
    assert "Gemini Assistant" in result.output


def test_gesture_dispatch(tmp_path: Path) -> None:
    bundle = Orchestrator(root=tmp_path).build()

    handle_gesture(bundle, "open finder")
    handle_gesture(bundle, "open Finder")
    handle_gesture(bundle, "open notes")
    handle_gesture(bundle, "move notes 10 20")
    handle_gesture(bundle, "min finder")

    assert len(bundle.windows.windows) == 2
    notes = bundle.windows.windows[1]
    assert (notes.position.x, notes.position.y) == (10, 20)
    assert bundle.windows.active_window_id is None

    handle_gesture(bundle, "drag notes 5 5")
    assert (notes.position.x, notes.position.y) == (15, 25)

    assert handle_gesture(bundle, "dbl Notes.txt") == ["Opening Notes.txt..."]
    assert handle_gesture(bundle, "close nothing") == ["no window: nothing"]
    assert handle_gesture(bundle, "move notes a b") == ["coordinates must be numbers"]
    assert handle_gesture(bundle, "frobnicate")[0].startswith("unknown gesture")
    assert handle_gesture(bundle, "") == []


def test_session_loop_runs_until_quit(tmp_path: Path) -> None:
    result = runner.invoke(
        app, ["--root", str(tmp_path), "session"], input="open terminal\nps\nquit\n"
    )

    assert result.exit_code == 0, result.output
    assert "terminal-" in result.output
    assert "bye" in result.output


def test_chat_loop_with_mock_provider(tmp_path: Path) -> None:
    result = runner.invoke(app, ["--root", str(tmp_path), "chat"], input="hello\nexit\n")

    assert result.exit_code == 0, result.output
    assert "Hello! Ask me anything" in result.output
