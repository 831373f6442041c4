"""Typer command handlers."""

from __future__ import annotations

import json
import logging
import shlex
from pathlib import Path
from typing import Any

import typer

from core.orchestrator import Orchestrator, RuntimeBundle
from core.policy_runtime import load_effective_config
from filesystem.schemas import FileEntry
from world_model.app_catalog import all_apps, resolve_app_id
from world_model.desktop_state import WindowRecord

_ROOT: Path | None = None

SESSION_HELP = """Gestures:
  open <app> [folder]      click the dock (optionally open Finder at a folder)
  close|min|max|focus <w>  window by id or app name
  move <w> <x> <y>         set window position
  drag <w> <dx> <dy>       drag the title bar by an offset
  ps                       list windows (* marks the active one)
  dock                     dock items (• marks open apps)
  icons                    desktop icons
  dbl <name>               double-click a desktop icon
  newfolder                desktop context menu > New Folder
  quit                     leave the session"""


def configure(root: Path | None) -> None:
    global _ROOT
    _ROOT = root


def _configure_logging(config: dict[str, Any]) -> None:
    level = str(config.get("logging", {}).get("level", "WARNING")).upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _runtime() -> RuntimeBundle:
    orchestrator = Orchestrator(root=_ROOT)
    # Logging must be ready before the store loads and reports on storage.
    _configure_logging(load_effective_config(orchestrator.root))
    return orchestrator.build()


def apps_list() -> None:
    for app in all_apps():
        size = app.default_size
        typer.echo(f"{app.id.value:<11} {app.title:<17} {size.width:g}x{size.height:g}")


def fs_ls(bucket: str) -> None:
    bundle = _runtime()
    entries = bundle.files.list_bucket(bucket)
    if not entries:
        typer.echo(f"{bucket}: empty")
        return
    for entry in entries:
        typer.echo(_format_entry(entry))


def fs_tree() -> None:
    bundle = _runtime()
    typer.echo(json.dumps(json.loads(bundle.files.serialize()), indent=2))


def fs_mkdir(bucket: str, name: str) -> None:
    bundle = _runtime()
    if bundle.files.get_entry(bucket, name) is not None:
        typer.echo(f"{bucket}/{name} already exists")
        return
    bundle.files.create_folder(bucket, name)
    typer.echo(f"Created folder {name} in {bucket}")


def fs_touch(bucket: str, name: str, content: str | None, size: str | None) -> None:
    bundle = _runtime()
    if bundle.files.get_entry(bucket, name) is None:
        bundle.files.add_file(
            bucket, FileEntry(name=name, type="file", date="Today", content=content, size=size)
        )
        typer.echo(f"Created {name} in {bucket}")
        return
    fields: dict[str, str] = {"name": name}
    if content is not None:
        fields["content"] = content
    if size is not None:
        fields["size"] = size
    bundle.files.update_file(bucket, fields)
    typer.echo(f"Updated {name} in {bucket}")


def fs_rm(bucket: str, name: str) -> None:
    bundle = _runtime()
    bundle.files.delete_file(bucket, name)
    typer.echo(f"Removed {name} from {bucket}")


def fs_trash(bucket: str, name: str) -> None:
    bundle = _runtime()
    if bundle.shell.move_to_trash(bucket, name):
        typer.echo(f"Moved {name} to Trash")
    else:
        typer.echo(f"Could not move {name} to Trash")


def fs_empty_trash() -> None:
    bundle = _runtime()
    bundle.files.empty_trash()
    typer.echo("Trash emptied")


def config_show() -> None:
    bundle = _runtime()
    typer.echo(json.dumps(bundle.config, indent=2, default=str))


def chat() -> None:
    """Run interactive assistant loop."""
    bundle = _runtime()
    session = bundle.new_chat()
    typer.echo(f"assistant: {session.messages[0].content}")
    typer.echo("Type 'exit' to quit.")
    while True:
        user_text = typer.prompt("you")
        if user_text.strip().lower() in {"exit", "quit"}:
            typer.echo("bye")
            break
        reply = session.send_message(user_text)
        if reply is not None:
            typer.echo(f"assistant: {reply}")


def session() -> None:
    """Run interactive gesture loop."""
    bundle = _runtime()
    typer.echo("Desktop session. Type 'help' for gestures.")
    while True:
        line = typer.prompt(bundle.shell.active_app_title())
        if line.strip().lower() in {"quit", "exit"}:
            typer.echo("bye")
            break
        for out in handle_gesture(bundle, line):
            typer.echo(out)


def handle_gesture(bundle: RuntimeBundle, line: str) -> list[str]:
    """Apply one typed gesture to the session and return output lines."""
    try:
        args = shlex.split(line)
    except ValueError as exc:
        return [f"parse error: {exc}"]
    if not args:
        return []
    verb, rest = args[0].lower(), args[1:]
    shell = bundle.shell
    windows = bundle.windows

    if verb == "help":
        return [SESSION_HELP]
    if verb == "open" and rest:
        app_id = resolve_app_id(rest[0])
        if app_id is None:
            return [f"unknown app: {rest[0]}"]
        if len(rest) > 1:
            windows.open_app(app_id, {"path": rest[1]})
        else:
            shell.click_dock(app_id)
        return _describe_windows(bundle)
    if verb == "ps":
        return _describe_windows(bundle) or ["no windows"]
    if verb == "dock":
        return [f"{'•' if item.is_open else ' '} {item.title}" for item in shell.dock_items()]
    if verb == "icons":
        return [_format_entry(entry) for entry in shell.desktop_icons()]
    if verb == "dbl" and rest:
        notice = shell.double_click_icon(rest[0])
        return [notice] if notice else _describe_windows(bundle)
    if verb == "newfolder":
        return [f"Created {shell.new_folder()}"]

    if verb in {"close", "min", "max", "focus", "move", "drag"} and rest:
        window = _find_window(bundle, rest[0])
        if window is None:
            return [f"no window: {rest[0]}"]
        try:
            coords = [float(value) for value in rest[1:3]]
        except ValueError:
            return ["coordinates must be numbers"]
        if verb == "close":
            windows.close_window(window.id)
        elif verb == "min":
            windows.minimize_window(window.id)
        elif verb == "max":
            windows.maximize_window(window.id)
        elif verb == "focus":
            windows.focus_window(window.id)
        elif len(coords) != 2:
            return [f"usage: {verb} <window> <x> <y>"]
        elif verb == "move":
            windows.update_window_position(window.id, coords[0], coords[1])
        else:
            grab_x, grab_y = window.position.x + 10, window.position.y + 10
            if shell.begin_drag(window.id, grab_x, grab_y):
                shell.drag_to(grab_x + coords[0], grab_y + coords[1])
            shell.end_drag()
        return _describe_windows(bundle) or ["no windows"]
    return [f"unknown gesture: {line.strip()} (try 'help')"]


def _find_window(bundle: RuntimeBundle, target: str) -> WindowRecord | None:
    window = bundle.windows.get_window(target)
    if window is not None:
        return window
    app_id = resolve_app_id(target)
    if app_id is None:
        return None
    return next((w for w in bundle.windows.windows if w.app_id == app_id.value), None)


def _describe_windows(bundle: RuntimeBundle) -> list[str]:
    lines = []
    for w in sorted(bundle.windows.windows, key=lambda item: item.z_index, reverse=True):
        marker = "*" if w.id == bundle.windows.active_window_id else " "
        flags = "".join(
            flag for flag, on in (("m", w.is_minimized), ("M", w.is_maximized)) if on
        )
        lines.append(
            f"{marker} {w.id:<24} z={w.z_index:<4} "
            f"({w.position.x:g},{w.position.y:g}) {w.size.width:g}x{w.size.height:g} {flags}"
        )
    return lines


def _format_entry(entry: FileEntry) -> str:
    kind = {"folder": "Folder", "app": "Application"}.get(entry.type, "Document")
    return f"{entry.name:<24} {kind:<12} {entry.size or '--':<8} {entry.date or ''}"
