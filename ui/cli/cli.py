"""CLI entrypoint for deskshell."""

from __future__ import annotations

from pathlib import Path

import typer

from ui.cli import commands

app = typer.Typer(help="Simulated desktop shell with a virtual file store")
apps_app = typer.Typer(help="Application catalog commands")
fs_app = typer.Typer(help="Virtual file store commands")
config_app = typer.Typer(help="Configuration commands")


@app.callback()
def main_callback(
    root: Path | None = typer.Option(
        None, "--root", envvar="DESKSHELL_ROOT", help="Runtime root holding config/ and workspace/"
    ),
) -> None:
    """Select the runtime root before any command runs."""
    commands.configure(root)


@app.command("session")
def session_cmd() -> None:
    """Interactive desktop session driven by typed gestures."""
    commands.session()


@app.command("chat")
def chat_cmd() -> None:
    """Chat with the desktop assistant."""
    commands.chat()


@apps_app.command("list")
def apps_list_cmd() -> None:
    """List catalog applications."""
    commands.apps_list()


@fs_app.command("ls")
def fs_ls_cmd(bucket: str = typer.Argument("root", help="Bucket (folder name) to list")) -> None:
    """List the entries of a bucket."""
    commands.fs_ls(bucket=bucket)


@fs_app.command("tree")
def fs_tree_cmd() -> None:
    """Dump the whole store as JSON."""
    commands.fs_tree()


@fs_app.command("mkdir")
def fs_mkdir_cmd(
    bucket: str = typer.Argument(..., help="Bucket receiving the folder"),
    name: str = typer.Argument(..., help="Folder name"),
) -> None:
    """Create a folder."""
    commands.fs_mkdir(bucket=bucket, name=name)


@fs_app.command("touch")
def fs_touch_cmd(
    bucket: str = typer.Argument(..., help="Bucket receiving the file"),
    name: str = typer.Argument(..., help="File name"),
    content: str | None = typer.Option(None, help="Text payload"),
    size: str | None = typer.Option(None, help="Display size"),
) -> None:
    """Create a file, or update the content of an existing one."""
    commands.fs_touch(bucket=bucket, name=name, content=content, size=size)


@fs_app.command("rm")
def fs_rm_cmd(bucket: str, name: str) -> None:
    """Delete an entry (its folder bucket, if any, is kept)."""
    commands.fs_rm(bucket=bucket, name=name)


@fs_app.command("trash")
def fs_trash_cmd(bucket: str, name: str) -> None:
    """Move an entry to the Trash."""
    commands.fs_trash(bucket=bucket, name=name)


@fs_app.command("empty-trash")
def fs_empty_trash_cmd() -> None:
    """Empty the Trash."""
    commands.fs_empty_trash()


@config_app.command("show")
def config_show_cmd() -> None:
    """Show effective configuration."""
    commands.config_show()


app.add_typer(apps_app, name="apps")
app.add_typer(fs_app, name="fs")
app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
