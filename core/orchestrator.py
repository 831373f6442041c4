"""Top-level runtime wiring for one desktop session."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from core.event_bus import EventBus
from core.policy_runtime import ensure_runtime_dirs, load_effective_config
from filesystem.file_store import DEFAULT_STORAGE_KEY, VirtualFileStore
from filesystem.stores.sql_store import SQLStore
from llm.base_llm import BaseLLM
from llm.chat_session import ChatSession
from llm.llm_factory import build_llm
from os_controller.window_manager import WindowSessionManager
from shell.session_shell import SessionShell
from world_model.desktop_state import DesktopLayout


@dataclass
class RuntimeBundle:
    """Holds initialized runtime components."""

    config: dict[str, Any]
    event_bus: EventBus
    storage: SQLStore
    files: VirtualFileStore
    windows: WindowSessionManager
    shell: SessionShell
    llm: BaseLLM

    def new_chat(self) -> ChatSession:
        return ChatSession(llm=self.llm)


class Orchestrator:
    """Creates and wires runtime components for CLI use."""

    def __init__(self, root: Path | None = None) -> None:
        default_root = Path(__file__).resolve().parents[1]
        self.root = (root or default_root).resolve()

    def build(self) -> RuntimeBundle:
        config = load_effective_config(self.root)
        paths = ensure_runtime_dirs(self.root, config)

        storage = SQLStore(paths["storage_path"])
        storage.create_all()

        event_bus = EventBus()
        files = VirtualFileStore(
            storage=storage,
            storage_key=config.get("storage", {}).get("key", DEFAULT_STORAGE_KEY),
            event_bus=event_bus,
        )
        windows = WindowSessionManager(
            layout=DesktopLayout.from_config(config.get("desktop", {})),
            event_bus=event_bus,
        )
        shell = SessionShell(windows=windows, files=files, event_bus=event_bus)

        return RuntimeBundle(
            config=config,
            event_bus=event_bus,
            storage=storage,
            files=files,
            windows=windows,
            shell=shell,
            llm=build_llm(config=config),
        )
