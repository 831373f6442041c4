"""Base interface for chat providers backing the assistant app."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class BaseLLM(ABC):
    """Abstract chat provider."""

    name: str = "base"

    @abstractmethod
    def chat(self, messages: list[dict[str, str]], **kwargs: Any) -> str:
        """Return the reply text for an OpenAI-style message list."""
