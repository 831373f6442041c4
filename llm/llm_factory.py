"""Chat provider factory."""

from __future__ import annotations

from typing import Any

from llm.base_llm import BaseLLM
from llm.providers.gemini_provider import GeminiProvider
from llm.providers.mock_provider import MockProvider


def build_llm(config: dict[str, Any]) -> BaseLLM:
    """Build a provider from configuration, defaulting safely to mock."""
    models_cfg = config.get("models", {}).get("llm", {})
    active = models_cfg.get("active_provider", "mock")
    active_cfg = models_cfg.get("providers", {}).get(active, {})
    provider_type = active_cfg.get("type", active)

    if provider_type == "gemini":
        return GeminiProvider(
            model=active_cfg.get("model", "gemini-2.5-flash"),
            api_key=active_cfg.get("api_key"),
        )
    return MockProvider()
