"""Google Gemini chat provider for the desktop assistant.

Uses the google-genai SDK. Rate-limit and quota errors are retried with
exponential backoff (2s, 4s, 8s, ...); every other failure is turned into an
apology string so the assistant window never sees an exception.
"""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Callable
from typing import Any

from llm.base_llm import BaseLLM

logger = logging.getLogger("deskshell.llm.gemini")

_MAX_RETRIES = 5
_BASE_WAIT_SECONDS = 2.0
_RATE_LIMIT_MARKERS = ("429", "rate limit", "quota", "resource exhausted", "too many")

ERROR_REPLY = "Sorry, I encountered an error connecting to the AI service."
EMPTY_REPLY = "I didn't receive a response."


class GeminiProvider(BaseLLM):
    """Gemini adapter with backoff on rate limits."""

    name = "gemini"

    def __init__(
        self,
        model: str = "gemini-2.5-flash",
        api_key: str | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.model = model
        self.api_key = api_key
        self.sleep = sleep
        self._client: Any | None = None

    def _resolve_key(self) -> str | None:
        return self.api_key or os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")

    def _get_client(self) -> Any:
        if self._client is None:
            from google import genai

            self._client = genai.Client(api_key=self._resolve_key())
        return self._client

    def chat(self, messages: list[dict[str, str]], **kwargs: Any) -> str:
        _ = kwargs
        if not self._resolve_key():
            return (
                "Note: API Key not found. Set GEMINI_API_KEY to use the AI features, "
                "or switch the active provider to mock."
            )
        try:
            client = self._get_client()
        except ImportError:
            return (
                "Gemini provider unavailable: `google-genai` package missing. "
                "Install with: pip install google-genai"
            )

        contents = self._convert_messages(messages)
        last_error: Exception | None = None
        for attempt in range(1, _MAX_RETRIES + 1):
            try:
                response = client.models.generate_content(model=self.model, contents=contents)
                return response.text or EMPTY_REPLY
            except Exception as exc:
                last_error = exc
                if not any(marker in str(exc).lower() for marker in _RATE_LIMIT_MARKERS):
                    logger.error("Gemini call failed (non-retryable): %s", exc)
                    return ERROR_REPLY

                wait = _BASE_WAIT_SECONDS * (2 ** (attempt - 1))
                logger.warning(
                    "Gemini rate limit hit (attempt %d/%d), retrying in %.1fs: %s",
                    attempt,
                    _MAX_RETRIES,
                    wait,
                    exc,
                )
                self.sleep(wait)

        logger.error("Gemini provider exhausted %d retries: %s", _MAX_RETRIES, last_error)
        return ERROR_REPLY

    @staticmethod
    def _convert_messages(messages: list[dict[str, str]]) -> list[dict[str, Any]]:
        """Convert OpenAI-style messages to Gemini contents.

        The system instruction is folded into the first user turn.
        """
        contents: list[dict[str, Any]] = []
        system_text = ""
        for msg in messages:
            role = msg.get("role", "user")
            text = msg.get("content", "")
            if role == "system":
                system_text = text
                continue
            contents.append({
                "role": "model" if role == "assistant" else "user",
                "parts": [{"text": text}],
            })

        if system_text:
            first_user = next((c for c in contents if c["role"] == "user"), None)
            if first_user is not None:
                original = first_user["parts"][0]["text"]
                first_user["parts"][0]["text"] = f"[System: {system_text}]\n\n{original}"
        return contents
