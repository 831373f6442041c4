"""Deterministic offline assistant used when no model backend is configured."""

from __future__ import annotations

import re
from collections import Counter

from llm.base_llm import BaseLLM
from world_model.app_catalog import all_apps

_STOPWORDS = {"a", "an", "the", "is", "are", "to", "of", "and", "i", "you", "me", "my", "it"}


class MockProvider(BaseLLM):
    """Rule-based local responder."""

    name = "mock"

    @staticmethod
    def _tokenize(text: str) -> list[str]:
        return [
            token
            for token in re.split(r"[^a-zA-Z0-9]+", text.lower())
            if token and token not in _STOPWORDS
        ]

    def chat(self, messages: list[dict[str, str]], **kwargs: object) -> str:
        _ = kwargs
        user_messages = [m["content"] for m in messages if m.get("role") == "user"]
        if not user_messages:
            return "No input received."
        prompt = user_messages[-1]
        tokens = self._tokenize(prompt)

        if re.match(r"^\s*(hi|hello|hey)\b", prompt, flags=re.IGNORECASE):
            return "Hello! Ask me anything about your desktop."
        if {"app", "apps", "applications"} & set(tokens):
            titles = ", ".join(app.title for app in all_apps())
            return f"Available apps: {titles}. Click one in the dock to open it."
        if {"system", "computer", "simulated"} & set(tokens):
            return "I'm running inside a simulated desktop environment."
        if not tokens:
            return "Could you rephrase that?"
        top = ", ".join(term for term, _ in Counter(tokens).most_common(5))
        return f"Offline assistant reply. You mentioned: {top}."
