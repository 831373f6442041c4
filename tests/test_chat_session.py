"""Assistant chat provider and session tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from llm.chat_session import GREETING, ChatSession
from llm.llm_factory import build_llm
from llm.providers.gemini_provider import ERROR_REPLY, GeminiProvider
from llm.providers.mock_provider import MockProvider


def test_factory_defaults_to_mock() -> None:
    assert isinstance(build_llm({}), MockProvider)
    llm = build_llm(
        {"models": {"llm": {"active_provider": "gemini", "providers": {"gemini": {"model": "m"}}}}}
    )
    assert isinstance(llm, GeminiProvider)
    assert llm.model == "m"


def test_session_keeps_history_and_ignores_blank_input() -> None:
    session = ChatSession(llm=MockProvider())

    assert session.send_message("   ") is None
    reply = session.send_message("Which apps can I open?")

    assert "Finder" in reply
    assert [m.role for m in session.messages] == ["assistant", "user", "assistant"]
    assert session.messages[0].content == GREETING


def test_session_sends_system_instruction_without_greeting() -> None:
    llm = MagicMock()
    llm.chat.return_value = "ok"
    session = ChatSession(llm=llm, system_instruction="be brief")

    session.send_message("hi")

    sent = llm.chat.call_args.args[0]
    assert sent == [
        {"role": "system", "content": "be brief"},
        {"role": "user", "content": "hi"},
    ]


def test_gemini_without_key_explains(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("API_KEY", raising=False)

    reply = GeminiProvider().chat([{"role": "user", "content": "hello"}])

    assert "API Key not found" in reply


def test_gemini_retries_rate_limits_then_succeeds() -> None:
    waits: list[float] = []
    provider = GeminiProvider(api_key="k", sleep=waits.append)
    client = MagicMock()
    client.models.generate_content.side_effect = [
        RuntimeError("429 Too Many Requests"),
        RuntimeError("quota exceeded"),
        MagicMock(text="fine"),
    ]
    provider._client = client

    assert provider.chat([{"role": "user", "content": "x"}]) == "fine"
    assert waits == [2.0, 4.0]


def test_gemini_non_retryable_error_returns_apology() -> None:
    provider = GeminiProvider(api_key="k", sleep=lambda _: None)
    client = MagicMock()
    client.models.generate_content.side_effect = RuntimeError("bad request")
    provider._client = client

    assert provider.chat([{"role": "user", "content": "x"}]) == ERROR_REPLY
    assert client.models.generate_content.call_count == 1


def test_convert_messages_folds_system_into_first_user_turn() -> None:
    contents = GeminiProvider._convert_messages([
        {"role": "system", "content": "S"},
        {"role": "user", "content": "U"},
        {"role": "assistant", "content": "A"},
    ])

    assert contents[0] == {"role": "user", "parts": [{"text": "[System: S]\n\nU"}]}
    assert contents[1]["role"] == "model"
