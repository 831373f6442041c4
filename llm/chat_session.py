"""Conversation state for the assistant window."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field

from llm.base_llm import BaseLLM

SYSTEM_INSTRUCTION = (
    "You are an intelligent AI assistant integrated into a simulated desktop "
    "operating system. Keep your responses concise, helpful, and friendly. "
    "If asked about the system, you can mention you are running in a simulated "
    "environment. Format your responses with Markdown if needed."
)
GREETING = "Hello! I am your intelligent assistant. How can I help you navigate your desktop today?"


class ChatMessage(BaseModel):
    """Single turn shown in the assistant window."""

    role: str
    content: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))


class ChatSession:
    """Keeps history and forwards each user turn to the provider."""

    def __init__(self, llm: BaseLLM, system_instruction: str = SYSTEM_INSTRUCTION) -> None:
        self.llm = llm
        self.system_instruction = system_instruction
        self.messages: list[ChatMessage] = [ChatMessage(role="assistant", content=GREETING)]

    def send_message(self, text: str) -> str | None:
        """Send one user message; blank input is ignored."""
        text = text.strip()
        if not text:
            return None
        self.messages.append(ChatMessage(role="user", content=text))
        reply = self.llm.chat(self._payload())
        self.messages.append(ChatMessage(role="assistant", content=reply))
        return reply

    def _payload(self) -> list[dict[str, str]]:
        # The greeting is local UI text, not part of the model conversation.
        history = [{"role": m.role, "content": m.content} for m in self.messages[1:]]
        return [{"role": "system", "content": self.system_instruction}, *history]
