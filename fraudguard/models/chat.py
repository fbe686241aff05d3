"""Chat turn model and the append-only per-session chat log."""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from pydantic import BaseModel, Field

GREETING = (
    "Hi! I am your FraudGuard assistant. How can I help you stay safe "
    "in your job search today?"
)


class ChatRole(str, Enum):
    USER = "user"
    MODEL = "model"


class ChatMessage(BaseModel):
    """A single tagged chat turn."""

    role: ChatRole
    text: str = Field(..., min_length=1)


class ChatLog:
    """Ordered, append-only sequence of chat turns seeded with a greeting."""

    def __init__(self, seed_greeting: bool = True) -> None:
        self._messages: list[ChatMessage] = []
        if seed_greeting:
            self._messages.append(ChatMessage(role=ChatRole.MODEL, text=GREETING))

    def append(self, role: ChatRole, text: str) -> ChatMessage:
        message = ChatMessage(role=role, text=text)
        self._messages.append(message)
        return message

    def messages(self) -> tuple[ChatMessage, ...]:
        """Immutable snapshot of the log."""
        return tuple(self._messages)

    def __iter__(self) -> Iterator[ChatMessage]:
        return iter(tuple(self._messages))

    def __len__(self) -> int:
        return len(self._messages)
