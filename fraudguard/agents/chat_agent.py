"""Conversational Assistant — free-text chat about job-search safety."""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable, Optional

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage

from fraudguard.agents.transport import (
    ModelTransport,
    build_openai_transport,
    classify_exception,
)
from fraudguard.config import ClientConfig
from fraudguard.models.chat import ChatMessage, ChatRole
from fraudguard.prompts.assistant_prompt import (
    ASSISTANT_SYSTEM_PROMPT,
    CHAT_ERROR_REPLY,
    DEMO_CHAT_REPLY,
    EMPTY_MESSAGE_REPLY,
)

logger = logging.getLogger(__name__)


def to_wire_turns(history: Iterable[ChatMessage], message: str) -> list[BaseMessage]:
    """Map a tagged chat log plus a new user message to alternating turns.

    Leading model turns are dropped so the first turn is always a user turn,
    and consecutive turns from the same role are merged into one.
    """
    turns: list[tuple[ChatRole, str]] = []
    for item in [*history, ChatMessage(role=ChatRole.USER, text=message)]:
        if not turns and item.role is ChatRole.MODEL:
            continue
        if turns and turns[-1][0] is item.role:
            turns[-1] = (item.role, f"{turns[-1][1]}\n\n{item.text}")
        else:
            turns.append((item.role, item.text))

    return [
        HumanMessage(content=text) if role is ChatRole.USER else AIMessage(content=text)
        for role, text in turns
    ]


class ChatAssistant:
    """Always answers with a string; never raises to its caller."""

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[ModelTransport] = None,
    ) -> None:
        self._config = config
        self._transport = transport

    async def chat(self, message: str, history: Iterable[ChatMessage] = ()) -> str:
        """Return the assistant's reply to *message* given the prior *history*."""
        if not message or not message.strip():
            return EMPTY_MESSAGE_REPLY

        if not self._config.is_configured:
            logger.info("Chat in demo mode — returning canned reply")
            return DEMO_CHAT_REPLY

        messages: list[BaseMessage] = [SystemMessage(content=ASSISTANT_SYSTEM_PROMPT)]
        messages.extend(to_wire_turns(history, message))

        try:
            reply = await asyncio.wait_for(
                self._get_transport().send(messages),
                timeout=self._config.timeout_seconds,
            )
        except Exception as exc:
            error = classify_exception(exc)
            logger.error("Chat failed (%s): %s", error.kind.value, error.detail)
            return CHAT_ERROR_REPLY

        return reply.strip()

    def _get_transport(self) -> ModelTransport:
        if self._transport is None:
            self._transport = build_openai_transport(
                self._config, json_mode=False, temperature=0.7
            )
        return self._transport
