"""Pluggable transport to the external chat model.

The analysis and chat clients only depend on ``ModelTransport``; the
default implementation wraps a LangChain chat model (OpenAI).  Failures
raised by the SDK are mapped onto ``FailureKind`` here so that timeout,
credential and availability errors are classified in one place.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol, Sequence

import httpx
import openai
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage
from langchain_openai import ChatOpenAI
from pydantic import ValidationError

from fraudguard.config import ClientConfig
from fraudguard.errors import AnalysisError, ContentRejectedError, FailureKind
from fraudguard.tools.structured_decode import StructuredDecodeError

logger = logging.getLogger(__name__)

CONTENT_REJECTION_CODES = frozenset({"content_filter", "content_policy_violation"})


class ModelTransport(Protocol):
    """Anything that can send a message list and return the reply text."""

    async def send(self, messages: Sequence[BaseMessage]) -> str: ...


class LangChainTransport:
    """Transport backed by a LangChain chat model."""

    def __init__(self, llm: BaseChatModel) -> None:
        self._llm = llm

    async def send(self, messages: Sequence[BaseMessage]) -> str:
        raw = await self._llm.ainvoke(list(messages))

        metadata = getattr(raw, "response_metadata", None) or {}
        if isinstance(metadata, dict) and metadata.get("finish_reason") == "content_filter":
            raise ContentRejectedError("finish_reason=content_filter")

        content = raw.content
        if isinstance(content, list):
            content = "".join(
                part.get("text", "") if isinstance(part, dict) else str(part)
                for part in content
            )
        if not content or not str(content).strip():
            raise AnalysisError(FailureKind.MALFORMED_REPLY, "Empty response from AI engine")
        return str(content)


def build_openai_transport(
    config: ClientConfig, *, json_mode: bool, temperature: float
) -> LangChainTransport:
    """Create the default OpenAI-backed transport for *config*."""
    model_kwargs = {"response_format": {"type": "json_object"}} if json_mode else {}
    llm = ChatOpenAI(
        model=config.model,
        api_key=config.api_key,
        temperature=temperature,
        timeout=config.timeout_seconds,
        max_retries=config.max_retries,
        model_kwargs=model_kwargs,
    )
    return LangChainTransport(llm)


def classify_exception(exc: BaseException) -> AnalysisError:
    """Map any failure of the model call onto a classified AnalysisError."""
    if isinstance(exc, AnalysisError):
        return exc

    if isinstance(exc, (asyncio.TimeoutError, openai.APITimeoutError, httpx.TimeoutException)):
        return AnalysisError(FailureKind.TIMEOUT, str(exc) or "timed out")

    if isinstance(exc, (openai.AuthenticationError, openai.PermissionDeniedError)):
        return AnalysisError(FailureKind.INVALID_CREDENTIAL, str(exc))

    if isinstance(exc, openai.BadRequestError):
        code = getattr(exc, "code", None)
        if code in CONTENT_REJECTION_CODES or "content management policy" in str(exc).lower():
            return ContentRejectedError(str(exc))
        return AnalysisError(FailureKind.UNAVAILABLE, str(exc))

    if isinstance(exc, (StructuredDecodeError, ValidationError)):
        return AnalysisError(FailureKind.MALFORMED_REPLY, str(exc))

    if isinstance(exc, (openai.APIError, httpx.HTTPError)):
        return AnalysisError(FailureKind.UNAVAILABLE, str(exc))

    logger.warning("Unclassified model failure (%s): %s", type(exc).__name__, exc)
    return AnalysisError(FailureKind.UNAVAILABLE, str(exc))
