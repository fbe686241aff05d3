"""Response models for the FraudGuard API."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from fraudguard.controllers.view_controller import ViewState
from fraudguard.models.chat import ChatMessage


class HealthResponse(BaseModel):
    """Health-check response."""

    status: str = "ok"
    version: str = "1.0.0"
    demo_mode: bool = False


class SessionResponse(BaseModel):
    """Session id plus its current screen state."""

    session_id: str
    state: ViewState


class ChatHistoryResponse(BaseModel):
    session_id: str
    messages: list[ChatMessage] = Field(default_factory=list)


class ChatResponse(BaseModel):
    """Reply returned by POST /api/v1/sessions/{id}/chat."""

    reply: str
    messages: list[ChatMessage] = Field(default_factory=list)


class LogEntry(BaseModel):
    """Single analysis event for the /api/v1/logs endpoint."""

    timestamp: str = Field(default_factory=lambda: datetime.utcnow().isoformat())
    source_type: str = ""
    title_preview: str = ""
    outcome: str = ""
    verdict: Optional[str] = None
    risk_rate: Optional[int] = None
    risk_level: Optional[str] = None
    error_kind: Optional[str] = None
