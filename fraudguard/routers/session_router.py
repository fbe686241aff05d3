"""Session router — /api/v1/sessions endpoints driving the View Controller.

Each browser session owns a View Controller and a chat log.  Intake
validation runs here, before the Analysis Client is created, so invalid
input never reaches the network.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, File, HTTPException, UploadFile

from fraudguard.agents.factory import create_analysis_client, create_chat_assistant
from fraudguard.config import get_settings
from fraudguard.controllers.view_controller import InvalidTransitionError
from fraudguard.errors import OfferValidationError
from fraudguard.event_log import log_analysis_event
from fraudguard.models.chat import ChatRole
from fraudguard.models.job_offer import JobOffer
from fraudguard.models.request_models import (
    ChatRequest,
    EmailOfferRequest,
    ManualOfferRequest,
    NavigateRequest,
)
from fraudguard.models.response_models import (
    ChatHistoryResponse,
    ChatResponse,
    SessionResponse,
)
from fraudguard.models.session_store import Session, get_session_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/sessions", tags=["sessions"])


def _get_session(session_id: str) -> Session:
    session = get_session_store().get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Session '{session_id}' not found")
    return session


def _rejected(exc: OfferValidationError) -> HTTPException:
    logger.info("Offer rejected at intake: field=%s reason=%s", exc.field, exc.message)
    return HTTPException(status_code=422, detail=exc.message)


async def _run_analysis(session: Session, offer: JobOffer) -> SessionResponse:
    client = create_analysis_client()
    state = await session.view.submit(offer, client)
    log_analysis_event(offer, state)
    return SessionResponse(session_id=session.id, state=state)


# ── Lifecycle & navigation ────────────────────────────────────────────────────


@router.post("", response_model=SessionResponse, status_code=201)
async def create_session() -> SessionResponse:
    session = get_session_store().create()
    return SessionResponse(session_id=session.id, state=session.view.state)


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(session_id: str) -> SessionResponse:
    """Current screen, loading flag, result and error of a session."""
    session = _get_session(session_id)
    return SessionResponse(session_id=session.id, state=session.view.state)


@router.delete("/{session_id}", status_code=204)
async def end_session(session_id: str) -> None:
    if not get_session_store().discard(session_id):
        raise HTTPException(status_code=404, detail=f"Session '{session_id}' not found")


@router.post("/{session_id}/navigate", response_model=SessionResponse)
async def navigate(session_id: str, req: NavigateRequest) -> SessionResponse:
    session = _get_session(session_id)
    try:
        state = session.view.navigate(req.view)
    except InvalidTransitionError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return SessionResponse(session_id=session.id, state=state)


@router.post("/{session_id}/retry", response_model=SessionResponse)
async def retry(session_id: str) -> SessionResponse:
    """Reset the results screen back to the input form."""
    session = _get_session(session_id)
    return SessionResponse(session_id=session.id, state=session.view.retry())


# ── Analysis intake ───────────────────────────────────────────────────────────


@router.post("/{session_id}/analyze/manual", response_model=SessionResponse)
async def analyze_manual(session_id: str, req: ManualOfferRequest) -> SessionResponse:
    session = _get_session(session_id)
    try:
        offer = JobOffer.from_manual(**req.model_dump())
    except OfferValidationError as exc:
        raise _rejected(exc) from exc
    return await _run_analysis(session, offer)


@router.post("/{session_id}/analyze/email", response_model=SessionResponse)
async def analyze_email(session_id: str, req: EmailOfferRequest) -> SessionResponse:
    session = _get_session(session_id)
    try:
        offer = JobOffer.from_email(req.content, min_length=get_settings().min_email_length)
    except OfferValidationError as exc:
        raise _rejected(exc) from exc
    return await _run_analysis(session, offer)


@router.post("/{session_id}/analyze/file", response_model=SessionResponse)
async def analyze_file(
    session_id: str,
    file: Optional[UploadFile] = File(default=None),
) -> SessionResponse:
    session = _get_session(session_id)
    max_bytes = get_settings().max_upload_bytes

    filename = file.filename if file is not None else None
    # Read at most one byte past the size ceiling
    content = await file.read(max_bytes + 1) if file is not None else None
    try:
        offer = JobOffer.from_file(filename, content, max_bytes=max_bytes)
    except OfferValidationError as exc:
        raise _rejected(exc) from exc
    return await _run_analysis(session, offer)


# ── Chat ──────────────────────────────────────────────────────────────────────


@router.get("/{session_id}/chat", response_model=ChatHistoryResponse)
async def get_chat(session_id: str) -> ChatHistoryResponse:
    session = _get_session(session_id)
    return ChatHistoryResponse(session_id=session.id, messages=list(session.chat.messages()))


@router.post("/{session_id}/chat", response_model=ChatResponse)
async def send_chat(session_id: str, req: ChatRequest) -> ChatResponse:
    """Append the user's message, ask the assistant, append its reply."""
    session = _get_session(session_id)
    history = session.chat.messages()
    session.chat.append(ChatRole.USER, req.message)

    assistant = create_chat_assistant()
    reply = await assistant.chat(req.message, history)
    session.chat.append(ChatRole.MODEL, reply)

    return ChatResponse(reply=reply, messages=list(session.chat.messages()))
