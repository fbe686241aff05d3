"""Analysis router — stateless /api/v1 endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from fraudguard.agents.factory import create_analysis_client
from fraudguard.config import get_settings
from fraudguard.controllers.view_controller import View, ViewState
from fraudguard.errors import AnalysisError, FailureKind, OfferValidationError
from fraudguard.event_log import log_analysis_event, read_recent_events
from fraudguard.models.analysis import AnalysisResult
from fraudguard.models.job_offer import JobOffer
from fraudguard.models.response_models import HealthResponse, LogEntry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["analysis"])

FAILURE_STATUS_CODES: dict[FailureKind, int] = {
    FailureKind.TIMEOUT: 504,
    FailureKind.INVALID_CREDENTIAL: 502,
    FailureKind.UNAVAILABLE: 502,
    FailureKind.MALFORMED_REPLY: 502,
    FailureKind.CONTENT_REJECTED: 422,
    FailureKind.UNCONFIGURED: 503,
}


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Simple liveness probe."""
    config = get_settings().client_config()
    return HealthResponse(demo_mode=not config.is_configured)


@router.post("/analyze", response_model=AnalysisResult)
async def analyze_offer(offer: JobOffer) -> AnalysisResult:
    """Analyse an already-normalized JobOffer without touching any session."""
    logger.info("Stateless analysis request: source=%s", offer.source_type.value)
    try:
        offer.check_submittable(min_email_length=get_settings().min_email_length)
    except OfferValidationError as exc:
        logger.info("Offer rejected at intake: field=%s reason=%s", exc.field, exc.message)
        raise HTTPException(status_code=422, detail=exc.message) from exc

    client = create_analysis_client()
    try:
        result = await client.analyze(offer)
    except AnalysisError as exc:
        log_analysis_event(
            offer,
            ViewState(view=View.RESULTS, error=exc.user_message, error_kind=exc.kind.value),
        )
        raise HTTPException(
            status_code=FAILURE_STATUS_CODES.get(exc.kind, 502),
            detail=exc.user_message,
        ) from exc

    log_analysis_event(offer, ViewState(view=View.RESULTS, result=result))
    return result


@router.get("/logs", response_model=list[LogEntry])
async def get_logs(limit: int = 20) -> list[LogEntry]:
    """Return the most recent analysis events (newest first)."""
    return read_recent_events(limit)
