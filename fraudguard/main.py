"""FastAPI application entry point for FraudGuard."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fraudguard.config import get_settings, setup_logging
from fraudguard.routers.analysis_router import router as analysis_router
from fraudguard.routers.session_router import router as session_router

# Initialise logging early
setup_logging()
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Application factory."""
    settings = get_settings()

    application = FastAPI(
        title="FraudGuard",
        description=(
            "Job-offer fraud checker: collects an offer from a form, a pasted "
            "e-mail or an uploaded file, asks a language model for a fraud "
            "verdict and offers a job-safety chat assistant."
        ),
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Origins allowed to call the API from a browser (CORS_ORIGINS)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(analysis_router)
    application.include_router(session_router)

    @application.on_event("startup")
    async def _startup() -> None:
        config = settings.client_config()
        logger.info(
            "FraudGuard starting — model=%s timeout=%.0fs demo_mode=%s fallback_to_demo=%s cors_origins=%s",
            config.model,
            config.timeout_seconds,
            not config.is_configured,
            config.fallback_to_demo,
            settings.cors_origins,
        )

    return application


app = create_app()

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "fraudguard.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=True,
    )
