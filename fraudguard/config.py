"""Application configuration loaded from environment variables."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict

# Substrings that mark an API key as a template value rather than a credential
PLACEHOLDER_MARKERS: tuple[str, ...] = (
    "your_",
    "your-",
    "placeholder",
    "changeme",
    "xxx",
)


class Settings(BaseSettings):
    """Central settings – values come from .env or environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # OpenAI
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"

    # Analysis client
    analysis_timeout_seconds: float = 30.0
    demo_delay_seconds: float = 1.5
    fallback_to_demo: bool = False
    max_retries: int = 1

    # Intake
    max_upload_bytes: int = 5 * 1024 * 1024
    min_email_length: int = 20

    # Sessions
    session_ttl_seconds: float = 3600.0
    max_sessions: int = 1000

    # App
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Paths
    log_dir: str = "logs"

    def client_config(self) -> "ClientConfig":
        """Build the explicit configuration handed to the model clients."""
        return ClientConfig(
            api_key=self.openai_api_key,
            model=self.openai_model,
            timeout_seconds=self.analysis_timeout_seconds,
            demo_delay_seconds=self.demo_delay_seconds,
            fallback_to_demo=self.fallback_to_demo,
            max_retries=self.max_retries,
        )


class ClientConfig(BaseModel):
    """Immutable configuration for the analysis and chat clients."""

    model_config = ConfigDict(frozen=True)

    api_key: str = ""
    model: str = "gpt-4o-mini"
    timeout_seconds: float = 30.0
    demo_delay_seconds: float = 1.5
    fallback_to_demo: bool = False
    max_retries: int = 1

    @property
    def is_configured(self) -> bool:
        """True when a usable credential is present (demo mode otherwise)."""
        return not is_placeholder_key(self.api_key)


def is_placeholder_key(key: str | None) -> bool:
    """Return True for an empty key or an obvious template value."""
    if not key or not key.strip():
        return True
    lowered = key.strip().lower()
    return any(marker in lowered for marker in PLACEHOLDER_MARKERS)


@lru_cache
def get_settings() -> Settings:
    """Return cached singleton settings instance."""
    return Settings()


def setup_logging() -> None:
    """Configure root logger based on settings."""
    settings = get_settings()
    log_dir = Path(settings.log_dir)
    log_dir.mkdir(exist_ok=True)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
