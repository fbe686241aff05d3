"""Shared pytest fixtures for the FraudGuard test suite."""

from __future__ import annotations

import json
import os
import tempfile
from typing import Any
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

# Ensure test environment variables are set BEFORE importing app modules.
# An empty key keeps the service in demo mode so no test reaches the network.
os.environ["OPENAI_API_KEY"] = ""
os.environ["DEMO_DELAY_SECONDS"] = "0"
os.environ.setdefault("OPENAI_MODEL", "gpt-4o-mini")
os.environ.setdefault("ANALYSIS_TIMEOUT_SECONDS", "30")
os.environ.setdefault("FALLBACK_TO_DEMO", "false")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="fraudguard-logs-"))

from fraudguard.config import ClientConfig  # noqa: E402


SAMPLE_OFFER = {
    "title": "Remote Data Entry Assistant",
    "company": "Global Solutions Ltd",
    "salary": "$4,500 / week",
    "location": "Remote",
    "recruiter_email": "hiring.globalsolutions@gmail.com",
    "website": "http://global-solutions-careers.biz",
    "description": (
        "Congratulations! You have been selected. Pay a refundable $150 equipment "
        "deposit and send your bank details today to secure the position. "
        "Interview will be held on Telegram."
    ),
}


@pytest.fixture
def sample_offer() -> dict:
    """Return a suspicious manual-entry payload."""
    return SAMPLE_OFFER.copy()


@pytest.fixture
def live_config() -> ClientConfig:
    """Configuration with a real-looking key so the live path is taken."""
    return ClientConfig(
        api_key="sk-test-live-0123456789",
        model="gpt-4o-mini",
        timeout_seconds=2.0,
        demo_delay_seconds=0,
        fallback_to_demo=False,
    )


@pytest.fixture
def demo_config() -> ClientConfig:
    return ClientConfig(api_key="", demo_delay_seconds=0)


@pytest.fixture
def client() -> TestClient:
    """FastAPI synchronous test client."""
    from fraudguard.main import app

    return TestClient(app)


def _make_transport(reply: str | Exception) -> AsyncMock:
    """Build a mock ModelTransport whose send() returns *reply* (or raises it)."""
    transport = AsyncMock()
    if isinstance(reply, Exception):
        transport.send.side_effect = reply
    else:
        transport.send.return_value = reply
    return transport


def _make_analysis_reply(**overrides: Any) -> str:
    """Helper to build a mock analysis JSON reply string."""
    payload = {
        "result": "Fake Job",
        "confidence_score": 92,
        "risk_rate": 88,
        "risk_level": "High",
        "explanations": [
            "The recruiter asks for an upfront equipment deposit.",
            "A free Gmail address is used for an official corporate role.",
        ],
        "safety_tips": [
            "Never pay to get a job.",
            "Verify the company through its official website.",
        ],
    }
    payload.update(overrides)
    return json.dumps(payload)
