"""Construct model clients from the current settings."""

from __future__ import annotations

from fraudguard.agents.analysis_agent import AnalysisClient
from fraudguard.agents.chat_agent import ChatAssistant
from fraudguard.config import get_settings


def create_analysis_client() -> AnalysisClient:
    return AnalysisClient(get_settings().client_config())


def create_chat_assistant() -> ChatAssistant:
    return ChatAssistant(get_settings().client_config())
