"""Analysis Client — sends a job offer to the external model for a fraud verdict.

Flow:
1. No usable credential → return the demo result after a short delay
2. Build system instruction + serialized offer, call the model in JSON mode
3. Race the call against the configured timeout
4. Decode the JSON object from the reply, validate it, derive risk_level
5. On failure → demo result (fallback_to_demo) or a classified AnalysisError
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from langchain_core.messages import HumanMessage, SystemMessage

from fraudguard.agents.transport import (
    ModelTransport,
    build_openai_transport,
    classify_exception,
)
from fraudguard.config import ClientConfig
from fraudguard.models.analysis import (
    REQUIRED_RESULT_FIELDS,
    AnalysisResult,
    demo_result,
)
from fraudguard.models.job_offer import JobOffer
from fraudguard.prompts.analysis_prompt import (
    ANALYSIS_SYSTEM_PROMPT,
    build_analysis_user_message,
)
from fraudguard.tools.structured_decode import decode_json_object

logger = logging.getLogger(__name__)


class AnalysisClient:
    """Single entry point for fraud analysis of a JobOffer."""

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[ModelTransport] = None,
    ) -> None:
        self._config = config
        self._transport = transport

    @property
    def demo_mode(self) -> bool:
        return not self._config.is_configured

    # ── Public API ────────────────────────────────────────────────────────

    async def analyze(self, offer: JobOffer) -> AnalysisResult:
        """Return a fully populated AnalysisResult for *offer*.

        Raises
        ------
        AnalysisError  when the call fails and fallback_to_demo is disabled
        """
        if self.demo_mode:
            logger.warning("Using demo mode: no valid API key configured.")
            await asyncio.sleep(self._config.demo_delay_seconds)
            return demo_result()

        try:
            return await asyncio.wait_for(
                self._analyze_live(offer),
                timeout=self._config.timeout_seconds,
            )
        except Exception as exc:
            error = classify_exception(exc)
            if self._config.fallback_to_demo:
                logger.warning(
                    "Analysis failed (%s), falling back to demo result: %s",
                    error.kind.value, error.detail,
                )
                return demo_result()
            logger.error("Analysis failed (%s): %s", error.kind.value, error.detail)
            if error is exc:
                raise
            raise error from exc

    # ── Helpers ───────────────────────────────────────────────────────────

    async def _analyze_live(self, offer: JobOffer) -> AnalysisResult:
        messages = [
            SystemMessage(content=ANALYSIS_SYSTEM_PROMPT),
            HumanMessage(content=build_analysis_user_message(offer)),
        ]
        raw = await self._get_transport().send(messages)
        result = self._build_result(raw)
        logger.info(
            "Analysis complete — verdict=%s risk_rate=%d level=%s",
            result.result.value, result.risk_rate, result.risk_level.value,
        )
        return result

    @staticmethod
    def _build_result(raw: str) -> AnalysisResult:
        """Convert raw model text into a validated AnalysisResult."""
        data = decode_json_object(raw, REQUIRED_RESULT_FIELDS)
        # risk_level is recomputed from risk_rate by the model validator
        return AnalysisResult.model_validate(data)

    def _get_transport(self) -> ModelTransport:
        if self._transport is None:
            self._transport = build_openai_transport(
                self._config, json_mode=True, temperature=0.1
            )
        return self._transport
