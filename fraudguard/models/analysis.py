"""AnalysisResult model, risk bucketing and the fixed demo result."""

from __future__ import annotations

import math
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

LOW_RISK_CEILING = 30
MEDIUM_RISK_CEILING = 60


class Verdict(str, Enum):
    FAKE = "Fake Job"
    GENUINE = "Genuine Job"


class RiskLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


def bucket_risk_level(risk_rate: float) -> RiskLevel:
    """Map a 0–100 risk rate onto Low (≤30), Medium (≤60) or High (>60)."""
    if risk_rate <= LOW_RISK_CEILING:
        return RiskLevel.LOW
    if risk_rate <= MEDIUM_RISK_CEILING:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH


def _parse_number(value: Any) -> float | None:
    """Return *value* as a float when it is numeric or a numeric string."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip().rstrip("%").strip())
        except ValueError:
            return None
    return None


def _coerce_percentage(value: Any) -> Any:
    """Round float / numeric-string percentages to int; leave the rest to pydantic."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    number = _parse_number(value)
    if number is None:
        return value
    if not math.isfinite(number):
        raise ValueError(f"percentage must be a finite number, got {value!r}")
    return int(round(number))


class AnalysisResult(BaseModel):
    """Fraud verdict for a single job offer."""

    result: Verdict = Field(..., description="Fake Job / Genuine Job")
    confidence_score: int = Field(..., ge=0, le=100)
    risk_rate: int = Field(..., ge=0, le=100)
    risk_level: RiskLevel = Field(..., description="Always derived from risk_rate")
    explanations: list[str] = Field(default_factory=list)
    safety_tips: list[str] = Field(default_factory=list)

    @field_validator("result", mode="before")
    @classmethod
    def _reconcile_verdict(cls, v: Any) -> Any:
        if isinstance(v, str):
            lowered = v.strip().lower()
            if "fake" in lowered:
                return Verdict.FAKE
            if "genuine" in lowered:
                return Verdict.GENUINE
        return v

    @field_validator("risk_level", mode="before")
    @classmethod
    def _reconcile_risk_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().capitalize()
        return v

    @field_validator("confidence_score", "risk_rate", mode="before")
    @classmethod
    def _round_percentages(cls, v: Any) -> Any:
        return _coerce_percentage(v)

    @field_validator("explanations", "safety_tips", mode="before")
    @classmethod
    def _listify(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, str):
            return [v] if v.strip() else []
        return v

    @model_validator(mode="before")
    @classmethod
    def _derive_risk_level(cls, data: Any) -> Any:
        # The model's own label is not trusted; the unrounded risk_rate is bucketed
        if isinstance(data, dict) and "risk_rate" in data:
            rate = _parse_number(data["risk_rate"])
            if rate is not None and math.isfinite(rate):
                data = {**data, "risk_level": bucket_risk_level(rate)}
        return data


DEMO_RESULT = AnalysisResult(
    result=Verdict.GENUINE,
    confidence_score=95,
    risk_rate=5,
    risk_level=RiskLevel.LOW,
    explanations=[
        "The recruiter email matches the provided company domain.",
        "The salary range is within industry standards for this role.",
        "Company website is aged and has consistent branding.",
    ],
    safety_tips=[
        "Always apply through official company portals.",
        "Never provide bank details during an initial interview.",
    ],
)

REQUIRED_RESULT_FIELDS: tuple[str, ...] = (
    "result",
    "confidence_score",
    "risk_rate",
    "explanations",
    "safety_tips",
)


def demo_result() -> AnalysisResult:
    """Return a fresh copy of the fixed demo result."""
    return DEMO_RESULT.model_copy(deep=True)
