"""AnalysisResult model — risk bucketing and reconciliation of model output."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fraudguard.models.analysis import (
    DEMO_RESULT,
    AnalysisResult,
    RiskLevel,
    Verdict,
    bucket_risk_level,
    demo_result,
)


@pytest.mark.parametrize(
    "risk_rate, expected",
    [
        (0, RiskLevel.LOW),
        (30, RiskLevel.LOW),
        (30.5, RiskLevel.MEDIUM),
        (31, RiskLevel.MEDIUM),
        (60, RiskLevel.MEDIUM),
        (61, RiskLevel.HIGH),
        (100, RiskLevel.HIGH),
    ],
)
def test_bucket_risk_level_boundaries(risk_rate, expected):
    assert bucket_risk_level(risk_rate) is expected


def test_risk_level_is_derived_from_risk_rate_not_model_label():
    """An inconsistent label from the model is overridden by the bucketed rate."""
    result = AnalysisResult.model_validate({
        "result": "Fake Job",
        "confidence_score": 80,
        "risk_rate": 75,
        "risk_level": "Low",
        "explanations": [],
        "safety_tips": [],
    })
    assert result.risk_level is RiskLevel.HIGH


def test_verdict_and_numbers_are_reconciled():
    result = AnalysisResult.model_validate({
        "result": "FAKE JOB",
        "confidence_score": "87.6",
        "risk_rate": 45.2,
        "explanations": "Single explanation as a string",
        "safety_tips": None,
    })
    assert result.result is Verdict.FAKE
    assert result.confidence_score == 88
    assert result.risk_rate == 45
    assert result.risk_level is RiskLevel.MEDIUM
    assert result.explanations == ["Single explanation as a string"]
    assert result.safety_tips == []


@pytest.mark.parametrize(
    "risk_rate, stored, expected",
    [
        (30.5, 30, RiskLevel.MEDIUM),
        ("30.5", 30, RiskLevel.MEDIUM),
        (60.5, 60, RiskLevel.HIGH),
        (29.6, 30, RiskLevel.LOW),
    ],
)
def test_fractional_risk_rate_is_bucketed_before_rounding(risk_rate, stored, expected):
    result = AnalysisResult.model_validate({
        "result": "Fake Job",
        "confidence_score": 70,
        "risk_rate": risk_rate,
        "explanations": [],
        "safety_tips": [],
    })
    assert result.risk_rate == stored
    assert result.risk_level is expected


@pytest.mark.parametrize("risk_rate", [float("inf"), float("-inf"), float("nan"), "Infinity"])
def test_non_finite_risk_rate_is_rejected(risk_rate):
    with pytest.raises(ValidationError):
        AnalysisResult.model_validate({
            "result": "Fake Job",
            "confidence_score": 70,
            "risk_rate": risk_rate,
            "explanations": [],
            "safety_tips": [],
        })


def test_out_of_range_risk_rate_is_rejected():
    with pytest.raises(ValidationError):
        AnalysisResult.model_validate({
            "result": "Genuine Job",
            "confidence_score": 50,
            "risk_rate": 140,
            "explanations": [],
            "safety_tips": [],
        })


def test_unknown_verdict_is_rejected():
    with pytest.raises(ValidationError):
        AnalysisResult.model_validate({
            "result": "Maybe",
            "confidence_score": 50,
            "risk_rate": 50,
            "explanations": [],
            "safety_tips": [],
        })


def test_demo_result_payload():
    result = demo_result()
    assert result == DEMO_RESULT
    assert result is not DEMO_RESULT
    assert result.result is Verdict.GENUINE
    assert result.confidence_score == 95
    assert result.risk_rate == 5
    assert result.risk_level is RiskLevel.LOW
    assert len(result.explanations) == 3
    assert len(result.safety_tips) == 2
