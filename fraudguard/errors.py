"""Domain exceptions for offer intake and the external analysis call."""

from __future__ import annotations

from enum import Enum


class FailureKind(str, Enum):
    """Classes of analysis failure, each with its own user-facing message."""

    UNCONFIGURED = "unconfigured"
    TIMEOUT = "timeout"
    INVALID_CREDENTIAL = "invalid_credential"
    UNAVAILABLE = "unavailable"
    MALFORMED_REPLY = "malformed_reply"
    CONTENT_REJECTED = "content_rejected"


USER_MESSAGES: dict[FailureKind, str] = {
    FailureKind.UNCONFIGURED: (
        "The analysis service is not configured. Results shown are demo data only."
    ),
    FailureKind.TIMEOUT: (
        "The analysis took too long to complete. Please try again in a moment."
    ),
    FailureKind.INVALID_CREDENTIAL: (
        "The analysis service rejected the configured API key. "
        "Please check the server configuration."
    ),
    FailureKind.UNAVAILABLE: (
        "The analysis model is currently unavailable. Please try again later."
    ),
    FailureKind.MALFORMED_REPLY: (
        "The analysis engine returned an incomplete answer. Please try again."
    ),
    FailureKind.CONTENT_REJECTED: (
        "The analysis engine declined to process this content. "
        "Remove any sensitive personal details and resubmit."
    ),
}


class FraudGuardError(Exception):
    """Base class for all application errors."""


class OfferValidationError(FraudGuardError):
    """Raised when submitted input cannot become a JobOffer."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class AnalysisError(FraudGuardError):
    """A classified failure of the external model call."""

    def __init__(self, kind: FailureKind, detail: str = "") -> None:
        super().__init__(detail or kind.value)
        self.kind = kind
        self.detail = detail

    @property
    def user_message(self) -> str:
        return USER_MESSAGES[self.kind]


class ContentRejectedError(AnalysisError):
    """The remote model refused the request on content/safety grounds."""

    def __init__(self, detail: str = "") -> None:
        super().__init__(FailureKind.CONTENT_REJECTED, detail)
