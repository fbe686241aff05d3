"""View Controller — per-session screen state and analysis dispatch.

Screens: home, input, results, about, how-it-works, contact.  The results
screen is gated by a loading / result / error triple:

    submit  → {loading}
    reply   → {result} | {error}
    retry   → back to {input}

Every submission is tagged; only the reply carrying the latest tag may
write state, so a superseded response can never clobber a newer one.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Protocol

from pydantic import BaseModel

from fraudguard.errors import AnalysisError
from fraudguard.models.analysis import AnalysisResult
from fraudguard.models.job_offer import JobOffer

logger = logging.getLogger(__name__)


class View(str, Enum):
    HOME = "home"
    INPUT = "input"
    RESULTS = "results"
    ABOUT = "about"
    HOW_IT_WORKS = "how-it-works"
    CONTACT = "contact"


class InvalidTransitionError(ValueError):
    """Raised for a navigation the state machine does not allow."""


class ViewState(BaseModel):
    """Serializable snapshot of a session's screen state."""

    view: View = View.HOME
    loading: bool = False
    result: Optional[AnalysisResult] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None


class Analyzer(Protocol):
    async def analyze(self, offer: JobOffer) -> AnalysisResult: ...


class ViewController:
    """Holds the current screen plus the loading / result / error triple."""

    def __init__(self) -> None:
        self._view = View.HOME
        self._loading = False
        self._result: Optional[AnalysisResult] = None
        self._error: Optional[str] = None
        self._error_kind: Optional[str] = None
        self._latest_tag = 0

    @property
    def state(self) -> ViewState:
        return ViewState(
            view=self._view,
            loading=self._loading,
            result=self._result,
            error=self._error,
            error_kind=self._error_kind,
        )

    # ── Navigation ────────────────────────────────────────────────────────

    def navigate(self, view: View) -> ViewState:
        """Switch screens; the results screen is only reached by submitting."""
        view = View(view)
        if view is View.RESULTS:
            raise InvalidTransitionError(
                "The results screen is only reachable by submitting an offer."
            )
        self._view = view
        return self.state

    def retry(self) -> ViewState:
        """Leave the results screen and return to the input form."""
        self._latest_tag += 1  # any in-flight reply is now stale
        self._view = View.INPUT
        self._loading = False
        self._result = None
        self._error = None
        self._error_kind = None
        return self.state

    # ── Analysis lifecycle ────────────────────────────────────────────────

    def begin_analysis(self) -> int:
        """Enter {loading} on the results screen and return the request tag."""
        self._latest_tag += 1
        self._view = View.RESULTS
        self._loading = True
        self._result = None
        self._error = None
        self._error_kind = None
        return self._latest_tag

    def complete(self, tag: int, result: AnalysisResult) -> bool:
        """Store *result* if *tag* is still current. Returns False when discarded."""
        if tag != self._latest_tag:
            logger.info("Discarding stale analysis result (tag=%d latest=%d)", tag, self._latest_tag)
            return False
        self._loading = False
        self._result = result
        self._error = None
        self._error_kind = None
        return True

    def fail(self, tag: int, message: str, kind: Optional[str] = None) -> bool:
        """Store an error message if *tag* is still current."""
        if tag != self._latest_tag:
            logger.info("Discarding stale analysis error (tag=%d latest=%d)", tag, self._latest_tag)
            return False
        self._loading = False
        self._result = None
        self._error = message
        self._error_kind = kind
        return True

    async def submit(self, offer: JobOffer, analyzer: Analyzer) -> ViewState:
        """Run one analysis and write its outcome into the view state."""
        tag = self.begin_analysis()
        try:
            result = await analyzer.analyze(offer)
        except AnalysisError as exc:
            self.fail(tag, exc.user_message, exc.kind.value)
        else:
            self.complete(tag, result)
        return self.state
