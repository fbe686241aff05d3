"""In-memory session store.

A session bundles one View Controller and one chat log.  Nothing is
written to disk.  Sessions idle for longer than the configured TTL are
dropped, and when the store is full the least recently used session is
evicted to make room for a new one.
"""

from __future__ import annotations

import logging
import time
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Optional

from fraudguard.config import get_settings
from fraudguard.controllers.view_controller import ViewController
from fraudguard.models.chat import ChatLog

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """State owned by a single browser session."""

    id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])
    created_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat(),
    )
    view: ViewController = field(default_factory=ViewController)
    chat: ChatLog = field(default_factory=ChatLog)
    last_seen: float = 0.0


class SessionStore:
    """Keeps live sessions keyed by id, least recently used first."""

    def __init__(
        self,
        ttl_seconds: float = 3600.0,
        max_sessions: int = 1000,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._sessions: OrderedDict[str, Session] = OrderedDict()
        self._ttl = ttl_seconds
        self._max_sessions = max_sessions
        self._clock = clock

    def create(self) -> Session:
        self._purge_expired()
        while len(self._sessions) >= self._max_sessions:
            evicted_id, _ = self._sessions.popitem(last=False)
            logger.info("Session evicted (store full): id=%s", evicted_id)

        session = Session(last_seen=self._clock())
        self._sessions[session.id] = session
        logger.info("Session created: id=%s", session.id)
        return session

    def get(self, session_id: str) -> Optional[Session]:
        """Return a live session by id (refreshing its TTL), or None."""
        session = self._sessions.get(session_id)
        if session is None:
            return None
        now = self._clock()
        if now - session.last_seen > self._ttl:
            del self._sessions[session_id]
            logger.info("Session expired: id=%s", session_id)
            return None
        session.last_seen = now
        self._sessions.move_to_end(session_id)
        return session

    def discard(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None

    def _purge_expired(self) -> None:
        now = self._clock()
        expired = [sid for sid, s in self._sessions.items() if now - s.last_seen > self._ttl]
        for sid in expired:
            del self._sessions[sid]
        if expired:
            logger.info("Purged %d expired session(s)", len(expired))

    def __len__(self) -> int:
        return len(self._sessions)


# Module-level singleton
_store: Optional[SessionStore] = None


def get_session_store() -> SessionStore:
    """Return the singleton SessionStore instance."""
    global _store
    if _store is None:
        settings = get_settings()
        _store = SessionStore(
            ttl_seconds=settings.session_ttl_seconds,
            max_sessions=settings.max_sessions,
        )
    return _store
