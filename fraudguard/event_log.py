"""JSON-lines event log of analysis outcomes under logs/."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from fraudguard.config import get_settings
from fraudguard.controllers.view_controller import ViewState
from fraudguard.models.job_offer import JobOffer
from fraudguard.models.response_models import LogEntry

logger = logging.getLogger(__name__)

EVENTS_FILE = "events.jsonl"


def _events_path() -> Path:
    return Path(get_settings().log_dir) / EVENTS_FILE


def log_analysis_event(offer: JobOffer, state: ViewState) -> None:
    """Persist a JSON log entry for one analysis."""
    log_file = _events_path()
    log_file.parent.mkdir(exist_ok=True)

    result = state.result
    entry = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "source_type": offer.source_type.value,
        "title_preview": offer.title[:120],
        "outcome": "result" if result is not None else "error",
        "verdict": result.result.value if result else None,
        "risk_rate": result.risk_rate if result else None,
        "risk_level": result.risk_level.value if result else None,
        "error_kind": state.error_kind,
    }

    with open(log_file, "a", encoding="utf-8") as f:
        f.write(json.dumps(entry, ensure_ascii=False) + "\n")

    logger.info("Event logged: source=%s outcome=%s", entry["source_type"], entry["outcome"])


def read_recent_events(limit: int = 20) -> list[LogEntry]:
    """Return the most recent log entries (newest first)."""
    log_file = _events_path()
    if not log_file.exists():
        return []

    with open(log_file, "r", encoding="utf-8") as f:
        lines = f.readlines()

    entries: list[LogEntry] = []
    for line in reversed(lines[-limit:]):
        try:
            entries.append(LogEntry(**json.loads(line.strip())))
        except ValueError:
            logger.debug("Skipping unreadable log line: %s", line[:80])
            continue
    return entries
