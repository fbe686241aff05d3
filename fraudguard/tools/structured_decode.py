"""Best-effort structured decode of JSON objects embedded in model text.

Model replies arrive either as a pure JSON body, as JSON wrapped in a
markdown fence, or as JSON surrounded by explanatory prose.  Rather than
parsing the whole payload, the first balanced ``{...}`` span that parses
as a JSON object is located and returned.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, Optional

logger = logging.getLogger(__name__)


class StructuredDecodeError(ValueError):
    """No usable JSON object could be recovered from the text."""

    def __init__(self, message: str, missing: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.missing = tuple(missing)


def _balanced_span_end(text: str, start: int) -> Optional[int]:
    """Return the index just past the brace closing ``text[start]``, or None.

    String literals are skipped so braces inside quoted values do not count.
    """
    depth = 0
    in_string = False
    escaped = False

    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue

        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index + 1
    return None


def find_json_object(text: str) -> Optional[dict[str, Any]]:
    """Return the first balanced ``{...}`` span in *text* that parses as an object."""
    if not text:
        return None

    start = text.find("{")
    while start != -1:
        end = _balanced_span_end(text, start)
        if end is not None:
            try:
                candidate = json.loads(text[start:end])
            except json.JSONDecodeError:
                candidate = None
            if isinstance(candidate, dict):
                return candidate
        start = text.find("{", start + 1)
    return None


def decode_json_object(text: str, required_fields: Iterable[str] = ()) -> dict[str, Any]:
    """Locate, parse and validate a JSON object inside free-form text.

    Raises
    ------
    StructuredDecodeError  when no object is found or required fields are absent
    """
    data = find_json_object(text)
    if data is None:
        logger.error("No JSON object found in model output: %s", (text or "")[:200])
        raise StructuredDecodeError("No JSON object found in model output")

    missing = [name for name in required_fields if name not in data]
    if missing:
        logger.error("Model output is missing fields: %s", ", ".join(missing))
        raise StructuredDecodeError(
            f"Model output is missing required fields: {', '.join(missing)}",
            missing=missing,
        )
    return data
