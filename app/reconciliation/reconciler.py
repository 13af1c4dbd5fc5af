"""Recovers the report object from free-form model output.

Fallback order: strict parse of the whole text, then the first balanced
``{...}`` span found by a bounded scan, then the raw text untouched.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

from app.logging.logger import Log


class ReconcileMethod(str, Enum):
    STRICT = "strict"
    EMBEDDED = "embedded"
    FAILED = "failed"


@dataclass(frozen=True)
class Reconciliation:
    fields: dict[str, Any] | None
    raw_text: str
    method: ReconcileMethod

    @property
    def succeeded(self) -> bool:
        return self.fields is not None


def find_object_span(text: str, max_scan_chars: int) -> str | None:
    """Return the first balanced ``{...}`` span, or None.

    Braces inside JSON strings are ignored. The scan gives up after
    ``max_scan_chars`` characters from the opening brace.
    """
    start = text.find("{")
    if start == -1:
        return None
    depth = 0
    in_string = False
    escaped = False
    stop = min(len(text), start + max_scan_chars)
    for index in range(start, stop):
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
                return text[start : index + 1]
    return None


class ResponseReconciler:
    """Parses assistant text into report fields without ever raising."""

    def __init__(self, max_scan_chars: int = 200_000) -> None:
        self._max_scan_chars = max_scan_chars

    def reconcile(self, assistant_text: str) -> Reconciliation:
        parsed = self._load_object(assistant_text)
        if parsed is not None:
            return Reconciliation(parsed, assistant_text, ReconcileMethod.STRICT)

        span = find_object_span(assistant_text, self._max_scan_chars)
        if span is not None:
            parsed = self._load_object(span)
            if parsed is not None:
                Log.info("Recovered JSON object embedded in assistant text")
                return Reconciliation(parsed, assistant_text, ReconcileMethod.EMBEDDED)

        Log.warning("Failed to parse AI JSON. Returning raw assistant text instead.")
        return Reconciliation(None, assistant_text, ReconcileMethod.FAILED)

    @staticmethod
    def _load_object(text: str) -> dict[str, Any] | None:
        try:
            parsed = json.loads(text)
        except (ValueError, RecursionError):
            return None
        return parsed if isinstance(parsed, dict) else None
