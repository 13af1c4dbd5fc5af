from dataclasses import dataclass, field
from typing import Any

# OpenAI-style user message content: a plain string or a list of parts.
UserContent = str | list[dict[str, Any]]


@dataclass(frozen=True)
class Completion:
    """Assistant text plus the full provider response kept for audit."""

    assistant_text: str
    raw_response: dict[str, Any] = field(default_factory=dict)
