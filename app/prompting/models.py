from dataclasses import dataclass, field
from enum import Enum


class PromptMode(str, Enum):
    TEXT = "text"
    VISION = "vision"


@dataclass(frozen=True)
class Attachment:
    """Original document bytes sent alongside a vision-mode prompt."""

    data: bytes = field(repr=False)
    media_type: str
    filename: str | None = None


@dataclass(frozen=True)
class ExtractionPrompt:
    """Everything the invoker needs to ask the model for one report."""

    mode: PromptMode
    system_prompt: str
    instruction: str
    language: str
    embedded_text: str | None = None
    attachment: Attachment | None = None
