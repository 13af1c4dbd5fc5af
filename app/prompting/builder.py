"""Builds the extraction prompt sent to the model."""

import json
from pathlib import Path
from typing import ClassVar

from app.logging.logger import Log
from app.processor.exceptions import ConfigurationError, ExtractionError
from app.processor.models import REPORT_FIELD_KEYS, ExtractedText
from app.prompting.models import Attachment, ExtractionPrompt, PromptMode
from app.prompting.prompt_loader import load_output_schema, load_prompt_template

SYSTEM_PROMPT = (
    "You are a strict JSON-only extractor. Return valid JSON only. "
    "Never add code fences or explanations."
)

_TEXT_SOURCE = "Report text:\n```\n{report_text}\n```\n"
_VISION_SOURCE = (
    "No text layer could be read from this report. The original document is "
    "attached; read it directly and fill the fields from what you see.\n"
)


def normalize_language(preference: str | None, default: str = "en") -> str:
    """Map a free-form language preference onto a supported language code."""
    if not preference:
        return default
    value = preference.strip().lower()
    if value.startswith("ar") or value == "العربية":
        return "ar"
    return "en"


class PromptBuilder:
    """Fixed template + language rule + either report text or the original file."""

    LANGUAGE_RULES: ClassVar[dict[str, str]] = {
        "en": "LANGUAGE: Write every field value in clear, simple English.",
        "ar": (
            "LANGUAGE: Write every field value in simple Modern Standard Arabic. "
            "Keep the JSON keys in English, and keep triage_urgency as one of the "
            "English values listed below."
        ),
    }

    def __init__(
        self,
        *,
        text_budget_chars: int = 24_000,
        prompt_template_path: Path | None = None,
        output_schema_path: Path | None = None,
    ) -> None:
        if text_budget_chars <= 0:
            raise ConfigurationError("prompt_text_budget_chars must be positive")
        self._budget = text_budget_chars
        self._template = load_prompt_template(prompt_template_path)
        self._output_schema = load_output_schema(output_schema_path)
        self._check_schema()

    @property
    def text_budget_chars(self) -> int:
        return self._budget

    def build(
        self,
        extracted: ExtractedText,
        language: str,
        attachment: Attachment | None = None,
    ) -> ExtractionPrompt:
        language = normalize_language(language)
        header = self._template.format(
            language_rule=self.LANGUAGE_RULES[language],
            output_schema=self._output_schema,
        ).rstrip()

        if extracted.usable:
            embedded = extracted.text[: self._budget]
            if len(extracted.text) > self._budget:
                Log.info(
                    f"Truncated report text from {len(extracted.text)} "
                    f"to {self._budget} chars"
                )
            return ExtractionPrompt(
                mode=PromptMode.TEXT,
                system_prompt=SYSTEM_PROMPT,
                instruction=f"{header}\n\n{_TEXT_SOURCE.format(report_text=embedded)}",
                language=language,
                embedded_text=embedded,
            )

        if attachment is None:
            raise ExtractionError("No usable text and no document to attach")
        return ExtractionPrompt(
            mode=PromptMode.VISION,
            system_prompt=SYSTEM_PROMPT,
            instruction=f"{header}\n\n{_VISION_SOURCE}",
            language=language,
            attachment=attachment,
        )

    def _check_schema(self) -> None:
        try:
            keys = tuple(json.loads(self._output_schema))
        except (json.JSONDecodeError, TypeError) as exc:
            raise ConfigurationError(f"Output schema is not valid JSON: {exc}") from exc
        if keys != REPORT_FIELD_KEYS:
            raise ConfigurationError(
                f"Output schema keys {list(keys)} do not match {list(REPORT_FIELD_KEYS)}"
            )
