"""Test doubles shared across unit tests."""

import json
import time

from app.llm.client_base import BaseChatClient
from app.llm.models import Completion, UserContent
from app.processor.models import REPORT_FIELD_KEYS


def valid_report(**overrides: str) -> dict[str, str]:
    report = {key: f"{key} value" for key in REPORT_FIELD_KEYS}
    report["triage_urgency"] = "medium"
    report.update(overrides)
    return report


class RecordingChatClient(BaseChatClient):
    """Returns a canned answer and records every call it receives."""

    def __init__(self, assistant_text: str | None = None, delay_seconds: float = 0.0) -> None:
        self.assistant_text = (
            assistant_text if assistant_text is not None else json.dumps(valid_report())
        )
        self.delay_seconds = delay_seconds
        self.calls: list[dict[str, object]] = []

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_content: UserContent,
        json_mode: bool = False,
    ) -> Completion:
        self.calls.append(
            {
                "model": model,
                "temperature": temperature,
                "max_tokens": max_tokens,
                "system_prompt": system_prompt,
                "user_content": user_content,
                "json_mode": json_mode,
            }
        )
        if self.delay_seconds:
            time.sleep(self.delay_seconds)
        return Completion(
            assistant_text=self.assistant_text,
            raw_response={"id": "chatcmpl-test", "choices": []},
        )
