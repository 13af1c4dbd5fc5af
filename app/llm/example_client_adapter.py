"""Offline chat client for local development and tests.

Implement BaseChatClient and register the provider in ChatClientFactory to
add a real provider; this one never touches the network.
"""

import json
from typing import ClassVar

from app.llm.client_base import BaseChatClient
from app.llm.models import Completion, UserContent


class ExampleClientAdapter(BaseChatClient):
    """Returns a fixed, well-formed report for any prompt."""

    DEFAULT_REPORT: ClassVar[dict[str, str]] = {
        "patient_name": "Unknown",
        "age_gender": "Unknown",
        "study": "Complete blood count (CBC)",
        "summary_for_patient": (
            "Most of the results look settled. One value is a little off and is "
            "worth a calm conversation with a doctor."
        ),
        "impression": '• "Anemia" means fewer red blood cells than usual.\n'
        '• "Hemoglobin" is the protein that carries oxygen.',
        "findings": "• Hemoglobin slightly below the reference range",
        "recommended_next_steps": (
            "• Book an appointment with a family doctor within 2 weeks.\n"
            "• Ask the doctor whether iron levels should be checked.\n"
            "• Repeat the blood count in 4-6 weeks."
        ),
        "specialty_referral": "Hematologist",
        "triage_urgency": "low",
    }

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
        _ = temperature, max_tokens, system_prompt, user_content, json_mode
        text = json.dumps(self.DEFAULT_REPORT, ensure_ascii=False)
        return Completion(
            assistant_text=text,
            raw_response={
                "id": "example",
                "object": "chat.completion",
                "model": model,
                "choices": [
                    {
                        "index": 0,
                        "message": {"role": "assistant", "content": text},
                        "finish_reason": "stop",
                    }
                ],
            },
        )
