import asyncio
import base64
import functools

from app.llm.client_base import BaseChatClient
from app.llm.deadline import DeadlineExceeded, race_deadline
from app.llm.exceptions import ProviderTimeout
from app.llm.models import Completion, UserContent
from app.logging.logger import Log
from app.processor.media_types import is_pdf
from app.prompting.models import Attachment, ExtractionPrompt


def build_user_content(prompt: ExtractionPrompt) -> UserContent:
    """Text-mode sends a plain string; vision-mode adds the original file."""
    if prompt.attachment is None:
        return prompt.instruction
    return [
        {"type": "text", "text": prompt.instruction},
        _attachment_part(prompt.attachment),
    ]


def _attachment_part(attachment: Attachment) -> dict[str, object]:
    encoded = base64.b64encode(attachment.data).decode("ascii")
    data_url = f"data:{attachment.media_type};base64,{encoded}"
    if is_pdf(attachment.media_type):
        return {
            "type": "file",
            "file": {
                "filename": attachment.filename or "report.pdf",
                "file_data": data_url,
            },
        }
    return {"type": "image_url", "image_url": {"url": data_url}}


class LlmInvoker:
    """Sends one extraction prompt to the model under a hard deadline."""

    TEMPERATURE = 0.0

    def __init__(
        self,
        *,
        client: BaseChatClient,
        model: str,
        max_tokens: int = 1000,
        timeout_seconds: float = 300.0,
        json_mode: bool = False,
    ) -> None:
        self._client = client
        self._model = model
        self._max_tokens = max_tokens
        self._timeout_seconds = timeout_seconds
        self._json_mode = json_mode

    async def invoke(self, prompt: ExtractionPrompt) -> Completion:
        call = functools.partial(
            self._client.create_chat_completion,
            model=self._model,
            temperature=self.TEMPERATURE,
            max_tokens=self._max_tokens,
            system_prompt=prompt.system_prompt,
            user_content=build_user_content(prompt),
            json_mode=self._json_mode,
        )
        Log.debug(f"Extraction prompt ({prompt.mode.value}-mode):\n{prompt.instruction}")
        try:
            with Log.timed(f"{prompt.mode.value}-mode completion"):
                completion = await race_deadline(
                    asyncio.to_thread(call), self._timeout_seconds
                )
        except DeadlineExceeded as exc:
            raise ProviderTimeout(f"AI provider did not answer in time: {exc}") from exc
        Log.debug(f"AI raw response:\n{completion.assistant_text}")
        return completion
