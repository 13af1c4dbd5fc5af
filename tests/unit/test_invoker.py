import asyncio
import base64

import pytest

from app.llm.exceptions import ProviderTimeout
from app.llm.invoker import LlmInvoker, build_user_content
from app.prompting.models import Attachment, ExtractionPrompt, PromptMode
from tests.doubles import RecordingChatClient


def _text_prompt() -> ExtractionPrompt:
    return ExtractionPrompt(
        mode=PromptMode.TEXT,
        system_prompt="system",
        instruction="instruction with report text",
        language="en",
        embedded_text="report text",
    )


def _vision_prompt(media_type: str, data: bytes) -> ExtractionPrompt:
    return ExtractionPrompt(
        mode=PromptMode.VISION,
        system_prompt="system",
        instruction="read the attachment",
        language="en",
        attachment=Attachment(data=data, media_type=media_type, filename=None),
    )


class TestBuildUserContent:
    def test_text_mode_is_plain_string(self) -> None:
        assert build_user_content(_text_prompt()) == "instruction with report text"

    def test_image_goes_as_data_url(self, png_bytes: bytes) -> None:
        content = build_user_content(_vision_prompt("image/png", png_bytes))
        assert isinstance(content, list)
        assert content[0] == {"type": "text", "text": "read the attachment"}
        url = content[1]["image_url"]["url"]
        assert url == "data:image/png;base64," + base64.b64encode(png_bytes).decode()

    def test_pdf_goes_as_file_part(self) -> None:
        content = build_user_content(_vision_prompt("application/pdf", b"%PDF-1.4"))
        assert isinstance(content, list)
        part = content[1]
        assert part["type"] == "file"
        assert part["file"]["filename"] == "report.pdf"
        assert part["file"]["file_data"].startswith("data:application/pdf;base64,")


class TestLlmInvoker:
    def test_sends_one_request_at_zero_temperature(self) -> None:
        client = RecordingChatClient(assistant_text='{"study": "CBC"}')
        invoker = LlmInvoker(client=client, model="gpt-4o-mini", max_tokens=777)
        completion = asyncio.run(invoker.invoke(_text_prompt()))
        assert completion.assistant_text == '{"study": "CBC"}'
        assert len(client.calls) == 1
        call = client.calls[0]
        assert call["temperature"] == 0.0
        assert call["max_tokens"] == 777
        assert call["model"] == "gpt-4o-mini"
        assert call["system_prompt"] == "system"

    def test_times_out_near_the_deadline(self) -> None:
        client = RecordingChatClient(delay_seconds=0.5)
        invoker = LlmInvoker(client=client, model="m", timeout_seconds=0.05)

        async def scenario() -> float:
            started = asyncio.get_running_loop().time()
            with pytest.raises(ProviderTimeout):
                await invoker.invoke(_text_prompt())
            return asyncio.get_running_loop().time() - started

        assert asyncio.run(scenario()) < 0.4
