import httpx
import openai

from app.llm.client_base import BaseChatClient
from app.llm.exceptions import ProviderError, ProviderTimeout
from app.llm.models import Completion, UserContent


class OpenAIClientAdapter(BaseChatClient):
    """Chat client built on the OpenAI-compatible chat completions API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: float,
        base_url: str | None = None,
    ) -> None:
        self._api_key = api_key
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

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
        extra: dict[str, object] = {}
        if json_mode:
            extra["response_format"] = {"type": "json_object"}
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_content},  # type: ignore[misc, list-item]
                ],
                **extra,  # type: ignore[arg-type]
            )
        except (openai.APITimeoutError, httpx.TimeoutException) as exc:
            raise ProviderTimeout(self._redact(f"AI provider timed out: {exc}")) from exc
        except openai.APIStatusError as exc:
            body = self._redact(exc.response.text)
            raise ProviderError(
                f"OpenAI API error {exc.status_code}: {body}",
                status_code=exc.status_code,
                body=body,
            ) from exc
        except (openai.APIConnectionError, httpx.ConnectError) as exc:
            raise ProviderError(self._redact(f"AI provider network error: {exc}")) from exc
        except openai.APIError as exc:
            raise ProviderError(self._redact(f"AI provider API error: {exc}")) from exc

        content = response.choices[0].message.content if response.choices else None
        return Completion(
            assistant_text=content or "",
            raw_response=response.model_dump(mode="json"),
        )

    def _redact(self, text: str) -> str:
        if self._api_key:
            return text.replace(self._api_key, "***")
        return text
