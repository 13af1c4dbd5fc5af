from typing import ClassVar

from app.config.settings import Settings
from app.llm.client_base import BaseChatClient
from app.llm.example_client_adapter import ExampleClientAdapter
from app.llm.invoker import LlmInvoker
from app.llm.openai_client_adapter import OpenAIClientAdapter
from app.llm.unconfigured_client import UnconfiguredChatClient
from app.logging.logger import Log


class ChatClientFactory:
    """Creates the configured chat client and the invoker around it."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    # Local servers accept any key, so a missing one is not a misconfiguration.
    KEYLESS_PROVIDERS: ClassVar[frozenset[str]] = frozenset({"ollama"})

    @classmethod
    def create_invoker(cls, settings: Settings) -> LlmInvoker:
        return LlmInvoker(
            client=cls.create(settings),
            model=settings.openai_model_name,
            max_tokens=settings.openai_max_tokens,
            timeout_seconds=settings.openai_timeout_seconds,
            json_mode=settings.openai_json_mode,
        )

    @classmethod
    def create(cls, settings: Settings) -> BaseChatClient:
        """Create a configured chat client from application settings."""
        provider = settings.llm_provider.lower()
        if provider == "example":
            Log.info("Using offline example chat client")
            return ExampleClientAdapter()

        base_url = cls._resolve_base_url(provider, settings)
        api_key = settings.openai_api_key.strip()
        if not api_key:
            if provider not in cls.KEYLESS_PROVIDERS:
                Log.warning("OPENAI_API_KEY is not set; analysis requests will fail")
                return UnconfiguredChatClient("Missing OPENAI_API_KEY environment variable")
            api_key = provider

        Log.info(f"Using chat provider '{provider}' with model '{settings.openai_model_name}'")
        return OpenAIClientAdapter(
            api_key=api_key,
            timeout_seconds=settings.openai_timeout_seconds,
            base_url=base_url,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        override = (settings.openai_base_url or "").strip()
        if provider == "openai":
            return override or None
        if provider == "openai_compatible":
            if not override:
                raise ValueError(
                    "openai_base_url is required for llm_provider=openai_compatible"
                )
            return override
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return override or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(f"Unknown LLM provider '{provider}'. Choose from: {supported}")
