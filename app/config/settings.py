from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    http_host: str = "0.0.0.0"
    http_port: int = 8000
    max_upload_bytes: int = 80 * 1024 * 1024

    pdf_engine: str = "pdfplumber"
    min_usable_text_chars: int = 50

    prompt_text_budget_chars: int = 24_000
    default_language: str = "en"

    llm_provider: str = "openai"
    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o-mini"
    openai_base_url: str | None = None
    openai_timeout_seconds: float = 300.0
    openai_max_tokens: int = 1000
    openai_json_mode: bool = False
