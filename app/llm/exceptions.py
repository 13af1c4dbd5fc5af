from app.processor.exceptions import ConfigurationError, ReportPipelineError


class ProviderError(ReportPipelineError):
    """Raised when the LLM provider call does not produce a completion.

    ``status_code`` and ``body`` carry the upstream HTTP response verbatim when
    there was one.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ProviderTimeout(ProviderError):
    """Raised when the provider call exceeds the configured deadline."""


class ProviderAuthError(ConfigurationError):
    """Raised when no credential is configured for the provider."""
