from app.llm.client_base import BaseChatClient
from app.llm.exceptions import ProviderAuthError
from app.llm.models import Completion, UserContent


class UnconfiguredChatClient(BaseChatClient):
    """Placeholder used when the deployment has no provider credential.

    The service still starts; each request fails with a configuration error
    instead of a provider error.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason

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
        raise ProviderAuthError(self.reason)
