from abc import ABC, abstractmethod

from app.llm.models import Completion, UserContent


class BaseChatClient(ABC):
    """Contract for provider-specific chat completion clients."""

    @abstractmethod
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
        """Send one chat completion request and return the first choice.

        Implementations are blocking and send exactly one request.
        """
