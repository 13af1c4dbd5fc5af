from app.llm.client_base import BaseChatClient
from app.llm.factory import ChatClientFactory
from app.llm.invoker import LlmInvoker

__all__ = ["BaseChatClient", "ChatClientFactory", "LlmInvoker"]
