"""LLM infrastructure module."""

from src.infrastructure.llm.client import ChatMessage, LLMClient, OllamaClient
from src.infrastructure.llm.factory import (
    close_shared_llm_client,
    get_shared_llm_client,
)

__all__ = [
    "ChatMessage",
    "LLMClient",
    "OllamaClient",
    "close_shared_llm_client",
    "get_shared_llm_client",
]
