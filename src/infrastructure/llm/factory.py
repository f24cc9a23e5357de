"""LLM client factory helpers."""

import logging

from src.config.settings import Settings
from src.infrastructure.llm.client import OllamaClient

logger = logging.getLogger(__name__)

_shared_client: OllamaClient | None = None


def get_shared_llm_client(settings: Settings) -> OllamaClient:
    """
    Get or create a shared OllamaClient instance.

    All agents reuse the same client so that the HTTP connection pool is
    shared across requests.

    Returns:
        Shared OllamaClient instance
    """
    global _shared_client
    if _shared_client is None:
        logger.debug(
            f"Creating Ollama client for {settings.ollama_openai_url} "
            f"(model={settings.intent_agent_model})"
        )
        _shared_client = OllamaClient(settings)
    return _shared_client


async def close_shared_llm_client() -> None:
    """
    Close the shared client instance.

    Should be called during application shutdown to properly clean up resources.
    """
    global _shared_client
    if _shared_client is not None:
        await _shared_client.close()
        _shared_client = None
