"""FastAPI dependencies."""

from functools import lru_cache

from fastapi import Depends

from src.config.settings import Settings, get_settings
from src.infrastructure.llm.factory import get_shared_llm_client
from src.orchestrator.pipeline import IntentAgent


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings as a FastAPI dependency."""
    return get_settings()


def get_intent_agent(
    settings: Settings = Depends(get_settings_dependency),  # noqa: B008
) -> IntentAgent:
    """Build an IntentAgent on the shared Ollama client."""
    return IntentAgent(settings, get_shared_llm_client(settings))
