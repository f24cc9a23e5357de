"""Agent executor for evaluation."""

import logging
from typing import Any

from src.config.settings import Settings, get_settings
from src.infrastructure.llm.client import LLMClient, OllamaClient
from src.orchestrator.pipeline import IntentAgent

logger = logging.getLogger(__name__)


class Executor:
    """Runs sample messages through an IntentAgent."""

    def __init__(self, settings: Settings | None = None, llm: LLMClient | None = None) -> None:
        self.settings = settings or get_settings()
        self._llm = llm
        self._owns_llm = llm is None
        self._agent: IntentAgent | None = None

    async def __aenter__(self) -> "Executor":
        if self._llm is None:
            self._llm = OllamaClient(self.settings)
        self._agent = IntentAgent(self.settings, self._llm)
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self._owns_llm and isinstance(self._llm, OllamaClient):
            await self._llm.close()

    async def run_message(self, message: str) -> dict[str, Any]:
        """Run a message and return the agent result."""
        if not self._agent:
            return {"error": "Executor not initialized"}
        return await self._agent.process_message(message)
