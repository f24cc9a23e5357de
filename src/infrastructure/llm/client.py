"""LLM client seam and its Ollama implementation."""

import logging
import time
from typing import Protocol, runtime_checkable

from openai import AsyncOpenAI

from src.config.settings import Settings

logger = logging.getLogger(__name__)

ChatMessage = dict[str, str]


@runtime_checkable
class LLMClient(Protocol):
    """Anything that turns a list of chat messages into reply text."""

    async def invoke(self, messages: list[ChatMessage]) -> str:
        ...


class OllamaClient:
    """
    Chat client for a local Ollama server.

    Talks to Ollama's OpenAI-compatible endpoint through the ``openai`` SDK.
    SDK retries and the client timeout are disabled: a call blocks until the
    model answers or the connection fails.
    """

    def __init__(self, settings: Settings, client: AsyncOpenAI | None = None):
        """
        Initialize the client.

        Args:
            settings: Application settings (base URL, model, sampling)
            client: Optional pre-built AsyncOpenAI instance
        """
        self.model = settings.intent_agent_model
        self.temperature = settings.intent_temperature
        self.max_tokens = settings.intent_max_tokens
        self._client = client or AsyncOpenAI(
            base_url=settings.ollama_openai_url,
            api_key=settings.ollama_api_key,
            max_retries=0,
            timeout=None,
        )

    async def invoke(self, messages: list[ChatMessage]) -> str:
        """Send messages and return the content of the first choice."""
        start_time = time.time()
        logger.debug(f"Invoking model {self.model} with {len(messages)} messages")

        completion = await self._client.chat.completions.create(
            model=self.model,
            messages=messages,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )

        latency_ms = int((time.time() - start_time) * 1000)
        content = completion.choices[0].message.content or ""
        logger.debug(f"Model {self.model} answered in {latency_ms}ms ({len(content)} chars)")
        return content

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.close()
