"""Response generator service."""

import logging
from typing import List

from src.config.prompts import build_response_prompt
from src.infrastructure.llm.client import ChatMessage, LLMClient

logger = logging.getLogger(__name__)


class ResponseGenerator:
    """Produces the user-facing reply for a classified message."""

    def __init__(self, llm: LLMClient):
        self.llm = llm

    async def generate(self, user_input: str, intent: str, history: List[ChatMessage]) -> str:
        """
        Generate a natural reply to the user's message.

        Args:
            user_input: The user's message
            intent: Identified intent, given to the model as context only
            history: System and user messages built by the first pipeline step

        Returns:
            The model's reply, trimmed and otherwise unmodified
        """
        prompt = build_response_prompt(user_input, intent)
        content = await self.llm.invoke([*history, {"role": "user", "content": prompt}])
        logger.debug(f"Generated reply of {len(content)} chars for intent '{intent}'")
        return content.strip()
