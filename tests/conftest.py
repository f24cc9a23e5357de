"""Pytest configuration and fixtures."""

from collections.abc import Callable
from typing import Union

import pytest

from src.config.settings import Settings

Reply = Union[str, Exception]

INTENT_PROMPT_PREFIX = "Analyze the following user message"
REASONING_PROMPT_PREFIX = "Analyze this intent classification decision"


class StubLLM:
    """LLMClient stand-in that returns scripted replies and records every call."""

    def __init__(
        self,
        replies: list[Reply] | None = None,
        responder: Callable[[list[dict[str, str]]], Reply] | None = None,
    ):
        self.replies = list(replies or [])
        self.responder = responder
        self.calls: list[list[dict[str, str]]] = []

    async def invoke(self, messages: list[dict[str, str]]) -> str:
        self.calls.append(messages)
        reply = self.responder(messages) if self.responder else self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


def prompt_kind(messages: list[dict[str, str]]) -> str:
    """Tell which pipeline call a message list belongs to."""
    last = messages[-1]["content"]
    if last.startswith(INTENT_PROMPT_PREFIX):
        return "intent"
    if last.startswith(REASONING_PROMPT_PREFIX):
        return "reasoning"
    return "response"


@pytest.fixture
def settings():
    """Provide settings fixture."""
    return Settings()


@pytest.fixture
def settings_no_reasoning():
    """Settings with the reasoning call switched off."""
    return Settings(enable_reasoning=False)


@pytest.fixture
def make_llm():
    """Factory for StubLLM instances."""
    return StubLLM


@pytest.fixture
def kind_of():
    """Classifier telling intent, reasoning and response calls apart."""
    return prompt_kind
