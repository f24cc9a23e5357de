"""Intent agent pipeline: process_input -> identify_intent -> generate_response."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from src.config.constants import (
    APOLOGY_RESPONSE,
    BATCH_ERROR_RESPONSE,
    ERROR_CONFIDENCE,
    IntentCategory,
    PipelineStep,
)
from src.config.prompts import INTENT_AGENT_SYSTEM_PROMPT
from src.config.settings import Settings
from src.infrastructure.llm.client import LLMClient
from src.infrastructure.logging.logger import StructuredLogger
from src.orchestrator.state import AgentState
from src.orchestrator.step_timer import timed_step
from src.services.intent.classifier import IntentClassifier
from src.services.reasoning.generator import ReasoningGenerator, error_reasoning
from src.services.response.generator import ResponseGenerator

logger = logging.getLogger(__name__)

Stage = Callable[[AgentState], Awaitable[AgentState]]


class IntentAgent:
    """
    Identifies the intent of a user message and answers it.

    Every message runs through three stages in a fixed order. Each stage
    catches its own failures and records them on the state, so a run always
    ends with a well-formed result.
    """

    def __init__(self, settings: Settings, llm: LLMClient):
        """Initialize the agent with settings and an LLM client."""
        self.settings = settings
        self.llm = llm
        self.classifier = IntentClassifier(llm)
        self.reasoning = ReasoningGenerator(llm)
        self.responder = ResponseGenerator(llm)
        self.step_logger = StructuredLogger(__name__)
        self.stages: tuple[Stage, ...] = (
            self.process_input,
            self.identify_intent,
            self.generate_response,
        )

    @property
    def model_name(self) -> str:
        return self.settings.intent_agent_model

    @property
    def categories(self) -> list[str]:
        return IntentCategory.values()

    async def process_input(self, state: AgentState) -> AgentState:
        """Seed the conversation with the system prompt and the user's message."""
        async with timed_step(PipelineStep.PROCESS_INPUT, self.step_logger) as step:
            state.messages = [
                {"role": "system", "content": INTENT_AGENT_SYSTEM_PROMPT},
                {"role": "user", "content": state.user_input},
            ]
            step.set_result({"messages": len(state.messages)})
        return state

    async def identify_intent(self, state: AgentState) -> AgentState:
        """Classify the message; failures leave an unknown intent with zero confidence."""
        async with timed_step(
            PipelineStep.IDENTIFY_INTENT, self.step_logger, user_input=state.user_input
        ) as step:
            try:
                result = await self.classifier.classify(state.user_input, state.messages)
                state.identified_intent = result.intent.value
                state.confidence = result.confidence
                state.entities = dict(result.entities)
                step.set_result(result.model_dump(mode="json"))
            except Exception as e:
                self.step_logger.log_error(
                    PipelineStep.IDENTIFY_INTENT.value, e, {"user_input": state.user_input}
                )
                state.error = f"Error identifying intent: {e}"
                state.identified_intent = IntentCategory.UNKNOWN.value
                state.confidence = ERROR_CONFIDENCE
                state.entities = {}
        return state

    async def generate_response(self, state: AgentState) -> AgentState:
        """Reason about the classification (when enabled) and write the reply."""
        intent = state.identified_intent or IntentCategory.UNKNOWN.value
        async with timed_step(
            PipelineStep.GENERATE_RESPONSE, self.step_logger, user_input=state.user_input
        ) as step:
            try:
                if self.settings.enable_reasoning:
                    state.reasoning = await self.reasoning.generate(
                        state.user_input, intent, state.confidence, state.messages
                    )
                state.response = await self.responder.generate(
                    state.user_input, intent, state.messages
                )
                step.set_result({"response_chars": len(state.response)})
            except Exception as e:
                self.step_logger.log_error(
                    PipelineStep.GENERATE_RESPONSE.value, e, {"intent": intent}
                )
                state.error = f"Error generating response: {e}"
                state.response = APOLOGY_RESPONSE
                state.reasoning = error_reasoning(str(e))
        return state

    async def process_message(self, user_input: str) -> dict[str, Any]:
        """
        Run a message through the full pipeline.

        Args:
            user_input: The user's message

        Returns:
            Dictionary with intent, confidence, entities, response, reasoning and error
        """
        state = AgentState(user_input=user_input)
        for stage in self.stages:
            state = await stage(state)

        logger.info(
            f"Intent classified: {state.identified_intent} "
            f"({state.confidence * 100:.1f}%)"
        )
        return state.to_result()

    async def process_batch(self, messages: list[str]) -> list[dict[str, Any]]:
        """Run independent pipelines for every message, keeping input order."""
        outcomes = await asyncio.gather(
            *[self.process_message(message) for message in messages],
            return_exceptions=True,
        )

        results: list[dict[str, Any]] = []
        for message, outcome in zip(messages, outcomes):
            if isinstance(outcome, BaseException):
                logger.error(
                    f"Batch item failed: {message[:50]!r}", exc_info=outcome
                )
                results.append(batch_error_result(outcome))
            else:
                results.append(outcome)
        return results


def batch_error_result(error: BaseException) -> dict[str, Any]:
    """Result placed in a batch slot whose pipeline raised."""
    return {
        "intent": IntentCategory.UNKNOWN.value,
        "confidence": ERROR_CONFIDENCE,
        "entities": {},
        "response": BATCH_ERROR_RESPONSE,
        "reasoning": None,
        "error": str(error),
    }
