"""
Constants, enums, and static values.
"""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class IntentCategory(str, Enum):
    """Closed set of intents a user message can be classified into."""

    GREETING = "greeting"
    QUESTION = "question"
    COMMAND = "command"
    INFORMATION_REQUEST = "information_request"
    CLARIFICATION = "clarification"
    FEEDBACK = "feedback"
    GOODBYE = "goodbye"
    UNKNOWN = "unknown"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


class PipelineStep(str, Enum):
    """Pipeline execution steps."""
    PROCESS_INPUT = "process_input"
    IDENTIFY_INTENT = "identify_intent"
    GENERATE_RESPONSE = "generate_response"


class PipelineStepDescription(str, Enum):
    """Pipeline execution step descriptions."""
    PROCESS_INPUT = "Build the system and user messages for the conversation"
    IDENTIFY_INTENT = "Classify the intent of the user's message"
    GENERATE_RESPONSE = "Generate the reply to the user's message"


def log_pipeline_step(step: PipelineStep) -> None:
    """Log the start of a pipeline step with its description."""
    description = PipelineStepDescription[step.name].value
    logger.info(f"{step.value}: {description}")


# Confidence assigned when the model reply carries no JSON object at all
FALLBACK_CONFIDENCE = 0.6
# Confidence assigned when the model omits it
DEFAULT_CONFIDENCE = 0.5
# Confidence assigned when classification itself fails
ERROR_CONFIDENCE = 0.0

APOLOGY_RESPONSE = "I apologize, but I encountered an error processing your request."
API_APOLOGY_RESPONSE = (
    "I apologize, but I encountered an error processing your message. Please try again."
)
BATCH_ERROR_RESPONSE = "Error processing message"
