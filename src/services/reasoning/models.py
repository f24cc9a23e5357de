"""Reasoning service models."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class MessageAnalysis(BaseModel):
    """What the user said and what they are after."""

    model_config = ConfigDict(extra="ignore")

    key_phrases: List[str] = Field(default_factory=list)
    user_goal: str = ""


class IntentJustification(BaseModel):
    """Why the intent was chosen."""

    model_config = ConfigDict(extra="ignore")

    why_this_intent: str = ""
    confidence_factors: List[str] = Field(default_factory=list)


class ResponseStrategy(BaseModel):
    """How the reply should address the intent."""

    model_config = ConfigDict(extra="ignore")

    approach: str = ""
    user_expectation: str = ""


class Reasoning(BaseModel):
    """Structured explanation of a classification decision."""

    model_config = ConfigDict(extra="ignore")

    message_analysis: MessageAnalysis = Field(default_factory=MessageAnalysis)
    intent_justification: IntentJustification = Field(default_factory=IntentJustification)
    response_strategy: ResponseStrategy = Field(default_factory=ResponseStrategy)
