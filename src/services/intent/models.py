"""Intent service models."""

from typing import Dict

from pydantic import BaseModel, Field

from src.config.constants import IntentCategory


class IntentResult(BaseModel):
    """Result from intent classification."""

    intent: IntentCategory = IntentCategory.UNKNOWN
    confidence: float = Field(0.0, ge=0.0, le=1.0)
    entities: Dict[str, str] = Field(default_factory=dict)
