"""Pipeline state model."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from src.services.reasoning.models import Reasoning


@dataclass
class AgentState:
    """State object passed through the pipeline."""

    # Input
    user_input: str = ""

    # Step 1: Process input
    messages: List[Dict[str, str]] = field(default_factory=list)

    # Step 2: Identify intent
    identified_intent: Optional[str] = None
    confidence: float = 0.0
    entities: Dict[str, str] = field(default_factory=dict)

    # Step 3: Generate response
    response: str = ""
    reasoning: Optional[Reasoning] = None

    # Last error recorded by any step
    error: Optional[str] = None

    def to_result(self) -> Dict[str, Any]:
        """Project the state onto the public agent result."""
        return {
            "intent": self.identified_intent,
            "confidence": self.confidence,
            "entities": dict(self.entities),
            "response": self.response,
            "reasoning": self.reasoning.model_dump() if self.reasoning else None,
            "error": self.error,
        }
