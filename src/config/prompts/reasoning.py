"""
Prompts for the structured reasoning about a classification decision.
"""


def build_reasoning_prompt(user_input: str, intent: str, confidence: float) -> str:
    """Build the prompt asking the model to justify the classification as JSON."""
    return f"""Analyze this intent classification decision:

User Message: "{user_input}"
Identified Intent: "{intent}"
Confidence Score: {confidence}

Provide your analysis in the following format. Respond ONLY with valid JSON:

{{
  "message_analysis": {{
    "key_phrases": ["list", "of", "key", "phrases"],
    "user_goal": "brief description of user's primary goal"
  }},
  "intent_justification": {{
    "why_this_intent": "explanation of why this intent was chosen",
    "confidence_factors": ["factor 1", "factor 2", "factor 3"]
  }},
  "response_strategy": {{
    "approach": "how to respond to this intent",
    "user_expectation": "what the user expects"
  }}
}}"""
