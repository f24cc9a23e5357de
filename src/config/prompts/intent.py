"""
Intent classification prompts.
"""

from src.config.constants import IntentCategory

# Entity types offered to the model as examples, with sample values
ENTITY_EXAMPLES: dict[str, str] = {
    "dates/times": '"tomorrow", "3pm", "next week"',
    "locations": '"New York", "home", "office"',
    "people": "names, pronouns with context",
    "topics/subjects": '"machine learning", "budget report"',
    "actions": '"schedule", "book", "create"',
    "items/objects": '"meeting", "flight", "document"',
    "quantities": "numbers, amounts, durations",
    "emotions/sentiments": '"happy", "frustrated", "excited"',
}


def build_intent_prompt(user_input: str) -> str:
    """Build the classification prompt asking for a bare JSON object."""
    categories = ", ".join(IntentCategory.values())
    entity_lines = "\n".join(
        f"- {entity_type} (e.g., {examples})" for entity_type, examples in ENTITY_EXAMPLES.items()
    )

    return f"""Analyze the following user message and identify the primary intent.
Choose from these categories: {categories}.

User message: "{user_input}"

Extract any relevant entities from the message. Entities are specific pieces of information like:
{entity_lines}

IMPORTANT: Respond ONLY with valid JSON. Do not include any text before or after the JSON object.

{{
  "intent": "category_name",
  "confidence": 0.9,
  "entities": {{
    "entity_type": "extracted_value"
  }}
}}"""
