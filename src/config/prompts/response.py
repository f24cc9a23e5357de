"""
Prompts for the user-facing reply.
"""


def build_response_prompt(user_input: str, intent: str) -> str:
    """Build the reply prompt; the model must not talk about the classification."""
    return f"""User message: "{user_input}"
Identified intent: "{intent}"

IMPORTANT: Respond directly to the user's message. Do NOT explain your classification process, do NOT mention the intent, and do NOT include any meta-commentary. Just provide a natural, helpful response to what the user said.

Your response:"""
