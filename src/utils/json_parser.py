"""
JSON Parser utility for extracting JSON from LLM responses.
"""
import json
import re
from typing import Any


_CONTROL_CHARS_RE = re.compile(r"[\u0000-\u001F\u007F-\u009F]")
_TRAILING_COMMA_RE = re.compile(r",(\s*[}\]])")
_LAZY_OBJECT_RE = re.compile(r"\{.*?\}", re.DOTALL)
_GREEDY_OBJECT_RE = re.compile(r"\{.*\}", re.DOTALL)


class JSONParser:
    """Helper class to extract clean JSON from LLM responses."""

    @staticmethod
    def find_object(text: str, greedy: bool = False) -> str | None:
        """
        Locate a ``{...}`` span in free-form text.

        Lazy mode returns the first object: the balanced span starting at the
        first ``{`` when it closes, otherwise the shortest ``{...}`` match.
        Greedy mode returns everything from the first ``{`` to the last ``}``.

        Returns:
            The span, or None when the text holds no brace pair.
        """
        if greedy:
            match = _GREEDY_OBJECT_RE.search(text)
            return match.group(0) if match else None

        balanced = JSONParser._balanced_object(text)
        if balanced is not None:
            return balanced
        match = _LAZY_OBJECT_RE.search(text)
        return match.group(0) if match else None

    @staticmethod
    def _balanced_object(text: str) -> str | None:
        """Return the brace-balanced span opened by the first ``{``."""
        start = text.find("{")
        if start == -1:
            return None

        depth = 0
        in_string = False
        escaped = False
        for index in range(start, len(text)):
            char = text[index]
            if in_string:
                if escaped:
                    escaped = False
                elif char == "\\":
                    escaped = True
                elif char == '"':
                    in_string = False
                continue
            if char == '"':
                in_string = True
            elif char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    return text[start : index + 1]
        return None

    @staticmethod
    def clean(json_string: str) -> str:
        """Fix the usual LLM formatting slips before a strict parse."""
        cleaned = _CONTROL_CHARS_RE.sub("", json_string)
        cleaned = _TRAILING_COMMA_RE.sub(r"\1", cleaned)
        cleaned = cleaned.replace("\n", " ").replace("\r", "")
        return cleaned.strip()

    @staticmethod
    def loads_clean(json_string: str) -> Any:
        """
        Clean and strictly parse a JSON span.

        Raises:
            json.JSONDecodeError: If the cleaned span is still not valid JSON
        """
        return json.loads(JSONParser.clean(json_string))

