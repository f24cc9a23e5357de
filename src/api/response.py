"""Standardized response builders for classification endpoints."""

from datetime import datetime, timezone
from typing import Any

from src.api.models import ClassifyResponse
from src.config.constants import API_APOLOGY_RESPONSE, ERROR_CONFIDENCE, IntentCategory


def utc_timestamp() -> str:
    """Current UTC time in ISO-8601."""
    return datetime.now(timezone.utc).isoformat()


def build_classify_response(
    result: dict[str, Any],
    processing_time_ms: int | None = None,
    model: str | None = None,
) -> dict[str, Any]:
    """Build a ClassifyResponse-compatible dict with Pydantic validation."""
    fields: dict[str, Any] = dict(result)
    if processing_time_ms is not None and model is not None:
        fields["metadata"] = {
            "processingTime": processing_time_ms,
            "timestamp": utc_timestamp(),
            "model": model,
        }
    return ClassifyResponse(**fields).model_dump(by_alias=True)


def build_error_response(error: str, message: str | None = None) -> dict[str, Any]:
    """Body returned when the endpoint itself fails; ``message`` carries the exception text."""
    return {
        "error": error,
        "message": message,
        "intent": IntentCategory.UNKNOWN.value,
        "confidence": ERROR_CONFIDENCE,
        "entities": {},
        "response": API_APOLOGY_RESPONSE,
    }
