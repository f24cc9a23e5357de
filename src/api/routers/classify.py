"""Health and classification endpoints."""

import logging
import time
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from src.api.dependencies import get_intent_agent, get_settings_dependency
from src.api.models import (
    BatchClassifyRequest,
    BatchClassifyResponse,
    ClassifyRequest,
    ClassifyResponse,
    HealthResponse,
)
from src.api.response import build_classify_response, build_error_response, utc_timestamp
from src.config.settings import Settings
from src.orchestrator.pipeline import IntentAgent

logger = logging.getLogger(__name__)

router = APIRouter()


def _validate_message(message: str, settings: Settings) -> None:
    """Reject empty or over-long messages before the pipeline runs."""
    if not message.strip():
        raise HTTPException(
            status_code=400,
            detail={
                "error": "Invalid input",
                "message": "Message field is required and must be a non-empty string",
            },
        )
    if len(message) > settings.max_message_length:
        raise HTTPException(
            status_code=400,
            detail={
                "error": "Message too long",
                "message": f"Message must be {settings.max_message_length} characters or less",
            },
        )


@router.get("/health", response_model=HealthResponse)
async def health(
    settings: Settings = Depends(get_settings_dependency),  # noqa: B008
) -> HealthResponse:
    """Health check."""
    try:
        get_intent_agent(settings)
        agent_status = "ready"
    except Exception as e:
        logger.warning("Intent agent unavailable: %s", e)
        agent_status = "unavailable"
    return HealthResponse(
        status="ok",
        service=settings.app_name,
        version=settings.app_version,
        timestamp=utc_timestamp(),
        agent_status=agent_status,
    )


@router.post("/classify", response_model=ClassifyResponse)
async def classify(
    request: ClassifyRequest,
    settings: Settings = Depends(get_settings_dependency),  # noqa: B008
    agent: IntentAgent = Depends(get_intent_agent),  # noqa: B008
) -> Any:
    """Classify a single message and generate the reply."""
    message = request.message
    _validate_message(message, settings)

    preview = message[:50] + ("..." if len(message) > 50 else "")
    logger.info("Processing message: %r", preview)

    try:
        start_time = time.time()
        result = await agent.process_message(message)
        processing_time = int((time.time() - start_time) * 1000)
        logger.info(
            "Intent classified: %s (%.1f%%) in %sms",
            result["intent"],
            result["confidence"] * 100,
            processing_time,
        )
        return build_classify_response(result, processing_time, agent.model_name)
    except Exception as e:
        logger.error("Error processing message: %s", e, exc_info=True)
        return JSONResponse(
            status_code=500,
            content=build_error_response("Processing failed", str(e)),
        )


@router.post("/classify-batch", response_model=BatchClassifyResponse)
async def classify_batch(
    request: BatchClassifyRequest,
    settings: Settings = Depends(get_settings_dependency),  # noqa: B008
    agent: IntentAgent = Depends(get_intent_agent),  # noqa: B008
) -> dict[str, Any]:
    """Classify up to ``max_batch_size`` messages; results keep input order."""
    messages = request.messages
    if not messages:
        raise HTTPException(
            status_code=400,
            detail={
                "error": "Invalid input",
                "message": "Messages field is required and must be a non-empty array",
            },
        )
    if len(messages) > settings.max_batch_size:
        raise HTTPException(
            status_code=400,
            detail={
                "error": "Too many messages",
                "message": f"Maximum {settings.max_batch_size} messages per batch request",
            },
        )
    for message in messages:
        _validate_message(message, settings)

    logger.info("Processing batch of %s messages", len(messages))
    results = await agent.process_batch(messages)

    return {
        "results": [build_classify_response(result) for result in results],
        "count": len(results),
        "timestamp": utc_timestamp(),
    }
