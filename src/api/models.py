"""Request/Response models for API endpoints."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.services.reasoning.models import Reasoning


class ClassifyRequest(BaseModel):
    """Request model for the single classification endpoint."""

    message: str = Field(..., description="User message to classify")


class BatchClassifyRequest(BaseModel):
    """Request model for the batch classification endpoint."""

    messages: list[str] = Field(..., description="User messages to classify, in order")


class ResponseMetadata(BaseModel):
    """Timing and model information attached to a classification."""

    model_config = ConfigDict(populate_by_name=True)

    processing_time: int = Field(
        ..., alias="processingTime", description="Pipeline duration in milliseconds"
    )
    timestamp: str = Field(..., description="ISO-8601 time the response was built")
    model: str = Field(..., description="LLM used for the pipeline")


class ClassifyResponse(BaseModel):
    """Response model for a classified message."""

    intent: str = Field(..., description="Identified intent category")
    confidence: float = Field(..., description="Confidence score between 0 and 1")
    entities: dict[str, str] = Field(default_factory=dict, description="Extracted entities")
    response: str = Field("", description="Reply for the user")
    reasoning: Optional[Reasoning] = Field(None, description="Structured classification reasoning")
    error: Optional[str] = Field(None, description="Error message if a pipeline step failed")
    metadata: Optional[ResponseMetadata] = Field(None, description="Processing metadata")


class BatchClassifyResponse(BaseModel):
    """Response model for the batch classification endpoint."""

    results: list[ClassifyResponse] = Field(..., description="One result per input message")
    count: int = Field(..., description="Number of results")
    timestamp: str = Field(..., description="ISO-8601 time the response was built")


class CategoriesResponse(BaseModel):
    """Response model for the categories endpoint."""

    categories: list[str] = Field(..., description="Valid intent categories")
    count: int = Field(..., description="Number of categories")


class HealthResponse(BaseModel):
    """Response model for health endpoint."""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Application version")
    timestamp: str = Field(..., description="ISO-8601 time of the check")
    agent_status: str = Field(..., description="ready or unavailable")
