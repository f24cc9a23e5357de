"""Application settings using Pydantic BaseSettings."""

import logging
from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Intent Identifier"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper = v.upper()
        if upper not in _VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_VALID_LOG_LEVELS}, got '{v}'")
        return upper

    @field_validator("ollama_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @model_validator(mode="after")
    def validate_limits_positive(self) -> "Settings":
        for field_name in (
            "intent_max_tokens",
            "max_message_length",
            "max_batch_size",
        ):
            value = getattr(self, field_name)
            if value <= 0:
                raise ValueError(f"{field_name} must be positive, got {value}")
        if not 0.0 <= self.intent_temperature <= 2.0:
            raise ValueError(
                f"intent_temperature must be between 0 and 2, got {self.intent_temperature}"
            )
        return self

    @model_validator(mode="after")
    def warn_wildcard_origins(self) -> "Settings":
        if self.allowed_origins == ["*"]:
            logging.getLogger(__name__).warning(
                "allowed_origins is set to ['*'], consider restricting in production"
            )
        return self

    # Ollama (OpenAI-compatible endpoint is served under /v1)
    ollama_base_url: str = "http://localhost:11434"
    ollama_api_key: str = "ollama"

    # Intent Agent
    intent_agent_model: str = "llama3.2"
    intent_temperature: float = 0.7
    intent_max_tokens: int = 1024
    enable_reasoning: bool = True

    # Request limits
    max_message_length: int = 1000
    max_batch_size: int = 10

    # CORS
    allowed_origins: list[str] = ["*"]

    @property
    def ollama_openai_url(self) -> str:
        """Base URL of Ollama's OpenAI-compatible API."""
        return f"{self.ollama_base_url}/v1"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
