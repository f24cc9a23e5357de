"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from src.api.routers import api_router
from src.config.settings import Settings, get_settings
from src.infrastructure.llm.factory import close_shared_llm_client
from src.infrastructure.logging.logger import setup_logging

settings = get_settings()

setup_logging(
    level=settings.log_level,
    json_output=not settings.debug,
    silence_noisy_loggers=True,
)

logger = logging.getLogger(__name__)


def _log_startup_config(settings: Settings) -> None:
    """Log the configuration the agent will run with."""
    logger.info(
        "Ollama endpoint: %s (model=%s, reasoning=%s)",
        settings.ollama_openai_url,
        settings.intent_agent_model,
        "on" if settings.enable_reasoning else "off",
    )
    logger.info(
        "Limits: %s chars per message, %s messages per batch",
        settings.max_message_length,
        settings.max_batch_size,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup and shutdown lifecycle."""
    logger.info("Starting %s", settings.app_name)
    _log_startup_config(settings)
    yield
    logger.info("Shutting down %s", settings.app_name)
    try:
        await close_shared_llm_client()
        logger.info("Shared LLM client closed")
    except Exception as e:
        logger.error("Error closing shared LLM client: %s", e, exc_info=True)


app = FastAPI(
    title=settings.app_name,
    description="Intent classification and reply generation on a local LLM",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials="*" not in settings.allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(ProxyHeadersMiddleware, trusted_hosts=["*"])

app.include_router(api_router, prefix="/api")
