"""Async context manager for timing and logging pipeline steps."""

import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from src.config.constants import PipelineStep, log_pipeline_step
from src.infrastructure.logging.logger import StructuredLogger


class StepContext:
    """What a step reports back once it finishes."""

    def __init__(self, user_input: str | None = None) -> None:
        self.user_input = user_input
        self.result: Any = None

    def set_result(self, result: Any) -> None:
        self.result = result


@asynccontextmanager
async def timed_step(
    step: PipelineStep,
    logger: StructuredLogger,
    *,
    user_input: str | None = None,
) -> AsyncGenerator[StepContext, None]:
    """
    Announce a step, time it, and log its result.

    Nothing is logged when the step never sets a result; steps that fail
    report through ``StructuredLogger.log_error`` instead.
    """
    log_pipeline_step(step)
    ctx = StepContext(user_input)
    start = time.perf_counter()
    yield ctx
    if ctx.result is None:
        return
    state: dict[str, Any] = {"result": ctx.result}
    if ctx.user_input is not None:
        state["user_input"] = ctx.user_input[:100]
    logger.log_step(step.value, state, duration_ms=(time.perf_counter() - start) * 1000)
