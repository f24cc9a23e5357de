"""Main evaluation script - generates JSON results.

Usage:
    python -m evaluation.run
    python -m evaluation.run --sample 5 --output results.json
"""

import argparse
import asyncio
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from evaluation.config import EvalConfig
from evaluation.executor import Executor
from evaluation.loader import SampleMessage, load_messages, sample_messages
from src.config.settings import get_settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def evaluate_message(executor: Executor, sample: SampleMessage) -> dict[str, Any]:
    """Evaluate a single message."""
    logger.info(f"[{sample.id}] {sample.message[:60]}")

    result = await executor.run_message(sample.message)
    predicted = result.get("intent")

    return {
        "id": sample.id,
        "message": sample.message,
        "expected_intent": sample.expected_intent,
        "predicted_intent": predicted,
        "confidence": result.get("confidence"),
        "entities": result.get("entities"),
        "response": result.get("response"),
        "correct": predicted == sample.expected_intent,
        "error": result.get("error"),
    }


def summarize(results: list[dict[str, Any]]) -> dict[str, Any]:
    """Overall and per-intent accuracy."""
    per_intent: dict[str, dict[str, int]] = {}
    for r in results:
        bucket = per_intent.setdefault(r["expected_intent"], {"total": 0, "correct": 0})
        bucket["total"] += 1
        bucket["correct"] += int(bool(r["correct"]))

    correct = sum(bucket["correct"] for bucket in per_intent.values())
    return {
        "total": len(results),
        "correct": correct,
        "accuracy": round(correct / len(results), 4) if results else 0.0,
        "errors": sum(1 for r in results if r.get("error")),
        "per_intent": per_intent,
    }


async def run_evaluation(
    config: EvalConfig,
    sample_size: int | None = None,
    executor: Executor | None = None,
) -> dict[str, Any]:
    """Run evaluation and return results."""
    samples = load_messages(config.data_path)

    if sample_size:
        samples = sample_messages(samples, n=sample_size)
        logger.info(f"Sampled {len(samples)} messages")

    results: list[dict[str, Any]] = []
    if executor is None:
        settings = get_settings().model_copy(update={"enable_reasoning": config.enable_reasoning})
        executor = Executor(settings)

    async with executor as runner:
        for i, sample in enumerate(samples):
            results.append(await evaluate_message(runner, sample))
            logger.info(f"[{i + 1}/{len(samples)}] Done")

            if config.delay_between_messages and i < len(samples) - 1:
                await asyncio.sleep(config.delay_between_messages)

    return {
        "metadata": {
            "timestamp": datetime.now().isoformat(),
            "total_messages": len(results),
            "dataset": config.data_path.name,
        },
        "summary": summarize(results),
        "results": results,
    }


async def main() -> None:
    parser = argparse.ArgumentParser(description="Run intent classification evaluation")
    parser.add_argument("--data", type=str, help="CSV with message,expected_intent columns")
    parser.add_argument("--sample", type=int, help="Number of messages to sample")
    parser.add_argument("--delay", type=float, default=0.0, help="Delay between messages")
    parser.add_argument("--output", type=str, help="Output JSON path")
    parser.add_argument("--reasoning", action="store_true", help="Also run the reasoning call")
    args = parser.parse_args()

    config = EvalConfig(delay_between_messages=args.delay, enable_reasoning=args.reasoning)
    if args.data:
        config.data_path = Path(args.data)
    output = await run_evaluation(config, sample_size=args.sample)

    output_path = Path(args.output) if args.output else config.output_path
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(output, f, indent=2, ensure_ascii=False, default=str)

    summary = output["summary"]
    logger.info(
        f"Accuracy {summary['accuracy']:.1%} ({summary['correct']}/{summary['total']}), "
        f"results saved to {output_path}"
    )


if __name__ == "__main__":
    asyncio.run(main())
