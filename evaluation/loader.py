"""Dataset loader for labelled sample messages."""

import csv
import logging
from dataclasses import dataclass
from pathlib import Path

from src.config.constants import IntentCategory

logger = logging.getLogger(__name__)


@dataclass
class SampleMessage:
    """A single labelled message."""

    id: int
    message: str
    expected_intent: str

    @property
    def is_labelled(self) -> bool:
        """Check if the expected intent is a known category."""
        return self.expected_intent in IntentCategory.values()


def load_messages(path: Path) -> list[SampleMessage]:
    """Load messages from a ``message,expected_intent`` CSV file."""
    if not path.exists():
        raise FileNotFoundError(f"Dataset not found: {path}")

    samples = []

    with open(path, encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)

        for idx, row in enumerate(reader):
            sample = SampleMessage(
                id=idx,
                message=(row.get("message") or "").strip(),
                expected_intent=(row.get("expected_intent") or "").strip().lower(),
            )

            if sample.message:
                samples.append(sample)

    logger.info(f"Loaded {len(samples)} messages from {path}")
    return samples


def sample_messages(samples: list[SampleMessage], n: int = 10) -> list[SampleMessage]:
    """Sample n messages stratified by expected intent."""
    if n >= len(samples):
        return samples

    groups: dict[str, list[SampleMessage]] = {}
    for s in samples:
        groups.setdefault(s.expected_intent, []).append(s)

    per_group = max(1, n // len(groups))
    sampled: list[SampleMessage] = []

    for group in groups.values():
        sampled.extend(group[:per_group])

    return sampled[:n]
