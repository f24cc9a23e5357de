"""Evaluation configuration."""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path


@dataclass
class EvalConfig:
    """Configuration for evaluation runs."""

    # Labelled ``message,expected_intent`` CSV and where reports go
    data_path: Path = Path(__file__).parent / "data" / "messages.csv"
    results_dir: Path = Path(__file__).parent / "results"

    # Pause between messages so a small local model is not saturated
    delay_between_messages: float = 0.0
    # Accuracy depends only on the intent step
    enable_reasoning: bool = False

    run_id: str = field(default_factory=lambda: datetime.now().strftime("%Y%m%d_%H%M%S"))

    def __post_init__(self) -> None:
        self.results_dir.mkdir(parents=True, exist_ok=True)

    @property
    def output_path(self) -> Path:
        """Report written by ``python -m evaluation.run`` when --output is not given."""
        return self.results_dir / f"intents_{self.run_id}.json"
