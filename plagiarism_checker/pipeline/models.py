"""Data models for comparison run reporting."""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from plagiarism_checker.similarity import SimilarityResult


@dataclass
class ComparisonRunResult:
    """
    Outcome of one end-to-end comparison.

    Attributes:
        run_id: Identifier attached to every log record of the run
        original_path: Document treated as the original
        plagiarized_path: Document checked against the original
        answer_path: File the score was written to
        similarity: Score and set sizes
        written: Exact text written to the answer file
        run_started_at: UTC timestamp when the run began
        run_finished_at: UTC timestamp when the run completed
        duration_seconds: Wall time of the run
    """

    run_id: str
    original_path: Path
    plagiarized_path: Path
    answer_path: Path
    similarity: SimilarityResult
    written: str
    run_started_at: datetime
    run_finished_at: datetime
    duration_seconds: float = 0.0

    def __post_init__(self):
        if self.duration_seconds == 0.0:
            delta = self.run_finished_at - self.run_started_at
            self.duration_seconds = delta.total_seconds()

    @property
    def score(self) -> float:
        """Convenience accessor for the similarity score."""
        return self.similarity.score
