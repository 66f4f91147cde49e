"""Data models for similarity results."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal


def format_score(score: float, precision: int = 2) -> str:
    """Format a similarity score with a fixed number of decimals.

    Exact halves round up: 0.125 becomes 0.13, 0.625 becomes 0.63.

    Example:
        >>> format_score(0.7272)
        '0.73'
    """
    quantum = Decimal(1).scaleb(-precision)
    rounded = Decimal(repr(score)).quantize(quantum, rounding=ROUND_HALF_UP)
    return format(rounded, "f")


@dataclass(frozen=True)
class SimilarityResult:
    """Outcome of comparing two documents.

    Attributes:
        score: Jaccard index over the two character sets, in [0.0, 1.0]
        intersection_size: Number of distinct characters present in both texts
        union_size: Number of distinct characters present in either text
        original_length: Length of the first text after normalization
        compared_length: Length of the second text after normalization
    """

    score: float
    intersection_size: int = 0
    union_size: int = 0
    original_length: int = 0
    compared_length: int = 0

    @property
    def formatted(self) -> str:
        """Score formatted with two decimals (the default answer file precision)."""
        return format_score(self.score)

    @property
    def both_empty(self) -> bool:
        """Whether neither text had any comparable characters."""
        return self.original_length == 0 and self.compared_length == 0
