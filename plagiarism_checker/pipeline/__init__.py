"""Pipeline orchestration for reading, scoring and writing a comparison."""

from .models import ComparisonRunResult
from .runner import ComparisonPipeline

__all__ = [
    "ComparisonPipeline",
    "ComparisonRunResult",
]
