"""Similarity scoring for normalized documents.

This module provides:
- SimilarityResult: Score plus the set sizes it was computed from
- score / compare_texts: Normalize raw texts and score them
- jaccard_similarity: Score texts that are already normalized
- format_score: Fixed-precision formatting used for answer files
"""

from .engine import compare_texts, jaccard_similarity, score
from .models import SimilarityResult, format_score

__all__ = [
    "SimilarityResult",
    "compare_texts",
    "format_score",
    "jaccard_similarity",
    "score",
]
