"""Character-level plagiarism checker.

Compares two text documents and reports a Jaccard similarity score over
the sets of distinct characters they contain.
"""

from .similarity import compare_texts, score

__version__ = "1.0.0"

__all__ = ["compare_texts", "score", "__version__"]
