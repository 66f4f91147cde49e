"""Jaccard similarity over the distinct characters of two documents.

Character order, repetition and document length are ignored: each text is
reduced to the set of characters it contains. Two texts with nothing left
after normalization are treated as identical.
"""

from plagiarism_checker.normalization import character_set, normalize_text

from .models import SimilarityResult


def jaccard_similarity(text1: str, text2: str) -> float:
    """Compute |A ∩ B| / |A ∪ B| over the character sets of two normalized texts.

    Args:
        text1: First normalized text
        text2: Second normalized text

    Returns:
        Score in [0.0, 1.0]; 1.0 when both texts are empty, 0.0 when only one is
    """
    return _compare_normalized(text1, text2).score


def score(text1: str, text2: str) -> float:
    """Normalize two raw texts and return their similarity score.

    Example:
        >>> score("Hello, World!", "hello world")
        1.0
    """
    return compare_texts(text1, text2).score


def compare_texts(text1: str, text2: str) -> SimilarityResult:
    """Normalize two raw texts and compare them.

    Args:
        text1: Raw text of the original document
        text2: Raw text of the document being checked

    Returns:
        SimilarityResult with the score and set sizes
    """
    return _compare_normalized(normalize_text(text1), normalize_text(text2))


def _compare_normalized(text1: str, text2: str) -> SimilarityResult:
    set1 = character_set(text1)
    set2 = character_set(text2)

    if not set1 and not set2:
        value = 1.0
        intersection_size = union_size = 0
    elif not set1 or not set2:
        value = 0.0
        intersection_size = 0
        union_size = len(set1 | set2)
    else:
        intersection_size = len(set1 & set2)
        union_size = len(set1 | set2)
        value = intersection_size / union_size

    return SimilarityResult(
        score=value,
        intersection_size=intersection_size,
        union_size=union_size,
        original_length=len(text1),
        compared_length=len(text2),
    )
