"""Text normalization applied to documents before comparison.

Only CJK unified ideographs (U+4E00 to U+9FA5), ASCII letters and ASCII
digits survive normalization. Everything else, including whitespace and
full-width punctuation, is deleted rather than replaced with a separator.
"""

import re
from typing import FrozenSet, Optional

# Anything outside CJK U+4E00-U+9FA5 and ASCII alphanumerics
DISALLOWED_CHARS = re.compile(r"[^\u4e00-\u9fa5a-zA-Z0-9]")


def normalize_text(text: Optional[str]) -> str:
    """Normalize raw document text for comparison.

    Args:
        text: Raw document text (None is treated as empty)

    Returns:
        Text containing only CJK ideographs, lowercase ASCII letters and digits

    Example:
        >>> normalize_text("Hello, World! 123")
        'helloworld123'
    """
    if not text:
        return ""

    return DISALLOWED_CHARS.sub("", text).lower()


def character_set(normalized_text: str) -> FrozenSet[str]:
    """Collapse a normalized text into its set of distinct characters."""
    return frozenset(normalized_text)
