"""Normalization layer that reduces raw documents to a comparable alphabet."""

from .service import DISALLOWED_CHARS, character_set, normalize_text

__all__ = [
    "DISALLOWED_CHARS",
    "character_set",
    "normalize_text",
]
