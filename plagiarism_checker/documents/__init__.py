"""File access for source documents and answer files."""

from .exceptions import DocumentError, DocumentReadError, ResultWriteError
from .reader import read_document
from .writer import write_result

__all__ = [
    "DocumentError",
    "DocumentReadError",
    "ResultWriteError",
    "read_document",
    "write_result",
]
