"""Document I/O exceptions.

All exceptions inherit from DocumentError so callers can handle every
read or write failure with a single except clause.
"""

from pathlib import Path
from typing import Union


class DocumentError(Exception):
    """Base exception for document read and write failures.

    Attributes:
        path: File the failed operation was working on
    """

    def __init__(self, message: str, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(message)


class DocumentReadError(DocumentError):
    """Raised when a document cannot be read or decoded.

    Examples:
    - File does not exist
    - Path is a directory
    - Permission denied
    - Content is not valid in the configured encoding
    """

    pass


class ResultWriteError(DocumentError):
    """Raised when the similarity score cannot be written to the answer file."""

    pass
