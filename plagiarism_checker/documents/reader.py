"""Reading documents from disk."""

from pathlib import Path
from typing import Union

from plagiarism_checker.logging import get_logger

from .exceptions import DocumentReadError

logger = get_logger(__name__, component="documents")


def read_document(path: Union[str, Path], encoding: str = "utf-8") -> str:
    """Read an entire document as text.

    Args:
        path: Path to the document
        encoding: Text encoding of the file

    Returns:
        Decoded document text

    Raises:
        DocumentReadError: If the file is missing, unreadable or not decodable
    """
    path = Path(path)

    try:
        text = path.read_text(encoding=encoding)
    except FileNotFoundError as e:
        raise DocumentReadError(f"Document not found: {path}", path) from e
    except IsADirectoryError as e:
        raise DocumentReadError(f"Document path is a directory: {path}", path) from e
    except UnicodeDecodeError as e:
        raise DocumentReadError(
            f"Document {path} is not valid {encoding} text: {e.reason}", path
        ) from e
    except OSError as e:
        raise DocumentReadError(f"Failed to read document {path}: {e}", path) from e

    logger.debug(
        f"Read document {path}",
        extra={
            "event": "document.read",
            "path": str(path),
            "char_count": len(text),
        },
    )
    return text
