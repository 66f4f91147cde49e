"""Writing similarity scores to answer files."""

from pathlib import Path
from typing import Union

from plagiarism_checker.logging import get_logger
from plagiarism_checker.similarity import format_score

from .exceptions import ResultWriteError

logger = get_logger(__name__, component="documents")


def write_result(
    score: float,
    path: Union[str, Path],
    precision: int = 2,
    encoding: str = "utf-8",
) -> str:
    """Write a formatted score to an answer file, replacing its contents.

    Missing parent directories are created. No trailing newline is written.

    Args:
        score: Similarity score in [0.0, 1.0]
        path: Destination file
        precision: Number of decimal digits
        encoding: Text encoding of the answer file

    Returns:
        The exact text written

    Raises:
        ResultWriteError: If the file cannot be written
    """
    path = Path(path)
    content = format_score(score, precision)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding=encoding)
    except OSError as e:
        raise ResultWriteError(f"Failed to write result to {path}: {e}", path) from e

    logger.debug(
        f"Wrote result to {path}",
        extra={
            "event": "result.written",
            "path": str(path),
            "content": content,
        },
    )
    return content
