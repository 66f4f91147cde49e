"""Pipeline orchestration for a single document comparison."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union
from uuid import uuid4

from plagiarism_checker.config.models import AppConfig
from plagiarism_checker.documents import read_document, write_result
from plagiarism_checker.logging import get_logger
from plagiarism_checker.logging.context import log_context
from plagiarism_checker.similarity import SimilarityResult, compare_texts, format_score

from .models import ComparisonRunResult

logger = get_logger(__name__, component="pipeline")

PathLike = Union[str, Path]


class ComparisonPipeline:
    """
    Compares two documents on disk and records the score.

    Flow: read both documents -> normalize -> score -> write answer file.
    Read and write failures propagate as DocumentError subclasses.
    """

    def __init__(self, app_config: Optional[AppConfig] = None):
        """
        Initialize the comparison pipeline.

        Args:
            app_config: Application configuration (defaults to AppConfig())
        """
        self.app_config = app_config or AppConfig()

    def check(self, original_path: PathLike, plagiarized_path: PathLike) -> SimilarityResult:
        """
        Read two documents and compute their similarity.

        Args:
            original_path: Path to the original document
            plagiarized_path: Path to the document being checked

        Returns:
            SimilarityResult for the pair

        Raises:
            DocumentReadError: If either document cannot be read
        """
        encoding = self.app_config.input.encoding
        original_text = read_document(original_path, encoding=encoding)
        plagiarized_text = read_document(plagiarized_path, encoding=encoding)

        logger.info(
            "Documents loaded",
            extra={
                "event": "comparison.documents.loaded",
                "original_chars": len(original_text),
                "plagiarized_chars": len(plagiarized_text),
            },
        )

        result = compare_texts(original_text, plagiarized_text)

        logger.info(
            f"Score computed: {format_score(result.score, self.app_config.output.precision)}",
            extra={
                "event": "comparison.score.computed",
                "score": result.score,
                "intersection_size": result.intersection_size,
                "union_size": result.union_size,
                "original_length": result.original_length,
                "compared_length": result.compared_length,
            },
        )

        if result.both_empty:
            logger.warning(
                "Neither document contains comparable characters; reporting full similarity",
                extra={"event": "comparison.documents.empty"},
            )

        return result

    def run(
        self,
        original_path: PathLike,
        plagiarized_path: PathLike,
        answer_path: PathLike,
    ) -> ComparisonRunResult:
        """
        Compare two documents and write the score to an answer file.

        Args:
            original_path: Path to the original document
            plagiarized_path: Path to the document being checked
            answer_path: Destination for the formatted score

        Returns:
            ComparisonRunResult describing the run

        Raises:
            DocumentReadError: If either document cannot be read (nothing is written)
            ResultWriteError: If the answer file cannot be written
        """
        run_started_at = datetime.now(timezone.utc)
        run_id = uuid4().hex

        with log_context(
            run_id=run_id,
            original_path=str(original_path),
            plagiarized_path=str(plagiarized_path),
        ):
            logger.info(
                "Comparison run started",
                extra={"event": "comparison.run.started", "answer_path": str(answer_path)},
            )

            similarity = self.check(original_path, plagiarized_path)

            written = write_result(
                similarity.score,
                answer_path,
                precision=self.app_config.output.precision,
                encoding=self.app_config.output.encoding,
            )

            logger.info(
                "Result written",
                extra={
                    "event": "comparison.result.written",
                    "answer_path": str(answer_path),
                    "written": written,
                },
            )

            result = ComparisonRunResult(
                run_id=run_id,
                original_path=Path(original_path),
                plagiarized_path=Path(plagiarized_path),
                answer_path=Path(answer_path),
                similarity=similarity,
                written=written,
                run_started_at=run_started_at,
                run_finished_at=datetime.now(timezone.utc),
            )

            logger.info(
                "Comparison run completed",
                extra={
                    "event": "comparison.run.completed",
                    "score": similarity.score,
                    "duration_seconds": round(result.duration_seconds, 4),
                },
            )

        return result
