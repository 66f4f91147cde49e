"""Unit tests for the comparison pipeline."""

import io
import json
import logging

import pytest

from plagiarism_checker.config.models import AppConfig, OutputConfig
from plagiarism_checker.documents import DocumentReadError, ResultWriteError
from plagiarism_checker.logging.config import configure_logging
from plagiarism_checker.pipeline import ComparisonPipeline, ComparisonRunResult


class TestCheck:
    """Tests for ComparisonPipeline.check."""

    def test_scores_documents(self, original_doc, plagiarized_doc):
        result = ComparisonPipeline().check(original_doc, plagiarized_doc)

        # 13 shared characters out of 17 distinct
        assert result.intersection_size == 13
        assert result.union_size == 17
        assert result.score == pytest.approx(13 / 17)

    def test_identical_documents(self, original_doc):
        assert ComparisonPipeline().check(original_doc, original_doc).score == 1.0

    def test_missing_document_propagates(self, original_doc, tmp_path):
        with pytest.raises(DocumentReadError):
            ComparisonPipeline().check(original_doc, tmp_path / "missing.txt")

    def test_uses_configured_encoding(self, write_doc):
        first = write_doc("a.txt", "天气晴", encoding="gbk")
        second = write_doc("b.txt", "天气", encoding="gbk")
        config = AppConfig.model_validate({"input": {"encoding": "gbk"}})

        result = ComparisonPipeline(config).check(first, second)

        assert result.score == pytest.approx(2 / 3)

    def test_warns_when_both_documents_empty(self, write_doc, caplog):
        first = write_doc("a.txt", "，。")
        second = write_doc("b.txt", "")

        with caplog.at_level(logging.WARNING):
            result = ComparisonPipeline().check(first, second)

        assert result.score == 1.0
        assert any(
            getattr(record, "event", None) == "comparison.documents.empty"
            for record in caplog.records
        )


class TestRun:
    """Tests for ComparisonPipeline.run."""

    def test_writes_answer_file(self, original_doc, plagiarized_doc, tmp_path):
        answer = tmp_path / "answer.txt"

        result = ComparisonPipeline().run(original_doc, plagiarized_doc, answer)

        assert isinstance(result, ComparisonRunResult)
        assert result.written == "0.76"
        assert answer.read_text(encoding="utf-8") == "0.76"
        assert result.score == pytest.approx(13 / 17)
        assert result.answer_path == answer
        assert len(result.run_id) == 32
        assert result.duration_seconds >= 0.0
        assert result.run_finished_at >= result.run_started_at

    def test_respects_output_precision(self, original_doc, plagiarized_doc, tmp_path):
        answer = tmp_path / "answer.txt"
        config = AppConfig(output=OutputConfig(precision=4))

        result = ComparisonPipeline(config).run(original_doc, plagiarized_doc, answer)

        assert result.written == "0.7647"

    def test_read_failure_writes_nothing(self, original_doc, tmp_path):
        answer = tmp_path / "answer.txt"

        with pytest.raises(DocumentReadError):
            ComparisonPipeline().run(original_doc, tmp_path / "missing.txt", answer)

        assert not answer.exists()

    def test_write_failure_propagates(self, original_doc, tmp_path):
        with pytest.raises(ResultWriteError):
            ComparisonPipeline().run(original_doc, original_doc, tmp_path)

    def test_every_event_carries_run_id(self, original_doc, tmp_path):
        stream = io.StringIO()
        configure_logging(level="INFO", format_type="json", stream=stream)

        result = ComparisonPipeline().run(original_doc, original_doc, tmp_path / "answer.txt")

        records = [json.loads(line) for line in stream.getvalue().splitlines()]
        comparison_records = [r for r in records if r.get("event", "").startswith("comparison.")]

        assert {r["event"] for r in comparison_records} >= {
            "comparison.run.started",
            "comparison.documents.loaded",
            "comparison.score.computed",
            "comparison.result.written",
            "comparison.run.completed",
        }
        assert all(r["run_id"] == result.run_id for r in comparison_records)
        assert all(r["original_path"] == str(original_doc) for r in comparison_records)

    def test_logged_score_uses_output_precision(self, original_doc, plagiarized_doc, tmp_path):
        stream = io.StringIO()
        configure_logging(level="INFO", format_type="json", stream=stream)
        config = AppConfig(output=OutputConfig(precision=4))

        result = ComparisonPipeline(config).run(original_doc, plagiarized_doc, tmp_path / "answer.txt")

        records = [json.loads(line) for line in stream.getvalue().splitlines()]
        computed = [r for r in records if r.get("event") == "comparison.score.computed"]
        assert computed[0]["message"] == f"Score computed: {result.written}"
        assert result.written == "0.7647"
