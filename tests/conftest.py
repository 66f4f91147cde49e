"""Shared fixtures for the plagiarism checker test suite."""

import logging

import pytest

from plagiarism_checker.logging.context import clear_log_context


@pytest.fixture(autouse=True)
def clean_logging():
    """Reset log context and root handlers around each test."""
    clear_log_context()
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    yield
    clear_log_context()
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove environment overrides that would leak into config loading."""
    for name in ("LOG_LEVEL", "LOG_FORMAT", "ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def write_doc(tmp_path):
    """Factory writing a UTF-8 document under tmp_path and returning its path."""

    def _write(name: str, content: str, encoding: str = "utf-8"):
        path = tmp_path / name
        path.write_text(content, encoding=encoding)
        return path

    return _write


@pytest.fixture
def original_doc(write_doc):
    return write_doc("orig.txt", "今天是星期天，天气晴，今天晚上我要去看电影。")


@pytest.fixture
def plagiarized_doc(write_doc):
    return write_doc("orig_add.txt", "今天是周天，天气晴朗，我晚上要去看电影。")
