"""Configuration schema models using Pydantic."""

import codecs
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


def _validate_encoding(value: str) -> str:
    stripped = value.strip()
    if not stripped:
        raise ValueError("encoding cannot be empty")
    try:
        codecs.lookup(stripped)
    except LookupError as e:
        raise ValueError(f"Unknown text encoding: {stripped}") from e
    return stripped


class InputConfig(BaseModel):
    """How source documents are read."""

    encoding: str = Field("utf-8", description="Text encoding of the compared documents")

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        return _validate_encoding(v)


class OutputConfig(BaseModel):
    """How the similarity score is written and displayed."""

    precision: int = Field(
        2, ge=0, le=10, description="Number of decimal digits in the answer file"
    )
    encoding: str = Field("utf-8", description="Text encoding of the answer file")
    echo: bool = Field(True, description="Print the score to stdout after writing it")

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        return _validate_encoding(v)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.WARNING, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True, "validate_default": True}


class AppConfig(BaseModel):
    """Root configuration object for the plagiarism checker.

    Every section has defaults, so an empty or missing config file is valid.
    """

    input: InputConfig = Field(default_factory=InputConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
