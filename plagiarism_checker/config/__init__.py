"""Configuration management for the plagiarism checker."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import load_config
from .models import AppConfig, InputConfig, LogFormat, LoggingConfig, LogLevel, OutputConfig

__all__ = [
    "load_config",
    "load_environment_config",
    "AppConfig",
    "InputConfig",
    "OutputConfig",
    "LoggingConfig",
    "EnvironmentConfig",
    "LogLevel",
    "LogFormat",
    "ConfigurationError",
]
