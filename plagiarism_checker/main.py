"""Command-line entry point for the plagiarism checker."""

from dotenv import load_dotenv
load_dotenv()

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from plagiarism_checker.config.environment import EnvironmentConfig
from plagiarism_checker.config.exceptions import ConfigurationError
from plagiarism_checker.config.loader import load_config
from plagiarism_checker.config.models import AppConfig
from plagiarism_checker.documents import DocumentError
from plagiarism_checker.logging import get_logger
from plagiarism_checker.logging.config import configure_logging
from plagiarism_checker.pipeline import ComparisonPipeline

logger = get_logger(__name__, component="cli")


def load_runtime_config(
    config_path: Optional[Path], log_level_override: Optional[str]
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load configuration and resolve the effective log settings.

    Log level priority is CLI > environment > config file. Log format
    priority is environment > config file.

    Args:
        config_path: Optional path to configuration file
        log_level_override: Log level from CLI (takes precedence)

    Returns:
        Tuple of (AppConfig, EnvironmentConfig) with log_level and log_format resolved

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    if log_level_override:
        env_config.log_level = log_level_override
    elif not env_config.log_level:
        env_config.log_level = app_config.logging.level

    if not env_config.log_format:
        env_config.log_format = app_config.logging.format

    return app_config, env_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plagiarism-checker",
        description="Compare two text documents and write their similarity score to a file",
    )
    parser.add_argument("original", type=Path, help="Path to the original document")
    parser.add_argument("plagiarized", type=Path, help="Path to the document being checked")
    parser.add_argument("answer", type=Path, help="Path of the file the score is written to")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: plagiarism_checker.yaml if present)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print the score to stdout",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the plagiarism checker.

    Argument errors are reported by argparse, which exits with status 2.

    Returns:
        Exit code (0 for success, 1 for configuration or I/O failure)
    """
    args = build_parser().parse_args(argv)

    try:
        app_config, env_config = load_runtime_config(args.config, args.log_level)

        configure_logging(
            level=env_config.log_level,
            format_type=env_config.log_format,
            environment=env_config.environment,
        )

        pipeline = ComparisonPipeline(app_config)
        result = pipeline.run(args.original, args.plagiarized, args.answer)

        if app_config.output.echo and not args.quiet:
            print(f"Similarity: {result.written}")

        return 0

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return 1
    except DocumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        logger.error(
            f"Comparison failed: {e}",
            extra={
                "event": "comparison.run.failed",
                "error_type": type(e).__name__,
                "path": str(e.path),
            },
        )
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        logger.critical(
            "Unexpected failure during comparison",
            extra={
                "event": "comparison.run.crashed",
                "error_type": type(e).__name__,
                "error": str(e),
            },
            exc_info=True,
        )
        return 1


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
