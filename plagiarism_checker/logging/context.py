"""Per-comparison logging context.

ComparisonPipeline.run() opens a log_context holding the run_id and both
document paths; ContextualFilter copies those fields onto every record
emitted while the comparison is in progress, including records from the
documents and similarity layers that never see the run_id themselves.
"""

from contextvars import ContextVar, Token
from typing import Any, Dict, Optional


LogContextVar: ContextVar[Dict[str, Any]] = ContextVar("log_context", default={})


def get_log_context() -> Dict[str, Any]:
    """Snapshot of the fields active for the current comparison."""
    return LogContextVar.get().copy()


def push_log_context(**fields) -> Token:
    """Layer fields over the active context; inner values win on key clashes.

    Returns:
        Token that pop_log_context() uses to drop this layer again
    """
    return LogContextVar.set({**LogContextVar.get(), **fields})


def pop_log_context(token: Token) -> None:
    LogContextVar.reset(token)


def clear_log_context() -> None:
    """Forget every field, so one test's run_id cannot leak into the next."""
    LogContextVar.set({})


class log_context:
    """Scope fields to a block, restoring the outer context on exit.

    Example:
        >>> with log_context(run_id="3f2a...", original_path="orig.txt"):
        ...     logger.info("Documents loaded")  # record carries run_id and original_path
    """

    def __init__(self, **fields):
        self.fields = fields
        self.token: Optional[Token] = None

    def __enter__(self):
        self.token = push_log_context(**self.fields)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token is not None:
            pop_log_context(self.token)
            self.token = None
        return False
