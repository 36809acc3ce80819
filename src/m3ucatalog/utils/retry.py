"""Retry and resilience utilities for playlist retrieval."""

import logging
from functools import wraps

from rich.console import Console

from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

console = Console(stderr=True)
logger = logging.getLogger(__name__)

# ── Custom Exceptions ────────────────────────────────────────────────────────

class M3UCatalogError(Exception):
    """Base exception for m3ucatalog."""
    pass


class RetrievalError(M3UCatalogError):
    """The playlist text could not be retrieved from its source."""

    def __init__(self, source: str, reason: str = ""):
        self.source = source
        self.reason = reason
        message = f"Failed to retrieve playlist from {source}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ConfigError(M3UCatalogError):
    """Invalid configuration or command-line input."""
    pass


# ── Retry Constants ──────────────────────────────────────────────────────────

DEFAULT_MAX_RETRIES = 3
DEFAULT_MIN_WAIT = 1        # seconds
DEFAULT_MAX_WAIT = 10       # seconds
DEFAULT_MULTIPLIER = 2      # exponential backoff multiplier


# ── Retry Decorators ─────────────────────────────────────────────────────────

def retry_fetch(
    operation_name: str = "Fetch",
    max_retries: int = DEFAULT_MAX_RETRIES,
    min_wait: float = DEFAULT_MIN_WAIT,
    max_wait: float = DEFAULT_MAX_WAIT,
    retry_on: tuple = (Exception,),
):
    """Retry decorator for network retrieval.

    Retries on the given exception types with exponential backoff and
    re-raises the last exception once attempts are exhausted.
    """
    def decorator(func):
        @retry(
            stop=stop_after_attempt(max(1, max_retries)),
            wait=wait_exponential(multiplier=DEFAULT_MULTIPLIER, min=min_wait, max=max_wait),
            retry=retry_if_exception_type(retry_on),
            before_sleep=_log_retry(operation_name),
            reraise=True,
        )
        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)
        return wrapper
    return decorator


# ── Logging Helper ───────────────────────────────────────────────────────────

def _log_retry(operation: str):
    """Return a before_sleep callback that logs retry info to both Rich console and logger."""
    def callback(retry_state):
        attempt = retry_state.attempt_number
        wait = retry_state.next_action.sleep if retry_state.next_action else 0
        exception = retry_state.outcome.exception() if retry_state.outcome else None

        exc_type = type(exception).__name__ if exception else "Unknown"
        exc_msg = str(exception)[:200] if exception else ""

        console.print(
            f"[yellow]{operation} failed (attempt {attempt}): "
            f"[{exc_type}] {exc_msg}. Retrying in {wait:.1f}s...[/yellow]"
        )
        logger.warning(
            "%s failed (attempt %d): [%s] %s. Retrying in %.1fs...",
            operation, attempt, exc_type, exc_msg, wait,
        )
    return callback
