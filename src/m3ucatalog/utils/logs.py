"""Logging setup."""

import logging

from rich.logging import RichHandler


def setup_logging(level: str = "WARNING"):
    """Route log records through Rich, at the given level name."""
    numeric = getattr(logging, str(level).upper(), None)
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logging.basicConfig(
        level=numeric,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
