from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def init_logging(level: str = "WARNING", console: Console | None = None) -> None:
    """Initialize root logging configuration.

    Parameters
    ----------
    level: str
        Logging level name, e.g. "DEBUG", "INFO", "WARNING", "ERROR".
    console: Console | None
        Rich console to log to. Defaults to stderr.
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )

    logging.basicConfig(
        level=numeric_level,
        format="%(name)s | %(message)s",
        datefmt="%H:%M:%S",
        handlers=[handler],
        force=True,
    )
