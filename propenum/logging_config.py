"""Logging setup shared by the library and the command line tool.

Library modules only ever call :func:`get_logger`; handlers are installed by
the entry point through :func:`setup_logging`.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Get logger by name (typically ``__name__``)."""
    return logging.getLogger(name)


def setup_logging(level: str = "WARNING", show_path: bool = False) -> None:
    """Install a rich handler on the ``propenum`` logger.

    Repeated calls only update the level, they never stack handlers.

    Args:
        level: Logging level name ("DEBUG", "INFO", ...).
        show_path: Show the emitting module path next to each record.
    """
    global _configured

    logger = logging.getLogger("propenum")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    if _configured:
        return

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=show_path,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.propagate = False
    _configured = True
