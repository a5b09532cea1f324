"""Logging setup.

Log records go to stderr through rich, leaving stdout free for the MCP
stdio transport.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "devworkflow_py"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Attach a RichHandler to the package logger.

    Args:
        verbose: Log at DEBUG instead of WARNING

    Returns:
        The package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
    logger.propagate = False
    return logger
