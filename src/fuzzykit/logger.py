from __future__ import annotations

"""Loguru sink setup for the command line.

The library itself stays silent (``logger.disable("fuzzykit")`` in the
package ``__init__``); applications opt in by calling
:func:`configure_logging`.
"""

import sys
from typing import Optional, TextIO

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> - "
    "<level>{message}</level>"
)


def configure_logging(level: str = "WARNING", *, sink: Optional[TextIO] = None) -> int:
    """Replace loguru's default handler with a single formatted sink.

    Returns the handler id so callers can remove it again.
    """

    logger.remove()
    logger.enable("fuzzykit")
    return logger.add(
        sink or sys.stderr,
        level=level.upper(),
        format=LOG_FORMAT,
        backtrace=False,
        diagnose=False,
    )


__all__ = ["configure_logging", "logger"]
