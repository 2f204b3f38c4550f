from __future__ import annotations

import sys

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"


def configure_logging(level: str = "WARNING", sink=None) -> int:
    """
    Route loguru output to a single sink (stderr by default).

    Stdout is reserved for the accuracy report, so the default sink never
    writes there. Returns the handler id so callers can remove it again.
    """
    logger.remove()
    return logger.add(
        sink if sink is not None else sys.stderr,
        level=level.upper(),
        format=LOG_FORMAT,
        backtrace=False,
        diagnose=False,
    )
