"""Loguru setup shared by the CLI and the server.

Modules log through ``from loguru import logger`` and attach context with
``logger.bind(...)``. Third-party code that uses the standard ``logging``
module (uvicorn, httpx, fastapi) is routed into loguru by ``InterceptHandler``.
"""

from __future__ import annotations

import inspect
import logging
import sys
from typing import Any

from loguru import logger

from daemonmd.config import DAEMONMD_LOG_LEVEL

CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | {name} | <level>{message}</level>"

# Loggers that install their own handlers and would otherwise bypass the root logger.
INTERCEPTED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi", "httpx")


class InterceptHandler(logging.Handler):
    """Forward standard-library log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find the caller that issued the record so loguru reports its location.
        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.bind(logger_name=record.name).opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _format(record: dict[str, Any]) -> str:
    """Render bound extras as ``key=value`` pairs after the message."""
    fmt = CONSOLE_FORMAT
    extra = record["extra"]
    if extra:
        pairs = " ".join(f"{key}={{extra[{key}]!r}}" for key in sorted(extra))
        fmt += " | " + pairs
    return fmt + "\n{exception}"


def configure_logging(level: str | int = DAEMONMD_LOG_LEVEL) -> None:
    """Replace loguru's default sink and capture standard-library logging.

    Logs go to stderr so the CLI can keep stdout for reports.
    """
    if isinstance(level, str):
        level = level.upper()

    logger.remove()
    logger.add(sys.stderr, format=_format, level=level, colorize=None)

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in INTERCEPTED_LOGGERS:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False
