"""Loguru setup for the Pokédex server.

uvicorn and Starlette log through the standard ``logging`` module; their
records are forwarded to loguru so request logs, catalog loading and the
language-switch error trace all come out of one sink.
"""

import inspect
import logging
import sys

from loguru import logger

from pokedex_i18n.config import LOG_LEVEL

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


class _InterceptHandler(logging.Handler):
    """Forward a stdlib ``LogRecord`` to loguru, keeping the caller's location."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip logging-module frames so {name}:{line} points at uvicorn/starlette.
        frame, depth = inspect.currentframe(), 0
        while frame:
            filename = frame.f_code.co_filename
            is_logging = filename == logging.__file__
            is_frozen = "importlib" in filename and "_bootstrap" in filename
            if depth > 0 and not (is_logging or is_frozen):
                break
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Replace loguru's default sink with a stderr sink at ``level`` (POKEDEX_LOG_LEVEL)."""
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, colorize=True, level=level)

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
