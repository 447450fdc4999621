"""Loguru setup: one stderr sink, plus the Mongo driver's stdlib loggers
forwarded into it. Call ``setup_logging()`` once at startup."""

from __future__ import annotations

import logging
import sys

from loguru import logger

_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

# stdlib loggers emitted by the driver stack
DRIVER_LOGGERS = ("pymongo", "motor")


class InterceptHandler(logging.Handler):
    """Re-emit a stdlib record through loguru, keeping its origin."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        origin = {"name": record.name, "function": record.funcName, "line": record.lineno}
        logger.patch(lambda r: r.update(origin)).opt(exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(*, level: str = "INFO", json: bool = False) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level, format=_FORMAT, serialize=json, colorize=not json)

    for name in DRIVER_LOGGERS:
        driver_logger = logging.getLogger(name)
        driver_logger.handlers = [InterceptHandler()]
        driver_logger.setLevel(level)
        driver_logger.propagate = False
