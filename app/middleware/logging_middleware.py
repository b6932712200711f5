"""Logging bridge.

Routes records from the standard library ``logging`` module (Uvicorn, SQLAlchemy)
into Loguru so every log line shares the same sinks and request ID context.
"""

import logging

from app.core.logging import get_logger

_bridge_logger = get_logger("stdlib")


class InterceptHandler(logging.Handler):
    """Intercept standard logging and route to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a log record to Loguru.

        Args:
            record (logging.LogRecord): The log record to emit.
        """
        try:
            level: str | int = _bridge_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        _bridge_logger.bind(name=record.name).opt(
            depth=6,
            exception=record.exc_info,
        ).log(level, record.getMessage())
