"""Logging setup and configuration using Loguru.

This module configures Loguru sinks from the JSON logging configuration and exposes
`get_logger` for named loggers. Stdout gets a colored human-readable format; file sinks
get one JSON object per line.
"""

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any, TextIO

from loguru import logger as loguru_logger

if TYPE_CHECKING:
    from loguru import Logger

from app.core.config.config import settings
from app.core.config.logging_sink import LoggingSink

_JSON_FORMAT = (
    '{{"timestamp":"{time:YYYY-MM-DDTHH:mm:ss.SSSZ}",'
    '"level":"{level}","logger":"{extra[name]}",'
    '"request_id":"{extra[request_id]}","msg":{message!r}}}'
)
_PRETTY_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan>"
    "{extra[request_separator]}<blue>{extra[request_label]}</blue>"
    " | <level>{message}</level>"
)
_NO_REQUEST_ID = "NULL"


def _label_request_id(record: dict[str, Any]) -> bool:
    """Fill the console-only request ID label; records outside a request get none."""
    request_id = record["extra"].get("request_id")
    if request_id and request_id not in (_NO_REQUEST_ID, "-"):
        record["extra"]["request_label"] = request_id
        record["extra"]["request_separator"] = " | "
    else:
        record["extra"]["request_label"] = ""
        record["extra"]["request_separator"] = ""
    return True


def _build_sink_kwargs(sink: LoggingSink, sink_target: str | TextIO) -> dict[str, Any]:
    """Build keyword arguments for configuring a Loguru sink.

    Args:
        sink (LoggingSink): The sink configuration object.
        sink_target (str | TextIO): The sink target (file path or sys.stdout).

    Returns:
        dict[str, Any]: Keyword arguments for loguru_logger.add().
    """
    kwargs: dict[str, Any] = {
        "level": sink.level or "INFO",
        "serialize": bool(sink.serialize),
        "backtrace": bool(sink.backtrace),
        "diagnose": bool(sink.diagnose),
        "enqueue": bool(sink.enqueue),
        "catch": bool(sink.catch),
    }

    if sink_target is sys.stdout:
        kwargs.update(
            format=_PRETTY_FORMAT,
            filter=_label_request_id,
            colorize=True,
        )
        return kwargs

    kwargs.update(
        format=_JSON_FORMAT,
        filter=sink.filter,
        colorize=bool(sink.colorize),
        rotation=sink.rotation,
        retention=sink.retention,
        compression=sink.compression,
    )
    return {key: value for key, value in kwargs.items() if value is not None}


def configure_logging() -> None:
    """Configure global application logging using Loguru and settings-based config."""
    # SQL statements are only logged when explicitly enabled on the engine
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)

    loguru_logger.remove()

    def patch_record(record: dict[str, Any]) -> None:
        record["extra"].setdefault("request_id", _NO_REQUEST_ID)
        record["extra"].setdefault("name", record["name"])

    loguru_logger.configure(patcher=patch_record)

    for sink in settings.logging_sinks:
        if sink.sink == "sys.stdout":
            loguru_logger.add(sys.stdout, **_build_sink_kwargs(sink, sys.stdout))
            continue

        log_path = Path(sink.sink).expanduser().resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        loguru_logger.add(str(log_path), **_build_sink_kwargs(sink, str(log_path)))


def get_logger(name: str | None = None) -> "Logger":
    """Retrieve a configured Loguru logger instance.

    Args:
        name (str | None): Optional logical name to bind to the logger.

    Returns:
        A Loguru logger, optionally bound with a custom name.
    """
    return loguru_logger.bind(name=name) if name else loguru_logger
