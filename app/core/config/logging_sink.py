"""Logging sink configuration.

Each entry of the ``sinks`` list in ``config/logging.json`` becomes one LoggingSink.
"""

from collections.abc import Callable
from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True)
class LoggingSink:
    """A single Loguru sink as described in the logging configuration file.

    Attributes:
        sink (Any): ``"sys.stdout"`` or a log file path.
        level (str | None): Minimum level written to the sink.
        serialize (bool | None): Let Loguru serialize records as JSON.
        rotation (str | None): Rotation policy for file sinks, e.g. ``"10 MB"``.
        retention (str | None): Retention policy for rotated files.
        compression (str | None): Compression applied to rotated files.
        backtrace (bool | None): Extend tracebacks beyond the catching frame.
        diagnose (bool | None): Show variable values in tracebacks.
        enqueue (bool | None): Write through a multiprocessing-safe queue.
        filter (Callable | dict | str | None): Loguru record filter.
        colorize (bool | None): Colorize output.
        catch (bool | None): Catch errors raised by the sink itself.
    """

    sink: Any
    level: str | None = None
    serialize: bool | None = None
    rotation: str | None = None
    retention: str | None = None
    compression: str | None = None
    backtrace: bool | None = None
    diagnose: bool | None = None
    enqueue: bool | None = None
    filter: Callable[..., bool] | dict[str, Any] | str | None = None
    colorize: bool | None = None
    catch: bool | None = None

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "LoggingSink":
        """Create a LoggingSink from one configuration entry.

        Unknown keys are ignored and missing keys fall back to None.

        Args:
            data (dict[str, Any]): The sink entry.

        Returns:
            LoggingSink: The constructed sink configuration.
        """
        known = {field.name for field in fields(LoggingSink)}
        return LoggingSink(**{k: v for k, v in data.items() if k in known})
