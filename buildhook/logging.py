"""Logging helpers built on femtologging.

Buildhook emits pre-formatted messages through femtologging so every module
logs with the same level names and percent-style interpolation.

Example:
>>> from buildhook.logging import get_logger, log_info
>>> logger = get_logger(__name__)
>>> log_info(logger, "Accepted %s event for %s", "push", "alice/widget")

"""

from __future__ import annotations

import enum
import typing as typ

from femtologging import basicConfig, get_logger

DEFAULT_LOG_LEVEL = "INFO"


class LogLevel(enum.StrEnum):
    """Level names accepted by ``BUILDHOOK_LOG_LEVEL``."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def normalize_log_level(level: str | None) -> tuple[str, bool]:
    """Normalize a log level name, flagging unknown or empty input.

    Parameters
    ----------
    level : str | None
        Raw level name, usually read from the environment.

    Returns
    -------
    tuple[str, bool]
        The upper-cased level (``INFO`` when the input is unusable) and
        ``True`` when the input had to be replaced.

    """
    candidate = (level or "").strip().upper()
    if candidate in LogLevel.__members__:
        return (candidate, False)
    return (DEFAULT_LOG_LEVEL, True)


def configure_logging(level: str | None, *, force: bool = False) -> tuple[str, bool]:
    """Install the femtologging root configuration at ``level``.

    Returns the same pair as :func:`normalize_log_level` so callers can warn
    about a rejected level once logging is live.
    """
    normalized, invalid = normalize_log_level(level)
    basicConfig(level=normalized, force=force)
    return (normalized, invalid)


class _SupportsLog(typ.Protocol):
    """Subset of the femtologging logger API used here."""

    def log(
        self,
        level: str,
        message: str,
        /,
        *,
        exc_info: object | None = None,
        stack_info: bool = False,
    ) -> str | None: ...


def _emit(
    logger: _SupportsLog,
    level: str,
    template: str,
    args: tuple[object, ...],
    exc_info: object | None,
) -> None:
    message = template % args if args else template
    logger.log(level, message, exc_info=exc_info, stack_info=False)


def log_debug(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Log a DEBUG message with percent-style formatting."""
    _emit(logger, "DEBUG", template, args, exc_info)


def log_info(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Log an INFO message with percent-style formatting.

    Parameters
    ----------
    logger : _SupportsLog
        Destination logger.
    template : str
        Message template using percent-style placeholders.
    *args : object
        Values interpolated into ``template``.
    exc_info : object | None, optional
        Exception attached to the record.

    """
    _emit(logger, "INFO", template, args, exc_info)


def log_warning(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Log a WARNING message with percent-style formatting."""
    _emit(logger, "WARNING", template, args, exc_info)


def log_error(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Log an ERROR message with percent-style formatting."""
    _emit(logger, "ERROR", template, args, exc_info)


def log_exception(logger: _SupportsLog, message: str, exc: BaseException) -> None:
    """Log ``message`` at ERROR with ``exc`` attached as exc_info."""
    logger.log("ERROR", message, exc_info=exc, stack_info=False)


__all__ = [
    "DEFAULT_LOG_LEVEL",
    "LogLevel",
    "configure_logging",
    "get_logger",
    "log_debug",
    "log_error",
    "log_exception",
    "log_info",
    "log_warning",
    "normalize_log_level",
]
