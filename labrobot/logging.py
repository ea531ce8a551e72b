"""Logging helpers and the structured log context carried per delivery.

Messages are pre-formatted with percent-style interpolation before they reach
femtologging. ``LogContext`` adds a bag of ``key=value`` fields that is
extended as a delivery moves through the dispatch stages.

Example:
>>> from labrobot.logging import LogContext
>>> log = LogContext.for_logger(__name__, event="Push Hook")
>>> log.with_fields(org="acme").info("handled %s", "push")

"""

from __future__ import annotations

import dataclasses as dc
import enum
import types
import typing as typ

import msgspec
from femtologging import basicConfig, get_logger

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class LogLevel(enum.StrEnum):
    """Supported log levels for femtologging."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def normalize_log_level(level: str | None) -> tuple[str, bool]:
    """Normalize a log level string and report invalid inputs.

    Parameters
    ----------
    level : str | None
        Raw log level string to normalize.

    Returns
    -------
    tuple[str, bool]
        The normalized log level and a flag indicating invalid input.

    """
    if not level:
        return ("INFO", True)

    normalized = level.strip().upper()
    if normalized in LogLevel.__members__:
        return (normalized, False)

    return ("INFO", True)


def configure_logging(level: str, *, force: bool = False) -> tuple[str, bool]:
    """Configure femtologging and return the normalized level."""
    normalized, invalid = normalize_log_level(level)
    basicConfig(level=normalized, force=force)
    return (normalized, invalid)


class SupportsLog(typ.Protocol):
    """Protocol for femtologging-compatible loggers."""

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
    logger: SupportsLog,
    level: LogLevel,
    template: str,
    args: tuple[object, ...],
    exc_info: object | None,
) -> None:
    message = template % args if args else template
    logger.log(level.value, message, exc_info=exc_info, stack_info=False)


def log_info(
    logger: SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Log an INFO message with percent-style formatting."""
    _emit(logger, LogLevel.INFO, template, args, exc_info)


def log_warning(
    logger: SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Log a WARNING message with percent-style formatting."""
    _emit(logger, LogLevel.WARNING, template, args, exc_info)


def log_error(
    logger: SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Log an ERROR message with percent-style formatting."""
    _emit(logger, LogLevel.ERROR, template, args, exc_info)


_QUOTE_TRIGGERS = frozenset(' \t\n="')


def format_field_value(value: object) -> str:
    """Render one field value for ``key=value`` output.

    Empty values and values containing whitespace, ``=`` or quotes are
    JSON-quoted so the rendered pairs stay unambiguous.

    Examples
    --------
    >>> format_field_value("refs/heads/main")
    'refs/heads/main'
    >>> format_field_value("")
    '""'

    """
    text = value if isinstance(value, str) else str(value)
    if not text or any(char in _QUOTE_TRIGGERS for char in text):
        return msgspec.json.encode(text).decode()
    return text


@dc.dataclass(frozen=True, slots=True)
class LogContext:
    """Logger plus the structured fields attached to every record it emits.

    Contexts are immutable. ``with_fields`` returns a child context carrying
    the parent's fields merged with the new ones, so one delivery can enrich
    its context without affecting any other delivery sharing the parent.

    Attributes
    ----------
    logger
        femtologging-compatible logger receiving the rendered records.
    fields
        Read-only mapping of field names to values, in insertion order.

    """

    logger: SupportsLog
    fields: cabc.Mapping[str, object] = dc.field(
        default_factory=lambda: types.MappingProxyType({})
    )

    @classmethod
    def for_logger(cls, name: str, **fields: object) -> LogContext:
        """Build a base context around the named femtologging logger."""
        return cls(get_logger(name), types.MappingProxyType(dict(fields)))

    def with_fields(self, **fields: object) -> LogContext:
        """Return a child context with ``fields`` merged over this one's."""
        merged = {**self.fields, **fields}
        return LogContext(self.logger, types.MappingProxyType(merged))

    def render(self, template: str, *args: object) -> str:
        """Format ``template`` and append this context's fields."""
        message = template % args if args else template
        pairs = " ".join(
            f"{key}={format_field_value(value)}" for key, value in self.fields.items()
        )
        if not pairs:
            return message
        if not message:
            return pairs
        return f"{message} {pairs}"

    def info(self, template: str = "", *args: object) -> None:
        """Log an INFO record carrying this context's fields."""
        log_info(self.logger, "%s", self.render(template, *args))

    def warning(self, template: str = "", *args: object) -> None:
        """Log a WARNING record carrying this context's fields."""
        log_warning(self.logger, "%s", self.render(template, *args))

    def error(
        self,
        template: str = "",
        *args: object,
        exc_info: object | None = None,
    ) -> None:
        """Log an ERROR record carrying this context's fields."""
        log_error(
            self.logger,
            "%s",
            self.render(template, *args),
            exc_info=exc_info,
        )


__all__ = [
    "LogContext",
    "LogLevel",
    "SupportsLog",
    "configure_logging",
    "format_field_value",
    "get_logger",
    "log_error",
    "log_info",
    "log_warning",
    "normalize_log_level",
]
