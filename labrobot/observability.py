"""Emit structured observability events for delivery outcomes.

Each decode-dispatch call ends in exactly one of these events. Records are
written through the delivery's ``LogContext`` so they carry its fields.

Usage
-----
>>> events = DispatchEventLogger()
>>> events.log_handled(log, kind="push")

"""

from __future__ import annotations

import enum
import typing as typ

if typ.TYPE_CHECKING:
    from labrobot.errors import PayloadDecodeError
    from labrobot.logging import LogContext


class DispatchEventType(enum.StrEnum):
    """Structured log event types for delivery processing."""

    DELIVERY_HANDLED = "dispatch.delivery.handled"
    DELIVERY_HANDLER_FAILED = "dispatch.delivery.handler_failed"
    DELIVERY_DECODE_FAILED = "dispatch.delivery.decode_failed"


class DispatchEventLogger:
    """Emit delivery outcome events via a ``LogContext``."""

    def log_handled(self, log: LogContext, *, kind: str) -> None:
        """Log that a handler returned normally."""
        log.info("[%s] kind=%s", DispatchEventType.DELIVERY_HANDLED, kind)

    def log_handler_failed(
        self,
        log: LogContext,
        *,
        kind: str,
        error: Exception,
    ) -> None:
        """Log a handler failure with the error type and message.

        Parameters
        ----------
        log
            Enriched delivery context.
        kind
            Event kind whose handler raised.
        error
            Exception raised by the handler, attached as ``exc_info``.

        """
        log.error(
            "[%s] kind=%s error_type=%s error_message=%s",
            DispatchEventType.DELIVERY_HANDLER_FAILED,
            kind,
            type(error).__name__,
            str(error),
            exc_info=error,
        )

    def log_decode_failed(self, log: LogContext, error: PayloadDecodeError) -> None:
        """Log a payload that could not be decoded, including the detail."""
        log.error(
            "[%s] kind=%s reason=%s error_message=%s",
            DispatchEventType.DELIVERY_DECODE_FAILED,
            error.event_kind,
            error.reason,
            str(error),
        )
