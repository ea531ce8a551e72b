"""Route GitLab webhook deliveries to robots by the events they handle."""

from __future__ import annotations

from .dispatch import (
    Delivery,
    Dispatcher,
    EventKind,
    HandlerRegistry,
    RouteOutcome,
    build_dispatch_table,
    resolve_event_type,
)
from .handlers import (
    IssueCommentHandler,
    IssueEventHandler,
    MergeCommentEventHandler,
    MergeRequestEventHandler,
    PushEventHandler,
)
from .logging import LogContext

__version__ = "0.1.0"

__all__ = [
    "Delivery",
    "Dispatcher",
    "EventKind",
    "HandlerRegistry",
    "IssueCommentHandler",
    "IssueEventHandler",
    "LogContext",
    "MergeCommentEventHandler",
    "MergeRequestEventHandler",
    "PushEventHandler",
    "RouteOutcome",
    "__version__",
    "build_dispatch_table",
    "resolve_event_type",
]
