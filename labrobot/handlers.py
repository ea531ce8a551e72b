"""Capability contracts a robot may implement.

A robot is any object; it handles an event kind by providing that kind's
``handle_*`` method. Each contract is a ``runtime_checkable`` protocol, so
registration detects capabilities with ``isinstance`` and no manifest is
needed. A handler reports failure by raising.

Examples
--------
>>> class Greeter:
...     def handle_push_event(self, event, log):
...         log.info("pushed %s", event.ref)
>>> isinstance(Greeter(), PushEventHandler)
True
>>> isinstance(Greeter(), IssueEventHandler)
False

"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from labrobot.gitlab.models import (
        IssueCommentEvent,
        IssueEvent,
        MergeCommentEvent,
        MergeEvent,
        PushEvent,
    )
    from labrobot.logging import LogContext


@typ.runtime_checkable
class IssueEventHandler(typ.Protocol):
    """Handles ``Issue Hook`` deliveries."""

    def handle_issue_event(self, event: IssueEvent, log: LogContext) -> None:
        """Process one issue event.

        Parameters
        ----------
        event
            Decoded issue payload.
        log
            Delivery context already carrying ``url`` and ``action``.

        """
        ...


@typ.runtime_checkable
class IssueCommentHandler(typ.Protocol):
    """Handles comments left on issues."""

    def handle_issue_comment_event(
        self, event: IssueCommentEvent, log: LogContext
    ) -> None:
        """Process one issue comment event."""
        ...


@typ.runtime_checkable
class MergeRequestEventHandler(typ.Protocol):
    """Handles ``Merge Request Hook`` deliveries."""

    def handle_merge_request_event(self, event: MergeEvent, log: LogContext) -> None:
        """Process one merge request event."""
        ...


@typ.runtime_checkable
class MergeCommentEventHandler(typ.Protocol):
    """Handles comments left on merge requests."""

    def handle_merge_comment_event(
        self, event: MergeCommentEvent, log: LogContext
    ) -> None:
        """Process one merge request comment event."""
        ...


@typ.runtime_checkable
class PushEventHandler(typ.Protocol):
    """Handles ``Push Hook`` deliveries."""

    def handle_push_event(self, event: PushEvent, log: LogContext) -> None:
        """Process one push event."""
        ...


__all__ = [
    "IssueCommentHandler",
    "IssueEventHandler",
    "MergeCommentEventHandler",
    "MergeRequestEventHandler",
    "PushEventHandler",
]
