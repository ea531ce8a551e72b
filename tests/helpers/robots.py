"""Robots used to exercise registration and routing."""

from __future__ import annotations

import dataclasses
import threading
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


@dataclasses.dataclass(frozen=True, slots=True)
class HandledCall:
    """One handler invocation seen by a recording robot."""

    method: str
    event: object
    log: LogContext


class _Recorder:
    def __init__(self) -> None:
        self.calls: list[HandledCall] = []
        self._lock = threading.Lock()

    def _record(self, method: str, event: object, log: LogContext) -> None:
        with self._lock:
            self.calls.append(HandledCall(method, event, log))

    def methods(self) -> list[str]:
        """Return the handler method name of every recorded call."""
        return [call.method for call in self.calls]


class RecordingRobot(_Recorder):
    """Implements every capability and records each call."""

    def handle_issue_event(self, event: IssueEvent, log: LogContext) -> None:
        """Record an issue event."""
        self._record("handle_issue_event", event, log)

    def handle_issue_comment_event(
        self, event: IssueCommentEvent, log: LogContext
    ) -> None:
        """Record an issue comment event."""
        self._record("handle_issue_comment_event", event, log)

    def handle_merge_request_event(self, event: MergeEvent, log: LogContext) -> None:
        """Record a merge request event."""
        self._record("handle_merge_request_event", event, log)

    def handle_merge_comment_event(
        self, event: MergeCommentEvent, log: LogContext
    ) -> None:
        """Record a merge request comment event."""
        self._record("handle_merge_comment_event", event, log)

    def handle_push_event(self, event: PushEvent, log: LogContext) -> None:
        """Record a push event."""
        self._record("handle_push_event", event, log)


class PushOnlyRobot(_Recorder):
    """Implements only the push capability."""

    def handle_push_event(self, event: PushEvent, log: LogContext) -> None:
        """Record a push event."""
        self._record("handle_push_event", event, log)


class IssueOnlyRobot(_Recorder):
    """Implements only the issue capability."""

    def handle_issue_event(self, event: IssueEvent, log: LogContext) -> None:
        """Record an issue event."""
        self._record("handle_issue_event", event, log)


class IdleRobot:
    """Implements no capability."""

    def describe(self) -> str:
        """Return a label unrelated to any contract."""
        return "idle"


class HandlerFailedError(RuntimeError):
    """Raised by ``FailingRobot`` handlers."""


class FailingRobot(RecordingRobot):
    """Records the call, then fails the push handler."""

    def handle_push_event(self, event: PushEvent, log: LogContext) -> None:
        """Record a push event and raise."""
        super().handle_push_event(event, log)
        msg = "push rejected"
        raise HandlerFailedError(msg)


HANDLER_METHODS: tuple[str, ...] = (
    "handle_issue_event",
    "handle_issue_comment_event",
    "handle_merge_request_event",
    "handle_merge_comment_event",
    "handle_push_event",
)


def robot_with(methods: typ.Iterable[str]) -> _Recorder:
    """Build a recording robot implementing exactly ``methods``."""
    namespace: dict[str, object] = {}
    for method in methods:

        def _handle(
            self: _Recorder, event: object, log: LogContext, _name: str = method
        ) -> None:
            self._record(_name, event, log)

        namespace[method] = _handle
    robot_class = type("GeneratedRobot", (_Recorder,), namespace)
    return typ.cast("_Recorder", robot_class())
