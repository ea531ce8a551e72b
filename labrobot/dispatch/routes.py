"""Per-kind routes and the decode-dispatch callable bound to each.

Every event kind is described by one ``EventRoute``: the table key it is
routed under, the Struct its payload decodes into, the capability contract
a robot satisfies to receive it, and the log fields derived from a decoded
event. Routes are registered by decorating their enrichment function.
"""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

import msgspec

from labrobot.errors import PayloadDecodeError
from labrobot.gitlab.constants import GitLabEventType, NoteableType
from labrobot.gitlab.models import (
    Commit,
    IssueAttributes,
    IssueCommentEvent,
    IssueEvent,
    MergeCommentEvent,
    MergeEvent,
    MergeRequestAttributes,
    Project,
    PushEvent,
    Repository,
)
from labrobot.gitlab.paths import (
    issue_comment_author,
    merge_comment_author,
    namespace_root,
    split_org_repo,
)
from labrobot.handlers import (
    IssueCommentHandler,
    IssueEventHandler,
    MergeCommentEventHandler,
    MergeRequestEventHandler,
    PushEventHandler,
)
from labrobot.observability import DispatchEventLogger

if typ.TYPE_CHECKING:
    from labrobot.logging import LogContext

LOG_FIELD_ORG = "org"
LOG_FIELD_REPO = "repo"
LOG_FIELD_URL = "url"
LOG_FIELD_ACTION = "action"
LOG_FIELD_REF = "ref"
LOG_FIELD_HEAD = "head"
LOG_FIELD_COMMENTER = "commenter"


class EventKind(enum.StrEnum):
    """Event kinds a robot can subscribe to."""

    ISSUE = "issue"
    ISSUE_COMMENT = "issue_comment"
    MERGE_REQUEST = "merge_request"
    MERGE_COMMENT = "merge_comment"
    PUSH = "push"


type LogFields = dict[str, str]


@dc.dataclass(frozen=True)
class EventRoute[EventT: msgspec.Struct]:
    """Static description of how one event kind is routed.

    Attributes
    ----------
    kind
        Event kind served by this route.
    event_type
        Dispatch table key for the kind.
    event_class
        Struct the raw payload decodes into.
    capability
        Protocol a robot must satisfy to receive this kind.
    handler_method
        Name of the capability's handler method.
    enrich
        Derives the log fields identifying a decoded event.

    """

    kind: EventKind
    event_type: str
    event_class: type[EventT]
    capability: type
    handler_method: str
    enrich: typ.Callable[[EventT], LogFields]


_routes: dict[EventKind, EventRoute[typ.Any]] = {}


def register[EventT: msgspec.Struct](
    kind: EventKind,
    event_type: str,
    event_class: type[EventT],
    capability: type,
    handler_method: str,
) -> typ.Callable[[typ.Callable[[EventT], LogFields]], typ.Callable[[EventT], LogFields]]:
    """Register the enrichment function of one event kind's route."""

    def _inner(
        func: typ.Callable[[EventT], LogFields],
    ) -> typ.Callable[[EventT], LogFields]:
        _routes[kind] = EventRoute(
            kind=kind,
            event_type=event_type,
            event_class=event_class,
            capability=capability,
            handler_method=handler_method,
            enrich=func,
        )
        return func

    return _inner


def get_route(kind: EventKind) -> EventRoute[typ.Any]:
    """Return the route registered for ``kind``."""
    return _routes[kind]


def iter_routes() -> tuple[EventRoute[typ.Any], ...]:
    """Return every registered route in registration order."""
    return tuple(_routes.values())


def _text(value: str | None) -> str:
    return value or ""


@register(
    EventKind.ISSUE,
    GitLabEventType.ISSUE,
    IssueEvent,
    IssueEventHandler,
    "handle_issue_event",
)
def issue_fields(event: IssueEvent) -> LogFields:
    """Identify an issue event by its URL and action."""
    attributes = event.object_attributes or IssueAttributes()
    return {
        LOG_FIELD_URL: _text(attributes.url),
        LOG_FIELD_ACTION: _text(attributes.action),
    }


@register(
    EventKind.MERGE_REQUEST,
    GitLabEventType.MERGE_REQUEST,
    MergeEvent,
    MergeRequestEventHandler,
    "handle_merge_request_event",
)
def merge_request_fields(event: MergeEvent) -> LogFields:
    """Identify a merge request event by its URL and action."""
    attributes = event.object_attributes or MergeRequestAttributes()
    return {
        LOG_FIELD_URL: _text(attributes.url),
        LOG_FIELD_ACTION: _text(attributes.action),
    }


@register(
    EventKind.PUSH,
    GitLabEventType.PUSH,
    PushEvent,
    PushEventHandler,
    "handle_push_event",
)
def push_fields(event: PushEvent) -> LogFields:
    """Identify a push by namespace, repository, ref and new head."""
    project = event.project or Project()
    repository = event.repository or Repository()
    return {
        LOG_FIELD_ORG: namespace_root(_text(project.path_with_namespace)),
        LOG_FIELD_REPO: _text(repository.name),
        LOG_FIELD_REF: _text(event.ref),
        LOG_FIELD_HEAD: _text(event.after),
    }


@register(
    EventKind.ISSUE_COMMENT,
    NoteableType.ISSUE,
    IssueCommentEvent,
    IssueCommentHandler,
    "handle_issue_comment_event",
)
def issue_comment_fields(event: IssueCommentEvent) -> LogFields:
    """Identify an issue comment by issue URL, issue state and author."""
    issue = event.issue or IssueAttributes()
    return {
        LOG_FIELD_URL: _text(issue.url),
        LOG_FIELD_ACTION: _text(issue.state),
        LOG_FIELD_COMMENTER: issue_comment_author(event),
    }


@register(
    EventKind.MERGE_COMMENT,
    NoteableType.MERGE_REQUEST,
    MergeCommentEvent,
    MergeCommentEventHandler,
    "handle_merge_comment_event",
)
def merge_comment_fields(event: MergeCommentEvent) -> LogFields:
    """Identify a merge request comment by project, last commit and author."""
    project = event.project or Project()
    merge_request = event.merge_request or MergeRequestAttributes()
    last_commit = merge_request.last_commit or Commit()
    org, repo = split_org_repo(_text(project.path_with_namespace))
    return {
        LOG_FIELD_ORG: org,
        LOG_FIELD_REPO: repo,
        LOG_FIELD_URL: _text(last_commit.url),
        LOG_FIELD_COMMENTER: merge_comment_author(event),
    }


class DecodeDispatch[EventT: msgspec.Struct]:
    """Decode one kind's payload, enrich the log context and call the handler.

    Instances are built once per dispatch table and shared by concurrent
    deliveries; calling one touches no state besides the delivery's own
    event and log context.
    """

    def __init__(
        self,
        route: EventRoute[EventT],
        handler: object,
        *,
        events: DispatchEventLogger | None = None,
    ) -> None:
        """Bind ``route`` to the handler method of ``handler``."""
        self.route = route
        self._handle = getattr(handler, route.handler_method)
        self._decoder = msgspec.json.Decoder(route.event_class)
        self._events = events or DispatchEventLogger()

    @property
    def kind(self) -> EventKind:
        """Event kind served by this function."""
        return self.route.kind

    def decode(self, payload: bytes) -> EventT:
        """Decode ``payload`` into the route's event Struct.

        Raises
        ------
        PayloadDecodeError
            If ``payload`` is not JSON or does not match the event schema.

        """
        try:
            return self._decoder.decode(payload)
        except msgspec.ValidationError as exc:
            raise PayloadDecodeError.invalid_payload(self.kind, str(exc)) from exc
        except msgspec.DecodeError as exc:
            raise PayloadDecodeError.malformed_json(self.kind, str(exc)) from exc

    def __call__(self, payload: bytes, log: LogContext) -> None:
        """Process one delivery; every outcome ends in a log record."""
        try:
            event = self.decode(payload)
        except PayloadDecodeError as exc:
            self._events.log_decode_failed(log, exc)
            return

        log = log.with_fields(**self.route.enrich(event))
        try:
            self._handle(event, log)
        except Exception as exc:  # noqa: BLE001 - one delivery must not break routing
            self._events.log_handler_failed(log, kind=self.kind, error=exc)
            return
        self._events.log_handled(log, kind=self.kind)

    def __repr__(self) -> str:
        """Return a debug representation naming the route."""
        return f"DecodeDispatch(kind={self.kind!s}, event_type={self.route.event_type!r})"


__all__ = [
    "LOG_FIELD_ACTION",
    "LOG_FIELD_COMMENTER",
    "LOG_FIELD_HEAD",
    "LOG_FIELD_ORG",
    "LOG_FIELD_REF",
    "LOG_FIELD_REPO",
    "LOG_FIELD_URL",
    "DecodeDispatch",
    "EventKind",
    "EventRoute",
    "get_route",
    "iter_routes",
    "register",
]
