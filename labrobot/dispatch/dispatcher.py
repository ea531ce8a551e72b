"""Route inbound deliveries through the dispatch table."""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

import msgspec

from labrobot.gitlab.constants import NOTE_EVENT_TYPES, GitLabEventType
from labrobot.gitlab.models import NoteTarget

from .registry import HandlerRegistry
from .table import build_dispatch_table

if typ.TYPE_CHECKING:
    from labrobot.logging import LogContext
    from labrobot.observability import DispatchEventLogger

    from .table import DispatchTable


class RouteOutcome(enum.StrEnum):
    """Result of routing one delivery."""

    DISPATCHED = "dispatched"
    NO_HANDLER_REGISTERED = "no_handler_registered"


@dc.dataclass(frozen=True, slots=True)
class Delivery:
    """One inbound webhook delivery.

    Attributes
    ----------
    event_type
        Dispatch table key, e.g. ``Push Hook`` or, for comments, the
        noteable type ``Issue`` or ``MergeRequest``.
    payload
        Raw JSON body.
    log
        Base log context supplied by the transport.

    """

    event_type: str
    payload: bytes
    log: LogContext


_note_decoder = msgspec.json.Decoder(NoteTarget)


def resolve_event_type(header_event: str, payload: bytes) -> str:
    """Map an ``X-Gitlab-Event`` header value to a dispatch table key.

    Comments on issues and on merge requests share the ``Note Hook`` header,
    so note deliveries are keyed by the payload's ``noteable_type`` instead.
    A note payload that cannot be decoded, or carries no ``noteable_type``,
    keeps the header value, which has no route. ``Confidential Issue Hook``
    shares the issue route. Other header values are returned unchanged.

    Examples
    --------
    >>> resolve_event_type("Push Hook", b"{}")
    'Push Hook'
    >>> resolve_event_type("Confidential Issue Hook", b"{}")
    'Issue Hook'
    >>> resolve_event_type(
    ...     "Note Hook", b'{"object_attributes": {"noteable_type": "Issue"}}'
    ... )
    'Issue'

    """
    if header_event == GitLabEventType.CONFIDENTIAL_ISSUE:
        return str(GitLabEventType.ISSUE)
    if header_event not in NOTE_EVENT_TYPES:
        return header_event
    try:
        note = _note_decoder.decode(payload)
    except msgspec.DecodeError:
        return header_event
    if note.object_attributes is None:
        return header_event
    return note.object_attributes.noteable_type or header_event


class Dispatcher:
    """Entry point routing each delivery to its decode-dispatch function.

    The table is fixed at construction and only read afterwards, so ``route``
    may be called from several threads at once without locking.
    """

    def __init__(self, table: DispatchTable) -> None:
        """Wrap a table produced by ``build_dispatch_table``."""
        self._table = table

    @classmethod
    def for_robot(
        cls,
        robot: object,
        *,
        events: DispatchEventLogger | None = None,
    ) -> Dispatcher:
        """Register ``robot`` and build a dispatcher for its capabilities."""
        registry = HandlerRegistry()
        registry.register(robot)
        return cls(build_dispatch_table(registry, events=events))

    @property
    def table(self) -> DispatchTable:
        """Read-only dispatch table."""
        return self._table

    def handles(self, event_type: str) -> bool:
        """Return whether ``event_type`` has a registered handler."""
        return event_type in self._table

    def route(self, event_type: str, payload: bytes, log: LogContext) -> RouteOutcome:
        """Route one delivery.

        Parameters
        ----------
        event_type
            Dispatch table key of the delivery.
        payload
            Raw JSON body.
        log
            Base log context for the delivery.

        Returns
        -------
        RouteOutcome
            ``NO_HANDLER_REGISTERED`` when no robot subscribed to
            ``event_type``; the payload is not decoded in that case.
            ``DISPATCHED`` once the bound function has returned. Decode and
            handler failures are logged by that function, never raised.

        """
        dispatch = self._table.get(event_type)
        if dispatch is None:
            return RouteOutcome.NO_HANDLER_REGISTERED
        dispatch(payload, log)
        return RouteOutcome.DISPATCHED

    def route_delivery(self, delivery: Delivery) -> RouteOutcome:
        """Route a ``Delivery``."""
        return self.route(delivery.event_type, delivery.payload, delivery.log)
