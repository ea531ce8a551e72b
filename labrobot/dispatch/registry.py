"""Capability registry recording which contracts a robot satisfies."""

from __future__ import annotations

from .routes import EventKind, iter_routes


class HandlerRegistry:
    """Map each event kind to the robot registered to handle it.

    ``register`` checks a robot against every capability contract. For each
    contract it satisfies, the robot replaces any earlier handler of that
    kind; contracts it does not satisfy keep their earlier handler. A robot
    satisfying no contract is accepted and changes nothing.

    Examples
    --------
    >>> class PushOnly:
    ...     def handle_push_event(self, event, log): ...
    >>> registry = HandlerRegistry()
    >>> registry.register(PushOnly())
    >>> sorted(registry.capabilities())
    [<EventKind.PUSH: 'push'>]

    """

    def __init__(self) -> None:
        """Start with no registered handlers."""
        self._handlers: dict[EventKind, object] = {}

    def register(self, robot: object) -> None:
        """Record ``robot`` for every contract it satisfies."""
        for route in iter_routes():
            if isinstance(robot, route.capability):
                self._handlers[route.kind] = robot

    def capabilities(self) -> frozenset[EventKind]:
        """Return the event kinds that currently have a handler."""
        return frozenset(self._handlers)

    def handler_for(self, kind: EventKind) -> object | None:
        """Return the handler registered for ``kind``, if any."""
        return self._handlers.get(kind)
