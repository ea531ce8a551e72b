"""Build the read-only dispatch table from registered capabilities."""

from __future__ import annotations

import types
import typing as typ

from .routes import DecodeDispatch, iter_routes

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from labrobot.observability import DispatchEventLogger

    from .registry import HandlerRegistry

type DispatchTable = cabc.Mapping[str, DecodeDispatch[typ.Any]]


def build_dispatch_table(
    registry: HandlerRegistry,
    *,
    events: DispatchEventLogger | None = None,
) -> DispatchTable:
    """Return an immutable mapping of event type to decode-dispatch function.

    One entry is produced per capability present in ``registry``, keyed by
    that kind's event type. Kinds without a handler get no entry. Later
    registrations do not change a table that has already been built.

    Parameters
    ----------
    registry
        Registry holding the handler of each event kind.
    events
        Optional outcome logger shared by the table's functions.

    Returns
    -------
    DispatchTable
        Read-only mapping used to route deliveries.

    """
    table: dict[str, DecodeDispatch[typ.Any]] = {}
    for route in iter_routes():
        handler = registry.handler_for(route.kind)
        if handler is None:
            continue
        table[str(route.event_type)] = DecodeDispatch(route, handler, events=events)
    return types.MappingProxyType(table)
