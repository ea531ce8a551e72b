"""Capability registration and delivery routing.

Public API
----------
HandlerRegistry
    Records which capability contracts each registered robot satisfies.
build_dispatch_table
    Builds the read-only event type to decode-dispatch mapping.
Dispatcher
    Routes deliveries through a dispatch table.
RouteOutcome
    ``DISPATCHED`` or ``NO_HANDLER_REGISTERED``.
resolve_event_type
    Maps ``X-Gitlab-Event`` header values to dispatch table keys.
"""

from __future__ import annotations

from .dispatcher import Delivery, Dispatcher, RouteOutcome, resolve_event_type
from .registry import HandlerRegistry
from .routes import DecodeDispatch, EventKind, EventRoute, get_route, iter_routes
from .table import DispatchTable, build_dispatch_table

__all__ = [
    "DecodeDispatch",
    "Delivery",
    "DispatchTable",
    "Dispatcher",
    "EventKind",
    "EventRoute",
    "HandlerRegistry",
    "RouteOutcome",
    "build_dispatch_table",
    "get_route",
    "iter_routes",
    "resolve_event_type",
]
