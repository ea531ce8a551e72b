"""Replay a recorded webhook delivery through a robot."""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

from .config import DispatchConfig
from .dispatch import Dispatcher, RouteOutcome, resolve_event_type
from .errors import RobotLoadError
from .logging import LogContext, configure_logging, get_logger, log_warning

logger = get_logger(__name__)

EXIT_NO_HANDLER = 2


def load_robot(spec: str) -> object:
    """Import a robot from a ``module:attribute`` path.

    Classes are instantiated without arguments; any other attribute is used
    as the robot directly.

    Raises
    ------
    RobotLoadError
        If ``spec`` is malformed or does not resolve.

    """
    module_name, sep, attribute = spec.partition(":")
    if not (module_name and sep and attribute):
        raise RobotLoadError.invalid_spec(spec)
    try:
        module = importlib.import_module(module_name)
    except ModuleNotFoundError as exc:
        raise RobotLoadError.missing_module(module_name) from exc
    try:
        target = getattr(module, attribute)
    except AttributeError as exc:
        raise RobotLoadError.missing_attribute(module_name, attribute) from exc
    if isinstance(target, type):
        return target()
    return target


def _read_payload(source: str) -> bytes:
    if source == "-":
        return sys.stdin.buffer.read()
    return Path(source).read_bytes()


def main(argv: list[str] | None = None) -> int:
    """Route one recorded delivery and report the outcome.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.

    Returns
    -------
    int
        Exit code: 0 when dispatched, 2 when the robot has no handler for
        the event, 1 when configuration or the robot cannot be loaded.

    """
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "event",
        help="X-Gitlab-Event header value, e.g. 'Push Hook' or 'Note Hook'",
    )
    parser.add_argument("payload", help="JSON payload file, or '-' for stdin")
    parser.add_argument(
        "--robot",
        default=None,
        help="Robot as 'module:attribute' (defaults to LABROBOT_ROBOT)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="femtologging level (defaults to LABROBOT_LOG_LEVEL or INFO)",
    )
    args = parser.parse_args(argv)

    try:
        config = DispatchConfig.from_env()
    except ValueError as exc:
        print(f"invalid configuration: {exc}", file=sys.stderr)
        return 1

    requested_level = args.log_level or config.log_level
    level, invalid_level = configure_logging(requested_level, force=True)
    if invalid_level:
        log_warning(
            logger,
            "Invalid log level %r, falling back to %s",
            requested_level,
            level,
        )

    try:
        robot_spec = args.robot or config.robot
        if robot_spec is None:
            raise RobotLoadError.not_configured()  # noqa: TRY301 - one error path for all load failures
        robot = load_robot(robot_spec)
    except RobotLoadError as exc:
        print(f"cannot load robot: {exc}", file=sys.stderr)
        return 1

    payload = _read_payload(args.payload)
    event_type = resolve_event_type(args.event, payload)
    dispatcher = Dispatcher.for_robot(robot)
    log = LogContext.for_logger("labrobot.replay", event=event_type, source="replay")

    outcome = dispatcher.route(event_type, payload, log)
    print(f"{event_type}: {outcome}")
    if outcome is RouteOutcome.NO_HANDLER_REGISTERED:
        return EXIT_NO_HANDLER
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
