"""Errors raised while decoding deliveries and loading robots."""

from __future__ import annotations

import enum


class PayloadDecodeReason(enum.StrEnum):
    """Machine-readable reasons a payload failed to decode."""

    MALFORMED_JSON = "malformed_json"
    INVALID_PAYLOAD = "invalid_payload"


class PayloadDecodeError(ValueError):
    """Raised when a delivery payload does not decode into its event type."""

    def __init__(
        self,
        message: str,
        *,
        event_kind: str,
        reason: PayloadDecodeReason,
    ) -> None:
        """Store the event kind being decoded and why decoding failed."""
        super().__init__(message)
        self.event_kind = event_kind
        self.reason = reason

    @classmethod
    def malformed_json(cls, event_kind: str, detail: str) -> PayloadDecodeError:
        """Create an error for bytes that are not valid JSON."""
        return cls(
            f"convert to {event_kind} event: malformed JSON: {detail}",
            event_kind=event_kind,
            reason=PayloadDecodeReason.MALFORMED_JSON,
        )

    @classmethod
    def invalid_payload(cls, event_kind: str, detail: str) -> PayloadDecodeError:
        """Create an error for JSON that does not match the event schema."""
        return cls(
            f"convert to {event_kind} event: {detail}",
            event_kind=event_kind,
            reason=PayloadDecodeReason.INVALID_PAYLOAD,
        )


class RobotLoadError(RuntimeError):
    """Raised when a robot import path cannot be resolved."""

    @classmethod
    def invalid_spec(cls, spec: str) -> RobotLoadError:
        """Create an error for import paths not shaped ``module:attribute``."""
        return cls(f"robot must be given as 'module:attribute', got {spec!r}")

    @classmethod
    def missing_module(cls, module: str) -> RobotLoadError:
        """Create an error when the robot module cannot be imported."""
        return cls(f"cannot import robot module {module!r}")

    @classmethod
    def missing_attribute(cls, module: str, attribute: str) -> RobotLoadError:
        """Create an error when the module lacks the named attribute."""
        return cls(f"module {module!r} has no attribute {attribute!r}")

    @classmethod
    def not_configured(cls) -> RobotLoadError:
        """Create an error when no robot was given on the CLI or environment."""
        return cls("no robot given; pass --robot or set LABROBOT_ROBOT")
