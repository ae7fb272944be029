"""Event data models reported by the embedded module."""

from dataclasses import dataclass


@dataclass(frozen=True)
class KycEvent:
    """One decoded occurrence reported over the events channel."""

    type: str  # e.g. "flowStarted", "stepCompleted", "error"
    message: str
    timestamp_millis: int  # epoch millis, sender value trusted as-is
    step: str | None = None  # None is distinct from ""
    meta: str | None = None  # display string of the meta mapping


@dataclass(frozen=True)
class Decoded:
    """Payload decoded into an event."""

    event: KycEvent


@dataclass(frozen=True)
class ShapeMismatch:
    """Top-level payload was not a key-value structure."""

    payload_type: str  # type name of what was received


DecodeResult = Decoded | ShapeMismatch
