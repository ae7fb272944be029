"""Decoding of raw channel payloads into KycEvents."""

import json
import math
import time
from collections.abc import Mapping
from typing import Any, Callable

from ..models import Decoded, DecodeResult, KycEvent, ShapeMismatch

UNKNOWN_TYPE = "unknown"

Clock = Callable[[], int]


def current_millis() -> int:
    """Wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


def decode_event(payload: Any, now_millis: Clock = current_millis) -> DecodeResult:
    """
    Decode an untyped channel payload.

    Individual fields degrade to defaults when missing or mistyped; only a
    payload that is not a mapping at all yields ShapeMismatch. Never raises.

    Args:
        payload: Arguments as delivered by the transport.
        now_millis: Clock used when the sender supplied no timestamp.

    Returns:
        Decoded with the event, or ShapeMismatch.
    """
    if not isinstance(payload, Mapping):
        return ShapeMismatch(payload_type=type(payload).__name__)

    event_type = payload.get("type")
    step = payload.get("step")
    message = payload.get("message")
    meta = payload.get("meta")

    return Decoded(
        KycEvent(
            type=event_type if isinstance(event_type, str) else UNKNOWN_TYPE,
            step=step if isinstance(step, str) else None,
            message=message if isinstance(message, str) else "",
            timestamp_millis=_timestamp(payload.get("timestamp"), now_millis),
            meta=render_meta(meta) if isinstance(meta, Mapping) else None,
        )
    )


def _timestamp(value: Any, now_millis: Clock) -> int:
    # bool is an int subclass but never a timestamp
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return now_millis()
    if isinstance(value, float) and not math.isfinite(value):
        return now_millis()
    return int(value)


def render_meta(meta: Mapping) -> str:
    """Serialize a meta mapping to a deterministic display string."""
    try:
        return json.dumps(
            _normalize(meta),
            sort_keys=True,
            ensure_ascii=False,
            default=repr,
        )
    except (TypeError, ValueError, RecursionError):
        # Self-referencing structures
        return repr(meta)


def _normalize(value: Any) -> Any:
    # Keys are stringified so sort_keys never compares mixed types
    if isinstance(value, Mapping):
        return {str(k): _normalize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_normalize(v) for v in value]
    if isinstance(value, float) and not math.isfinite(value):
        return repr(value)
    return value
