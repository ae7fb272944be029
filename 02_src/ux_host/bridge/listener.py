"""Bridge listener for KYC events reported by the embedded module."""

from dataclasses import asdict, dataclass
from typing import Protocol

from ..config import METHOD_ON_KYC_EVENT
from ..logging_config import get_logger
from ..log_store import ILogStore
from ..models import Decoded, MethodCall, MethodResult, ShapeMismatch
from ..schema import Clock, current_millis, decode_event

logger = get_logger(__name__)


@dataclass
class BridgeStats:
    """Counters for calls seen by the listener."""

    received: int = 0
    appended: int = 0
    dropped: int = 0
    not_implemented: int = 0

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


class IBridgeListener(Protocol):
    """Handler for the events channel."""

    def handle(self, call: MethodCall) -> MethodResult:
        """Decode, store and acknowledge one call."""
        ...


class BridgeListener:
    """Decodes onKycEvent calls and appends them to the LogStore."""

    def __init__(self, store: ILogStore, now_millis: Clock = current_millis):
        self._store = store
        self._now_millis = now_millis
        self._stats = BridgeStats()

    @property
    def stats(self) -> BridgeStats:
        return self._stats

    def handle(self, call: MethodCall) -> MethodResult:
        """Decode, store and acknowledge one call."""
        self._stats.received += 1

        if call.method != METHOD_ON_KYC_EVENT:
            self._stats.not_implemented += 1
            logger.warning(
                "Unsupported method on events channel: %s",
                call.method,
                extra={"context": {"method": call.method}},
            )
            return MethodResult.not_implemented()

        decoded = decode_event(call.arguments, self._now_millis)

        if isinstance(decoded, ShapeMismatch):
            # Dropped silently from the sender's point of view
            self._stats.dropped += 1
            logger.warning(
                "Dropped %s payload: expected a key-value structure",
                decoded.payload_type,
                extra={"context": {"payload_type": decoded.payload_type}},
            )
            return MethodResult.success(None)

        if isinstance(decoded, Decoded):
            self._store.append(decoded.event)
            self._stats.appended += 1
            logger.debug(
                "Stored %s event",
                decoded.event.type,
                extra={"context": {"type": decoded.event.type, "step": decoded.event.step}},
            )

        return MethodResult.success(None)
