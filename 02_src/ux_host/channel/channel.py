"""Named method channel between the embedded module and the host."""

import threading
from typing import Any, Callable, Protocol

from ..logging_config import get_logger
from ..models import MethodCall, MethodResult

logger = get_logger(__name__)


MethodCallHandler = Callable[[MethodCall], MethodResult]


class IMethodChannel(Protocol):
    """Single-handler method-invocation path identified by name."""

    name: str

    def set_method_call_handler(self, handler: MethodCallHandler | None) -> None:
        """Register (or remove, with None) the channel's handler."""
        ...

    def invoke(self, method: str, arguments: Any = None) -> MethodResult:
        """Deliver a call to the handler and return its acknowledgment."""
        ...


class MethodChannel:
    """In-process method channel.

    Calls are handled one at a time; every call receives exactly one
    MethodResult, even when no handler is set or the handler fails.
    A handler that invokes its own channel gets an error result for the
    nested call instead of blocking.
    """

    def __init__(self, name: str):
        self.name = name
        self._handler: MethodCallHandler | None = None
        self._lock = threading.RLock()
        self._dispatching: int | None = None  # thread ident inside the handler

    def set_method_call_handler(self, handler: MethodCallHandler | None) -> None:
        """Register (or remove, with None) the channel's handler."""
        with self._lock:
            self._handler = handler

    def invoke(self, method: str, arguments: Any = None) -> MethodResult:
        """Deliver a call to the handler and return its acknowledgment."""
        call = MethodCall(method=method, arguments=arguments)

        if self._dispatching == threading.get_ident():
            logger.error("Re-entrant call to %s on %s rejected", method, self.name)
            return MethodResult.error("re-entrant channel call")

        with self._lock:
            if self._handler is None:
                logger.debug("No handler on %s for %s", self.name, method)
                return MethodResult.not_implemented()

            self._dispatching = threading.get_ident()
            try:
                result = self._handler(call)
            except Exception as e:
                logger.error(
                    "Error in handler for %s on %s: %s",
                    method,
                    self.name,
                    e,
                    exc_info=True,
                )
                return MethodResult.error(str(e))
            finally:
                self._dispatching = None

        if not isinstance(result, MethodResult):
            logger.error("Handler on %s returned %r", self.name, result)
            return MethodResult.error("handler returned no result")
        return result
