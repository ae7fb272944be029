"""Application bootstrap and lifecycle management."""

from datetime import tzinfo
from typing import Protocol

from .bridge import BridgeListener
from .channel import MethodChannel
from .config import CHANNEL_EVENTS
from .logging_config import get_logger
from .log_store import ILogStore, LogStore
from .presenter import LogPresenter
from .schema import Clock, current_millis

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    def stop(self) -> None:
        """Detach the bridge from its channel."""
        ...

    def reset(self) -> None:
        """Clear the event log."""
        ...


class Application:
    """Creation point for the store and everything that depends on it."""

    def __init__(self, now_millis: Clock = current_millis, tz: tzinfo | None = None):
        self._now_millis = now_millis
        self._tz = tz

        # Components (will be initialized in start())
        self._store: ILogStore | None = None
        self._channel: MethodChannel | None = None
        self._listener: BridgeListener | None = None
        self._presenter: LogPresenter | None = None

    def start(self) -> None:
        """Initialize components in dependency order.

        Components are built once; a restart after stop() only re-attaches
        the listener, so the log survives stop/start cycles.
        """
        if self._store is None:
            logger.info("Starting application")

            # 1. LogStore (no dependencies)
            self._store = LogStore()

            # 2. Channel + BridgeListener (depends on LogStore)
            self._channel = MethodChannel(CHANNEL_EVENTS)
            self._listener = BridgeListener(self._store, now_millis=self._now_millis)

            # 3. LogPresenter (depends on LogStore)
            self._presenter = LogPresenter(self._store, tz=self._tz)
            logger.info("All components initialized successfully")

        self._channel.set_method_call_handler(self._listener.handle)
        logger.info("Listening on channel %s", CHANNEL_EVENTS)

    def stop(self) -> None:
        """Detach the bridge from its channel."""
        if self._channel is not None:
            self._channel.set_method_call_handler(None)
            logger.info("Channel %s detached", self._channel.name)

    def reset(self) -> None:
        """Clear the event log."""
        if self._presenter is not None:
            self._presenter.clear_log()

    def get_channel(self, name: str) -> MethodChannel | None:
        """Get a channel by name, or None if the host has no such channel."""
        if self._channel is not None and self._channel.name == name:
            return self._channel
        return None

    @property
    def store(self) -> ILogStore:
        """Get log store instance."""
        if self._store is None:
            raise RuntimeError("Application not started")
        return self._store

    @property
    def channel(self) -> MethodChannel:
        """Get events channel instance."""
        if self._channel is None:
            raise RuntimeError("Application not started")
        return self._channel

    @property
    def listener(self) -> BridgeListener:
        """Get bridge listener instance."""
        if self._listener is None:
            raise RuntimeError("Application not started")
        return self._listener

    @property
    def presenter(self) -> LogPresenter:
        """Get log presenter instance."""
        if self._presenter is None:
            raise RuntimeError("Application not started")
        return self._presenter
