"""Pytest configuration and fixtures."""

import sys
from datetime import timezone
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

# 2023-11-14 22:13:20 UTC
FIXED_NOW_MS = 1_700_000_000_000


@pytest.fixture
def fixed_clock():
    """Clock that always returns FIXED_NOW_MS."""
    return lambda: FIXED_NOW_MS


@pytest.fixture
def store():
    """Create an empty LogStore."""
    from ux_host.log_store import LogStore

    return LogStore()


@pytest.fixture
def listener(store, fixed_clock):
    """Create BridgeListener writing into store."""
    from ux_host.bridge import BridgeListener

    return BridgeListener(store, now_millis=fixed_clock)


@pytest.fixture
def channel(listener):
    """Create events channel with the listener registered."""
    from ux_host.channel import MethodChannel
    from ux_host.config import CHANNEL_EVENTS

    ch = MethodChannel(CHANNEL_EVENTS)
    ch.set_method_call_handler(listener.handle)
    return ch


@pytest.fixture
def presenter(store):
    """Create LogPresenter rendering in UTC."""
    from ux_host.presenter import LogPresenter

    return LogPresenter(store, tz=timezone.utc)


@pytest.fixture
def application(fixed_clock):
    """Create and start an Application."""
    from ux_host.app import Application

    app = Application(now_millis=fixed_clock, tz=timezone.utc)
    app.start()
    yield app
    app.stop()


@pytest.fixture
def make_event():
    """Factory for KycEvents."""
    from ux_host.models import KycEvent

    def _make(
        type: str = "flowStarted",
        message: str = "",
        timestamp_millis: int = FIXED_NOW_MS,
        step: str | None = None,
        meta: str | None = None,
    ):
        return KycEvent(
            type=type,
            message=message,
            timestamp_millis=timestamp_millis,
            step=step,
            meta=meta,
        )

    return _make
