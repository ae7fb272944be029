"""UX host: event log for the universal experience module."""

from .app import Application, IApplication
from .bridge import BridgeListener, BridgeStats, IBridgeListener
from .channel import IMethodChannel, MethodChannel
from .log_store import ILogStore, LogStore
from .models import (
    Decoded,
    DecodeResult,
    KycEvent,
    MethodCall,
    MethodResult,
    ResultStatus,
    ShapeMismatch,
)
from .presenter import ILogPresenter, LogPresenter, RenderedEntry
from .schema import decode_event

__all__ = [
    # Application
    "Application",
    "IApplication",
    # Models
    "KycEvent",
    "Decoded",
    "ShapeMismatch",
    "DecodeResult",
    "MethodCall",
    "MethodResult",
    "ResultStatus",
    # Components
    "decode_event",
    "ILogStore",
    "LogStore",
    "IMethodChannel",
    "MethodChannel",
    "IBridgeListener",
    "BridgeListener",
    "BridgeStats",
    "ILogPresenter",
    "LogPresenter",
    "RenderedEntry",
]
