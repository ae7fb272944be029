"""Core data models for the UX host."""

from .events import Decoded, DecodeResult, KycEvent, ShapeMismatch
from .channel import MethodCall, MethodResult, ResultStatus

__all__ = [
    # Events
    "KycEvent",
    "Decoded",
    "ShapeMismatch",
    "DecodeResult",
    # Channel
    "MethodCall",
    "MethodResult",
    "ResultStatus",
]
