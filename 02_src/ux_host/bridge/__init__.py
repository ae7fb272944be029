"""Bridge listener module."""

from .listener import BridgeListener, BridgeStats, IBridgeListener

__all__ = ["BridgeListener", "BridgeStats", "IBridgeListener"]
