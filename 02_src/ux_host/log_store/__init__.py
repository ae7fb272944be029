"""LogStore module."""

from .store import ILogStore, LogStore

__all__ = ["ILogStore", "LogStore"]
