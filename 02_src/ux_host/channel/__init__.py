"""Method channel module."""

from .channel import IMethodChannel, MethodCallHandler, MethodChannel

__all__ = ["IMethodChannel", "MethodCallHandler", "MethodChannel"]
