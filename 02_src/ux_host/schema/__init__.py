"""Event schema decoding."""

from .decoder import Clock, UNKNOWN_TYPE, current_millis, decode_event, render_meta

__all__ = ["Clock", "UNKNOWN_TYPE", "current_millis", "decode_event", "render_meta"]
