"""API routes."""

from . import channels, control, logs

__all__ = ["channels", "control", "logs"]
