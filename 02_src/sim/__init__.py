"""Embedded-module simulator."""

from .sim import SCENARIO, ISim, Sim

__all__ = ["SCENARIO", "ISim", "Sim"]
