"""Motorcycle riding-condition scoring and forecast windows."""

__version__ = "0.1.0"
