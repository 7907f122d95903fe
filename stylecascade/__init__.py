"""Layered highlighting style and keyword resolution."""

__version__ = "0.1.0"
