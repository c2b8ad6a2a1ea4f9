"""Dining philosophers simulation with text, formatting and line-reading helpers."""

__version__ = "0.1.0"