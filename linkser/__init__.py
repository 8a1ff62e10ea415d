"""Linkser - a small desktop link manager."""

__version__ = "0.1.0"
