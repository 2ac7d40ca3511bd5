"""Thankful: a small personal gratitude journal."""

__version__ = "0.1.0"
