"""Runnable examples of creational and structural design patterns."""

__version__ = "0.1.0"