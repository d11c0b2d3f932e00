"""Saved Wi-Fi network candidate nomination."""

__version__ = "0.1.0"
