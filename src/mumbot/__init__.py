"""Mumble presence notifier for IRC."""

__version__ = "0.1.0"
