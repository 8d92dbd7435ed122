"""Toolkit-free helpers for a Discord chat client: name colors, emoji
cleanup, layout sizes, event dispatch and channel and user names."""

__version__ = "0.1.0"