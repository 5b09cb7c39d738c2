"""CLI helper utilities."""

from .theme import Icons, ThemedConsole, get_themed_console


__all__ = ["Icons", "ThemedConsole", "get_themed_console"]
