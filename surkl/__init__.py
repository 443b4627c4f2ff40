"""Colour palettes, theme management with SQLite storage, and view and window interaction state."""

__version__ = "0.1.0"
__all__ = ["color", "lds", "palette", "store", "theme", "settings", "view", "window"]