"""SQLite persistence for kept palettes and the active theme."""

from __future__ import annotations

import os
import sqlite3
from collections.abc import Iterable, Sequence

from .color import TRANSPARENT, Color
from .palette import PALETTE_SIZE, Palette

PALETTES_TABLE = "Palettes"
COLORS_TABLE = "Colors"
SETTINGS_TABLE = "ThemeSettings"
ACTIVE_THEME_KEY = "active_theme"

_CREATE_STATEMENTS = (
    f"CREATE TABLE IF NOT EXISTS {PALETTES_TABLE} (id TEXT PRIMARY KEY, name TEXT)",
    f"CREATE TABLE IF NOT EXISTS {COLORS_TABLE} "
    "(palette_id TEXT, position INTEGER, value INTEGER, PRIMARY KEY (palette_id, position))",
    f"CREATE TABLE IF NOT EXISTS {SETTINGS_TABLE} (attr_key TEXT PRIMARY KEY, attr_value TEXT)",
)


def _color_to_int(color: Color) -> int:
    return (color.a << 24) | (color.r << 16) | (color.g << 8) | color.b


def _color_from_int(value: int) -> Color:
    return Color((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, (value >> 24) & 0xFF)


class ThemeStore:
    """Stores palettes, their colours and the active theme id in an SQLite database."""

    def __init__(self, path: str | os.PathLike[str] = ":memory:") -> None:
        self._conn = sqlite3.connect(os.fspath(path))
        with self._conn:
            for statement in _CREATE_STATEMENTS:
                self._conn.execute(statement)

    def __enter__(self) -> ThemeStore:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying database connection."""
        self._conn.close()

    def load_palettes(self) -> dict[str, tuple[str, Palette]]:
        """Return every stored palette as {id: (name, palette)}."""
        names = {
            palette_id: name
            for palette_id, name in self._conn.execute(f"SELECT id, name FROM {PALETTES_TABLE}")
        }
        colors: dict[str, list[Color]] = {}
        rows = self._conn.execute(f"SELECT palette_id, position, value FROM {COLORS_TABLE}")
        for palette_id, position, value in rows:
            if not isinstance(position, int) or not 0 <= position < PALETTE_SIZE:
                raise ValueError(f"colour position out of range for {palette_id!r}: {position!r}")
            slots = colors.setdefault(palette_id, [TRANSPARENT] * PALETTE_SIZE)
            slots[position] = _color_from_int(int(value))
        return {
            palette_id: (name, tuple(colors[palette_id]))
            for palette_id, name in names.items()
            if palette_id in colors
        }

    def save_palettes(self, entries: Iterable[tuple[str, str, Sequence[Color]]]) -> None:
        """Insert or replace palettes given as (id, name, palette) triples."""
        with self._conn:
            for palette_id, name, palette in entries:
                if len(palette) != PALETTE_SIZE:
                    raise ValueError(f"a palette holds {PALETTE_SIZE} colours, got {len(palette)}")
                self._conn.execute(
                    f"INSERT OR REPLACE INTO {PALETTES_TABLE} (id, name) VALUES (?, ?)",
                    (palette_id, name),
                )
                self._conn.executemany(
                    f"INSERT OR REPLACE INTO {COLORS_TABLE} (palette_id, position, value) "
                    "VALUES (?, ?, ?)",
                    [(palette_id, pos, _color_to_int(c)) for pos, c in enumerate(palette)],
                )

    def delete_palettes(self, ids: Iterable[str]) -> None:
        """Remove the palettes with the given ids and their colours."""
        with self._conn:
            for palette_id in ids:
                self._conn.execute(f"DELETE FROM {PALETTES_TABLE} WHERE id = ?", (palette_id,))
                self._conn.execute(
                    f"DELETE FROM {COLORS_TABLE} WHERE palette_id = ?", (palette_id,)
                )

    def save_active(self, palette_id: str) -> None:
        """Record the id of the active theme."""
        with self._conn:
            self._conn.execute(
                f"INSERT OR REPLACE INTO {SETTINGS_TABLE} (attr_key, attr_value) VALUES (?, ?)",
                (ACTIVE_THEME_KEY, palette_id),
            )

    def load_active(self) -> str | None:
        """Return the recorded active theme id, or None if none was saved."""
        row = self._conn.execute(
            f"SELECT attr_value FROM {SETTINGS_TABLE} WHERE attr_key = ?", (ACTIVE_THEME_KEY,)
        ).fetchone()
        return None if row is None else row[0]