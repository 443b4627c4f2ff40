"""Interactive palette editing: ranges, generation, permutations, keeping and applying."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from typing import TypeVar

from .color import Color
from .palette import (
    PALETTE_SIZE,
    HsvRange,
    Palette,
    factory_palette,
    gradient_stops,
    palette_to_id,
    permute,
)
from .theme import ThemeManager

T = TypeVar("T")

_CHANNEL_LIMITS = {"hue": 360.0, "sat": 1.0, "val": 1.0}
_ENDS = ("p1", "p2")


def next_permutation(seq: Sequence[T]) -> list[T]:
    """Return the lexicographically next arrangement, wrapping to the first one."""
    items = list(seq)
    i = len(items) - 2
    while i >= 0 and items[i] >= items[i + 1]:
        i -= 1
    if i < 0:
        return items[::-1]
    j = len(items) - 1
    while items[j] <= items[i]:
        j -= 1
    items[i], items[j] = items[j], items[i]
    items[i + 1 :] = reversed(items[i + 1 :])
    return items


def prev_permutation(seq: Sequence[T]) -> list[T]:
    """Return the lexicographically previous arrangement, wrapping to the last one."""
    items = list(seq)
    i = len(items) - 2
    while i >= 0 and items[i] <= items[i + 1]:
        i -= 1
    if i < 0:
        return items[::-1]
    j = len(items) - 1
    while items[j] >= items[i]:
        j -= 1
    items[i], items[j] = items[j], items[i]
    items[i + 1 :] = reversed(items[i + 1 :])
    return items


class ThemeSettings:
    """State behind the theme settings panel.

    Exactly one palette is "selected" at a time: either the freshly generated one
    or a known palette of the manager. The last known palette selected is remembered
    so that an unkept generated palette can be reverted by ``restore``.
    """

    def __init__(self, manager: ThemeManager) -> None:
        self._manager = manager
        self._hsv_range = HsvRange()
        self._permutation: list[int] = list(range(PALETTE_SIZE))
        self._generated: Palette | None = None
        self._generated_selected = False
        active = next((row for row in manager.rows() if row.is_active), None)
        self._selected: str | None = active.palette_id if active else None
        self._last_applied: str | None = self._selected

    @property
    def hsv_range(self) -> HsvRange:
        """The range new palettes are generated in."""
        return self._hsv_range

    @property
    def permutation(self) -> tuple[int, ...]:
        """The current arrangement of the generated palette's colours."""
        return tuple(self._permutation)

    @property
    def generated(self) -> Palette | None:
        """The generated palette not yet kept, if any."""
        return self._generated

    @property
    def generated_selected(self) -> bool:
        """Whether the generated palette is the selected one."""
        return self._generated_selected

    @property
    def selected(self) -> str | None:
        """Id of the selected known palette, or None when the generated one is selected."""
        return None if self._generated_selected else self._selected

    @property
    def last_applied(self) -> str | None:
        """Id of the last known palette that was selected."""
        return self._last_applied

    @property
    def preview(self) -> list[tuple[float, Color]] | None:
        """Gradient stops previewing the current generated arrangement."""
        return None if self._generated is None else gradient_stops(self.current())

    def set_range_value(self, channel: str, end: str, text: str) -> float | None:
        """Set one end of a channel range from user text, clamped to the channel's limits.

        Returns the stored value, or None if the text is not a number.
        """
        try:
            top = _CHANNEL_LIMITS[channel]
        except KeyError:
            raise ValueError(f"unknown channel {channel!r}") from None
        if end not in _ENDS:
            raise ValueError(f"range end must be one of {_ENDS}, got {end!r}")
        try:
            value = float(text.strip())
        except ValueError:
            return None
        if not math.isfinite(value):
            return None
        value = min(max(value, 0.0), top)
        setattr(getattr(self._hsv_range, channel), end, value)
        return value

    def generate(self) -> Palette:
        """Generate a palette in the current range, select it and make it active."""
        self._permutation = list(range(PALETTE_SIZE))
        self._generated = self._manager.generate_palette(self._hsv_range)
        self._generated_selected = True
        self._manager.set_active_palette(self._generated)
        return self._generated

    def _require_generated(self) -> Palette:
        if self._generated is None:
            raise RuntimeError("no generated palette; call generate() first")
        return self._generated

    def _emit_current(self) -> Palette:
        result = self.current()
        self._manager.set_active_palette(result)
        return result

    def shuffle(self, rng: random.Random | None = None) -> Palette:
        """Randomly rearrange the generated colours and make the result active."""
        self._require_generated()
        (rng or random).shuffle(self._permutation)
        return self._emit_current()

    def prev_permutation(self) -> Palette:
        """Step to the previous arrangement of the generated colours and make it active."""
        self._require_generated()
        self._permutation = prev_permutation(self._permutation)
        return self._emit_current()

    def next_permutation(self) -> Palette:
        """Step to the next arrangement of the generated colours and make it active."""
        self._require_generated()
        self._permutation = next_permutation(self._permutation)
        return self._emit_current()

    def current(self) -> Palette:
        """Return the generated palette in its current arrangement."""
        return permute(self._require_generated(), self._permutation)

    def keep_current(self) -> str:
        """Keep the current arrangement as a known palette; returns its id."""
        result = self.current()
        self._manager.keep(result)
        palette_id = palette_to_id(result)
        self._generated = None
        self._generated_selected = False
        self._selected = palette_id
        self._last_applied = palette_id
        return palette_id

    def apply(self, palette_id: str) -> None:
        """Select a known palette and make it active."""
        if palette_id not in {row.palette_id for row in self._manager.rows()}:
            raise KeyError(palette_id)
        self._generated_selected = False
        self._selected = palette_id
        self._last_applied = palette_id
        self._manager.switch_to(palette_id)

    def restore(self) -> str | None:
        """Revert an unkept generated palette to the last applied one, or the factory one.

        Returns the id switched to, or None when nothing needed restoring.
        """
        if not self._generated_selected:
            return None
        known = {row.palette_id for row in self._manager.rows()}
        target = self._last_applied
        if target not in known:
            target = palette_to_id(factory_palette())
        self.apply(target)
        return target