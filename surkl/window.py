"""Window bookkeeping: widget ids, area types, the split gesture and the window menu."""

from __future__ import annotations

import itertools
import math
from enum import Enum, IntEnum
from typing import NamedTuple

SWAP_MIME_TYPE = "surkl/window-swap"
DEFAULT_HANDLE_WIDTH = 7
GOLDEN_SPLIT = 0.618
LOAD_CAPACITY = 32.0
LOAD_THRESHOLD = 4.0
INITIAL_POSITION = (32, 16)

SEPARATOR = None

_ids = itertools.count()


class WidgetId:
    """Mixin handing every instance a unique, increasing id."""

    def __init__(self) -> None:
        self._widget_id = next(_ids)

    @property
    def widget_id(self) -> int:
        """The id given to this instance on construction."""
        return self._widget_id


class AreaType(IntEnum):
    """The kind of content shown in a window's area."""

    VIEW = 0
    THEME = 1
    HELP = 2
    INVALID = 3

    @property
    def title(self) -> str:
        """The window title shown for this kind of area."""
        return _AREA_TITLES.get(self, "")


_AREA_TITLES = {
    AreaType.VIEW: "View",
    AreaType.THEME: "Theme Settings",
    AreaType.HELP: "Help",
}


class Orientation(Enum):
    """Direction in which a window is split."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class SplitRequest(NamedTuple):
    """Where and how a window is to be split."""

    position: tuple[int, int]
    orientation: Orientation


def _bound(low: int, value: int, high: int) -> int:
    return max(low, min(high, value))


class SplitTracker:
    """Follows a drag of the split button and works out where to split the window.

    The orientation starts from the window's greater extent and then follows the
    dominant direction of the mouse's movement. While dragging, the title shows the
    fraction of the window at which the split would happen.
    """

    def __init__(
        self,
        width: int,
        height: int,
        handle_width: int = DEFAULT_HANDLE_WIDTH,
        title: str = "",
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"window size must be positive, got {width}x{height}")
        if handle_width <= 0:
            raise ValueError(f"handle width must be positive, got {handle_width}")
        self._width = width
        self._height = height
        self._handle = handle_width
        self.title = title
        self.saved_title: str | None = None
        self.orientation = Orientation.HORIZONTAL
        self.geometry: tuple[int, int, int, int] | None = None
        self.current_pos: tuple[int, int] = INITIAL_POSITION
        self.x_dir_load = 0.0
        self._released = False

    @property
    def released(self) -> bool:
        """Whether the drag has ended."""
        return self._released

    def _check_active(self) -> None:
        if self._released:
            raise RuntimeError("the split gesture has already been released")

    def move(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Follow the mouse to (x, y); return the rubber band's (x, y, width, height)."""
        self._check_active()
        half = self._handle // 2
        dx, dy = x - self.current_pos[0], y - self.current_pos[1]
        length = math.hypot(dx, dy)
        vx, vy = (dx / length, dy / length) if length > 0 else (0.0, 0.0)

        load = self.x_dir_load + abs(vx) - abs(vy)
        self.x_dir_load = max(-LOAD_CAPACITY, min(LOAD_CAPACITY, load))

        first_time = self.geometry is None
        wide = self._width > self._height
        fraction = 0.0

        if (first_time and wide) or self.x_dir_load > LOAD_THRESHOLD:
            left = _bound(0, x - half, self._width - self._handle)
            fraction = left / self._width
            geometry = (left, 0, self._handle, self._height)
            self.geometry = geometry
            self.orientation = Orientation.HORIZONTAL
        elif (first_time and not wide) or self.x_dir_load < -LOAD_THRESHOLD:
            top = _bound(0, y - half, self._height - self._handle)
            fraction = top / self._height
            geometry = (0, top, self._width, self._handle)
            self.geometry = geometry
            self.orientation = Orientation.VERTICAL
        else:
            geometry = self.geometry  # type: ignore[assignment]

        if first_time:
            self.saved_title = self.title
        else:
            self.title = f"{fraction:.2f}"

        self.current_pos = (x, y)
        return geometry

    def release(self) -> SplitRequest:
        """End the drag, restore the title and return where to split."""
        self._check_active()
        self._released = True
        half = self._handle // 2

        if self.saved_title is not None:
            self.title = self.saved_title

        if self.geometry is None:
            position = (
                int(self._width * GOLDEN_SPLIT),
                int(self._height * GOLDEN_SPLIT),
            )
            orientation = (
                Orientation.HORIZONTAL if self._width > self._height else Orientation.VERTICAL
            )
            return SplitRequest(position, orientation)

        left, top, w, h = self.geometry
        cx = (2 * left + w - 1) // 2
        cy = (2 * top + h - 1) // 2
        if self.orientation is Orientation.VERTICAL:
            position = (cx, cy - half)
        else:
            position = (cx - half, cy)
        return SplitRequest(position, self.orientation)


def menu_entries(area_type: AreaType) -> list[str | None]:
    """Return the window menu for an area; ``SEPARATOR`` marks a separator."""
    area_type = AreaType(area_type)
    entries: list[str | None] = []
    if area_type is not AreaType.VIEW:
        entries.append("Switch to View")
    if area_type is not AreaType.THEME:
        entries.append("Switch to Theme Settings")
    if area_type is not AreaType.HELP:
        entries.append("Switch to Help")
    entries += [SEPARATOR, "Move to New Window", SEPARATOR, "About Surkl"]
    return entries