"""View navigation state: mouse tracking, zoom limits, modifiers and quadrant focus."""

from __future__ import annotations

from enum import Flag, auto

ZOOM_STEP = 1.01
ZOOM_IN_LIMIT = 4.0
ZOOM_OUT_LIMIT = 0.25

MODE_NORMAL = "normal"
MODE_ZOOM = "zoom"
MODE_PAN = "pan"


class Modifier(Flag):
    """Keyboard modifiers held while interacting with the view."""

    NONE = 0
    SHIFT = auto()
    CONTROL = auto()
    ALT = auto()
    META = auto()


class ViewState:
    """Mouse positions and zoom factor of a view.

    The zoom factor stays within ``ZOOM_OUT_LIMIT`` .. ``ZOOM_IN_LIMIT``; a scaling
    step that would leave that range is not applied.
    """

    def __init__(self) -> None:
        self._position: tuple[int, int] = (0, 0)
        self._last_position: tuple[int, int] = (0, 0)
        self._scale = 1.0

    @property
    def scale(self) -> float:
        """The current zoom factor."""
        return self._scale

    @property
    def mouse_position(self) -> tuple[int, int]:
        """The most recently saved mouse position."""
        return self._position

    @property
    def last_mouse_position(self) -> tuple[int, int]:
        """The mouse position saved before the current one."""
        return self._last_position

    def save_mouse_position(self, x: int, y: int) -> None:
        """Record a new mouse position, keeping the previous one."""
        self._last_position = self._position
        self._position = (x, y)

    def mouse_velocity(self) -> tuple[int, int]:
        """Return the movement between the last two saved positions."""
        (cx, cy), (lx, ly) = self._position, self._last_position
        return (cx - lx, cy - ly)

    def scale_view(self, factor: float) -> bool:
        """Scale by factor if the result stays within the zoom limits; return whether it did."""
        if factor <= 0:
            raise ValueError(f"scale factor must be positive, got {factor!r}")
        candidate = self._scale * factor
        if ZOOM_OUT_LIMIT <= candidate <= ZOOM_IN_LIMIT:
            self._scale = candidate
            return True
        return False

    def zoom(self) -> bool:
        """Zoom in on rightward mouse movement, out on leftward; return whether the scale changed."""
        dx, _ = self.mouse_velocity()
        if dx > 0:
            return self.zoom_in()
        if dx < 0:
            return self.zoom_out()
        return False

    def zoom_in(self) -> bool:
        """Zoom in by one step."""
        return self.scale_view(ZOOM_STEP)

    def zoom_out(self) -> bool:
        """Zoom out by one step."""
        return self.scale_view(1 / ZOOM_STEP)


def bookmark_name(x: int, y: int) -> str:
    """Return the default name of a scene bookmark placed at (x, y)."""
    return f"({x},{y})"


def interaction_mode(modifiers: Modifier, bookmarking: bool = False) -> str:
    """Return the interaction mode for exactly these modifiers.

    Alt alone zooms, Control alone pans; anything else, or placing a bookmark,
    is normal interaction.
    """
    if bookmarking:
        return MODE_NORMAL
    if modifiers == Modifier.ALT:
        return MODE_ZOOM
    if modifiers == Modifier.CONTROL:
        return MODE_PAN
    return MODE_NORMAL


def quadrant_target(quadrant: int, width: int, height: int) -> tuple[int, int]:
    """Return the view point that a selected bookmark is moved to for the quadrant.

    Quadrant 1 moves it to the bottom-left corner, 2 to the bottom-right, 3 to the
    top-right, 4 to the top-left and 5 to the centre of a width x height view.
    """
    if width < 0 or height < 0:
        raise ValueError(f"view size must not be negative, got {width}x{height}")
    right, bottom = width - 1, height - 1
    targets = {
        1: (0, bottom),
        2: (right, bottom),
        3: (right, 0),
        4: (0, 0),
        5: (int(right / 2), int(bottom / 2)),
    }
    try:
        return targets[quadrant]
    except KeyError:
        raise ValueError(f"quadrant must be 1..5, got {quadrant!r}") from None