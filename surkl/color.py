"""RGBA colours with the hex and HSV conversions used by the theme code."""

from __future__ import annotations

import colorsys
import re
from dataclasses import dataclass

_HEX_RE = re.compile(r"#([0-9a-fA-F]+)")


def _channel(value: float) -> int:
    """Scale a unit float to an 8-bit channel, rounding half up."""
    return int(value * 255 + 0.5)


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"channel {name} must be an int in 0..255, got {value!r}")

    def hex_argb(self) -> str:
        """Return the colour as '#aarrggbb' in lower case."""
        return f"#{self.a:02x}{self.r:02x}{self.g:02x}{self.b:02x}"

    def hsv_value(self) -> int:
        """Return the HSV value component on the 0..255 scale."""
        return max(self.r, self.g, self.b)

    def to_hsv(self) -> tuple[float, float, float]:
        """Return (hue, saturation, value), each in 0..1."""
        return colorsys.rgb_to_hsv(self.r / 255, self.g / 255, self.b / 255)


TRANSPARENT = Color(0, 0, 0, 0)


def color_from_hsv(h: float, s: float, v: float, a: float = 1.0) -> Color:
    """Build a colour from HSV and alpha components, each in 0..1."""
    for name, value in (("h", h), ("s", s), ("v", v), ("a", a)):
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"{name} must lie in 0..1, got {value!r}")
    r, g, b = colorsys.hsv_to_rgb(h, s, v)
    return Color(_channel(r), _channel(g), _channel(b), _channel(a))


def parse_hex_argb(text: str) -> Color:
    """Parse '#rgb', '#rrggbb' or '#aarrggbb' (case-insensitive)."""
    match = _HEX_RE.fullmatch(text.strip())
    if match is None:
        raise ValueError(f"not a hex colour: {text!r}")
    digits = match.group(1)
    if len(digits) == 3:
        r, g, b = (int(d * 2, 16) for d in digits)
        return Color(r, g, b)
    if len(digits) == 6:
        return Color(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
    if len(digits) == 8:
        return Color(
            int(digits[2:4], 16),
            int(digits[4:6], 16),
            int(digits[6:8], 16),
            int(digits[0:2], 16),
        )
    raise ValueError(f"unsupported hex colour length: {text!r}")