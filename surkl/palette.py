"""Palettes: the fixed set of colours a theme is made of, their ids and generation."""

from __future__ import annotations

import base64
import binascii
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import IntEnum

from .color import TRANSPARENT, Color, color_from_hsv, parse_hex_argb
from .lds import GoldenLds


class PaletteIndex(IntEnum):
    """Position of each role within a palette."""

    SCENE_LIGHT = 0
    SCENE_MIDLIGHT = 1
    SCENE = 2
    SCENE_MIDARK = 3
    SCENE_DARK = 4
    SCENE_SHADOW = 5

    NODE_OPEN_LIGHT = 6
    NODE_OPEN_MIDLIGHT = 7
    NODE_OPEN = 8

    NODE_CLOSED_MIDLIGHT = 9
    NODE_CLOSED = 10
    NODE_CLOSED_MIDARK = 11
    NODE_CLOSED_DARK = 12

    NODE_FILE_LIGHT = 13
    NODE_FILE_MIDLIGHT = 14
    NODE_FILE = 15
    NODE_FILE_MIDARK = 16
    NODE_FILE_DARK = 17

    EDGE_LIGHT = 18
    EDGE_MIDLIGHT = 19
    EDGE = 20
    EDGE_TEXT = 21


PALETTE_SIZE = len(PaletteIndex)

Palette = tuple[Color, ...]

_I = PaletteIndex

# Each group lists indices from darkest to lightest slot.
SORT_GROUPS: tuple[tuple[PaletteIndex, ...], ...] = (
    (_I.SCENE_SHADOW, _I.SCENE_DARK, _I.SCENE_MIDARK, _I.SCENE, _I.SCENE_MIDLIGHT, _I.SCENE_LIGHT),
    (_I.NODE_CLOSED_DARK, _I.NODE_CLOSED_MIDARK, _I.NODE_CLOSED, _I.NODE_CLOSED_MIDLIGHT),
    (_I.NODE_OPEN, _I.NODE_OPEN_MIDLIGHT, _I.NODE_OPEN_LIGHT),
    (_I.NODE_FILE_DARK, _I.NODE_FILE_MIDARK, _I.NODE_FILE, _I.NODE_FILE_MIDLIGHT, _I.NODE_FILE_LIGHT),
    (_I.EDGE, _I.EDGE_MIDLIGHT, _I.EDGE_LIGHT),
)

_HEX_LEN = len("#aarrggbb")


@dataclass
class ChannelRange:
    """A (p1, p2) range; p2 < p1 means the range wraps around."""

    p1: float
    p2: float


@dataclass
class HsvRange:
    """Ranges for hue (degrees, 0..360), saturation and value (0..1)."""

    hue: ChannelRange = field(default_factory=lambda: ChannelRange(0.0, 360.0))
    sat: ChannelRange = field(default_factory=lambda: ChannelRange(0.0, 1.0))
    val: ChannelRange = field(default_factory=lambda: ChannelRange(0.0, 1.0))


def _grey(level: int) -> Color:
    return Color(level, level, level, 255)


_FACTORY_LEVELS = {
    _I.SCENE_LIGHT: 210,
    _I.SCENE_MIDLIGHT: 166,
    _I.SCENE: 134,
    _I.SCENE_MIDARK: 67,
    _I.SCENE_DARK: 32,
    _I.SCENE_SHADOW: 4,
    _I.NODE_OPEN_LIGHT: 220,
    _I.NODE_OPEN_MIDLIGHT: 164,
    _I.NODE_OPEN: 128,
    _I.NODE_CLOSED_MIDLIGHT: 192,
    _I.NODE_CLOSED: 144,
    _I.NODE_CLOSED_MIDARK: 80,
    _I.NODE_CLOSED_DARK: 8,
    _I.NODE_FILE_LIGHT: 220,
    _I.NODE_FILE_MIDLIGHT: 128,
    _I.NODE_FILE: 64,
    _I.NODE_FILE_MIDARK: 32,
    _I.NODE_FILE_DARK: 8,
    _I.EDGE_LIGHT: 96,
    _I.EDGE_MIDLIGHT: 48,
    _I.EDGE: 8,
    _I.EDGE_TEXT: 220,
}


def factory_palette() -> Palette:
    """Return the built-in monochrome palette."""
    return tuple(_grey(_FACTORY_LEVELS[index]) for index in PaletteIndex)


def _check_size(palette: Sequence[Color]) -> None:
    if len(palette) != PALETTE_SIZE:
        raise ValueError(f"a palette holds {PALETTE_SIZE} colours, got {len(palette)}")


def palette_to_id(palette: Sequence[Color]) -> str:
    """Return the base64 id of a palette: its '#aarrggbb' strings concatenated."""
    _check_size(palette)
    raw = "".join(color.hex_argb() for color in palette).encode("latin-1")
    return base64.b64encode(raw).decode("ascii")


def palette_from_id(palette_id: str) -> Palette:
    """Decode a palette id; missing trailing colours are transparent."""
    try:
        raw = base64.b64decode(palette_id.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as exc:
        raise ValueError(f"invalid palette id: {palette_id!r}") from exc
    chunks = [raw[j : j + _HEX_LEN] for j in range(0, len(raw) - (_HEX_LEN - 1), _HEX_LEN)]
    colors = [parse_hex_argb(chunk.decode("latin-1")) for chunk in chunks[:PALETTE_SIZE]]
    colors.extend([TRANSPARENT] * (PALETTE_SIZE - len(colors)))
    return tuple(colors)


def sort_by_groups(palette: Sequence[Color], indices: Iterable[int]) -> Palette:
    """Sort the colours at the given indices by HSV value, placing them back in that order."""
    slots = list(indices)
    ordered = sorted((palette[i] for i in slots), key=Color.hsv_value)
    result = list(palette)
    for slot, color in zip(slots, ordered):
        result[slot] = color
    return tuple(result)


def _check_range(name: str, channel: ChannelRange, top: float) -> None:
    for value in (channel.p1, channel.p2):
        if not 0.0 <= value <= top:
            raise ValueError(f"{name} range must lie within 0..{top:g}, got {value!r}")


def _span(p1: float, p2: float) -> float:
    return 1.0 - abs(p2 - p1) if p2 < p1 else p2 - p1


def _sample(p1: float, delta: float, t: float) -> float:
    value = p1 + t * delta
    return value - 1.0 if value >= 1.0 else value


def generate_palette(hsv_range: HsvRange, lds: GoldenLds) -> Palette:
    """Generate a palette inside the HSV range, sorted lightness-wise within each group."""
    _check_range("hue", hsv_range.hue, 360.0)
    _check_range("saturation", hsv_range.sat, 1.0)
    _check_range("value", hsv_range.val, 1.0)

    starts = (hsv_range.hue.p1 / 360.0, hsv_range.sat.p1, hsv_range.val.p1)
    ends = (hsv_range.hue.p2 / 360.0, hsv_range.sat.p2, hsv_range.val.p2)
    deltas = tuple(_span(p1, p2) for p1, p2 in zip(starts, ends))

    colors = []
    for _ in range(PALETTE_SIZE):
        point = lds.next()
        hue, sat, val = (_sample(p1, d, t) for p1, d, t in zip(starts, deltas, point))
        colors.append(color_from_hsv(hue, sat, val, 1.0))

    result: Palette = tuple(colors)
    for group in SORT_GROUPS:
        result = sort_by_groups(result, group)
    return result


def permute(palette: Sequence[Color], permutation: Sequence[int]) -> Palette:
    """Return a palette whose i-th colour is palette[permutation[i]]."""
    _check_size(palette)
    if len(permutation) != PALETTE_SIZE:
        raise ValueError(f"a permutation holds {PALETTE_SIZE} indices, got {len(permutation)}")
    return tuple(palette[p] for p in permutation)


def gradient_stops(palette: Sequence[Color]) -> list[tuple[float, Color]]:
    """Return gradient stops drawing the palette as equal-width bands, fading out at 1.0."""
    _check_size(palette)
    stride = 1.0 / PALETTE_SIZE
    stops: list[tuple[float, Color]] = []
    for i, color in enumerate(palette):
        pos = i * stride
        stops.append((pos, color))
        stops.append((pos + stride - 0.001, color))
    stops.append((1.0, TRANSPARENT))
    return stops