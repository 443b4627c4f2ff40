"""The theme manager: known palettes, the active one, and their persistence."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .color import Color
from .lds import GoldenLds
from .palette import (
    PALETTE_SIZE,
    HsvRange,
    Palette,
    PaletteIndex,
    factory_palette,
    generate_palette,
    palette_to_id,
)
from .store import ThemeStore

FACTORY_NAME = "Monochrom"
DEFAULT_NAME = "???"


@dataclass(frozen=True)
class ThemeRow:
    """One known palette as listed to the user."""

    palette_id: str
    name: str
    palette: Palette
    is_factory: bool
    is_active: bool


class ThemeManager:
    """Keeps the known palettes and the active one, persisting changes to a store."""

    def __init__(self, store: ThemeStore | None = None, lds: GoldenLds | None = None) -> None:
        self._store = store
        self._lds = lds if lds is not None else GoldenLds()
        self._palettes: dict[str, str] = {}
        self._colors: dict[str, Palette] = {}
        self._listeners: list[Callable[[], None]] = []
        self._factory_id = palette_to_id(factory_palette())
        self._add_palette(factory_palette(), FACTORY_NAME)
        self._active: Palette = factory_palette()

    @property
    def active(self) -> Palette:
        """The active palette."""
        return self._active

    def configure(self) -> None:
        """Load kept palettes and the saved active theme from the store."""
        if self._store is None:
            return
        for palette_id, (name, palette) in self._store.load_palettes().items():
            self._palettes[palette_id] = name
            self._colors[palette_id] = palette
        active = self._store.load_active()
        if active is not None and active in self._colors:
            self._active = self._colors[active]

    def generate_palette(self, hsv_range: HsvRange) -> Palette:
        """Generate a new palette within the given HSV range."""
        return generate_palette(hsv_range, self._lds)

    def keep(self, palette: Sequence[Color]) -> None:
        """Make the palette active and store it among the kept palettes."""
        palette = tuple(palette)
        self._save_active(palette_to_id(palette))
        self.set_active_palette(palette)
        palette_id = self._add_palette(palette)
        self._save([palette_id])

    def is_factory(self, palette_id: str) -> bool:
        return palette_id == self._factory_id

    def is_active(self, palette_id: str) -> bool:
        return palette_id == palette_to_id(self._active)

    def set_active_palette(self, palette: Sequence[Color]) -> None:
        """Make the palette active and notify subscribers."""
        palette = tuple(palette)
        if len(palette) != PALETTE_SIZE:
            raise ValueError(f"a palette holds {PALETTE_SIZE} colours, got {len(palette)}")
        self._active = palette
        for callback in list(self._listeners):
            callback()

    def switch_to(self, palette_id: str) -> None:
        """Activate a known palette; unknown ids are ignored."""
        palette = self._colors.get(palette_id)
        if palette is not None:
            self._save_active(palette_id)
            self.set_active_palette(palette)

    def discard(self, palette_id: str) -> None:
        """Forget a kept palette; the factory palette is never discarded."""
        if self.is_factory(palette_id):
            return
        if self._store is not None:
            self._store.delete_palettes([palette_id])
        self._palettes.pop(palette_id, None)
        self._colors.pop(palette_id, None)
        if self.is_active(palette_id):
            self.set_active_palette(factory_palette())

    def set_name(self, palette_id: str, name: str) -> None:
        """Rename a known palette and persist the change."""
        if palette_id in self._palettes:
            self._palettes[palette_id] = name
            self._save([palette_id])

    def color(self, index: PaletteIndex | int) -> Color:
        """Return the active palette's colour for the given role."""
        return self._active[PaletteIndex(index)]

    def rows(self) -> list[ThemeRow]:
        """Return the known palettes in the order they were added."""
        active_id = palette_to_id(self._active)
        return [
            ThemeRow(
                palette_id=pid,
                name=name,
                palette=self._colors[pid],
                is_factory=self.is_factory(pid),
                is_active=pid == active_id,
            )
            for pid, name in self._palettes.items()
        ]

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Call the callback whenever the active palette changes; returns an unsubscriber."""
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def ui_palette(self) -> dict[str, Color]:
        """Map widget colour roles to colours of the active palette."""
        a = self._active
        I = PaletteIndex
        return {
            "light": a[I.SCENE_LIGHT],
            "midlight": a[I.SCENE_MIDLIGHT],
            "base": a[I.SCENE],
            "button": a[I.SCENE],
            "window": a[I.SCENE],
            "mid": a[I.SCENE_MIDARK],
            "dark": a[I.SCENE_DARK],
            "shadow": a[I.SCENE_SHADOW],
            "button_text": a[I.SCENE_DARK],
            "text": a[I.SCENE_DARK],
            "window_text": a[I.SCENE_DARK],
            "highlight": a[I.SCENE_MIDLIGHT],
        }

    def _add_palette(self, palette: Palette, name: str = DEFAULT_NAME) -> str:
        palette_id = palette_to_id(palette)
        self._palettes[palette_id] = name
        self._colors[palette_id] = palette
        return palette_id

    def _save(self, ids: Sequence[str]) -> None:
        if self._store is not None:
            self._store.save_palettes(
                (pid, self._palettes[pid], self._colors[pid]) for pid in ids if pid in self._palettes
            )

    def _save_active(self, palette_id: str) -> None:
        if self._store is not None:
            self._store.save_active(palette_id)