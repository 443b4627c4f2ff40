# surkl

This package holds the theming and interaction state of a spatial file
manager. It needs no GUI toolkit and depends only on the standard library.

## Modules

- `surkl.color` provides `Color`, a frozen RGBA value with 8-bit channels.
  - `Color.hex_argb()` gives `'#aarrggbb'`.
  - `Color.hsv_value()` gives the HSV value on the 0..255 scale.
  - `Color.to_hsv()` gives hue, saturation and value, each in 0..1.
  - `color_from_hsv(h, s, v, a)` builds a colour from components in 0..1.
  - `parse_hex_argb(text)` reads `#rgb`, `#rrggbb` or `#aarrggbb`.
- `surkl.lds` provides `GoldenLds`, a three-dimensional low-discrepancy sequence
  built on the generalised golden ratio. `GoldenLds.next()` returns the current
  point and advances the sequence. The module also has `compute_phi` and
  `golden_steps`.
- `surkl.palette` covers the palette itself.
  - `PaletteIndex` names the 22 roles in a palette.
  - `factory_palette()` returns the built-in monochrome palette.
  - `palette_to_id` and `palette_from_id` turn a palette into a base64 id and
    back. In an id that is too short, the missing colours come back transparent.
  - `generate_palette(hsv_range, lds)` fills a palette from an `HsvRange`. A
    range whose `p2` is below its `p1` wraps around. Within each colour group
    the results are sorted by HSV value.
  - `sort_by_groups`, `permute` and `gradient_stops` are also available.
    `gradient_stops` returns equal-width bands that fade to transparent at 1.0.
- `surkl.store` provides `ThemeStore`, which keeps palettes, their colours and
  the active theme id in SQLite. The default database is in memory. A store can
  be used as a context manager.
- `surkl.theme` provides `ThemeManager`.
  - It always holds the factory palette ("Monochrom"), which is never discarded.
  - It can `keep`, `switch_to`, `discard` and `set_name` palettes.
  - `configure()` loads the kept palettes and the saved active theme from its
    store.
  - `subscribe(callback)` calls the callback whenever the active palette
    changes, and returns a function that unsubscribes it.
  - `rows()` lists the known palettes as `ThemeRow` records.
  - `ui_palette()` maps widget colour roles to colours of the active palette.
- `surkl.settings` provides `ThemeSettings`, the state behind a theme editor.
  - `set_range_value` parses the text for a range end and clamps it.
  - `generate`, `shuffle`, `prev_permutation` and `next_permutation` produce
    palettes and rearrange them.
  - `keep_current` keeps the result.
  - `apply` selects a known palette.
  - `restore` reverts a generated palette that was never kept. It goes back to
    the palette applied last, or to the factory palette if that one is gone.
  - The module-level `next_permutation` and `prev_permutation` wrap around at
    the ends.
- `surkl.view` handles the scene view.
  - `ViewState` tracks the mouse and the zoom factor. The factor stays between
    0.25 and 4, and a step that would leave that range is not applied.
  - `interaction_mode(modifiers, bookmarking)` maps held `Modifier` keys to
    zoom (Alt), pan (Control) or normal interaction.
  - `quadrant_target` and `bookmark_name` are also here.
- `surkl.window` handles windows.
  - `WidgetId` hands out unique ids.
  - `AreaType` has titles for each kind of area.
  - `SplitTracker` follows a split-button drag and returns a `SplitRequest`
    with a position and an `Orientation`.
  - `menu_entries(area_type)` lists the window menu. `None` marks a separator.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from surkl.palette import HsvRange, palette_to_id
from surkl.store import ThemeStore
from surkl.theme import ThemeManager

with ThemeStore("themes.db") as store:
    manager = ThemeManager(store)
    manager.configure()

    palette = manager.generate_palette(HsvRange())
    manager.keep(palette)
    assert manager.is_active(palette_to_id(palette))

    for row in manager.rows():
        print(row.name, row.is_active)
```

## What it does not do

This package has no windows, widgets or drawing, and it has no command-line
program. It also has no file-system scene, nodes or scene bookmarks. The view
and window modules only compute state: zoom factors, split positions, menu
entries and quadrant targets. Showing any of that on screen is up to the code
that uses them.