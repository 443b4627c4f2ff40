import random

import pytest

from surkl.color import color_from_hsv
from surkl.lds import GoldenLds
from surkl.palette import (
    PALETTE_SIZE,
    SORT_GROUPS,
    ChannelRange,
    HsvRange,
    PaletteIndex,
    factory_palette,
    palette_from_id,
    palette_to_id,
)
from surkl.store import ThemeStore
from surkl.theme import ThemeManager

FACTORY_ID = palette_to_id(factory_palette())


def _random_palettes(n, seed=1234):
    rng = random.Random(seed)
    palettes = []
    for _ in range(n):
        pal = tuple(
            color_from_hsv(rng.random(), rng.random(), rng.random(), rng.random())
            for _ in range(PALETTE_SIZE)
        )
        palettes.append(pal)
        if rng.randrange(3) == 0:
            palettes.append(pal)
    rng.shuffle(palettes)
    return palettes


RANDOM_PALETTES = _random_palettes(64)


@pytest.fixture
def manager():
    with ThemeStore(":memory:") as store:
        yield ThemeManager(store, GoldenLds(0.25))


def _item_count(tm, pid):
    return sum(1 for row in tm.rows() if row.palette_id == pid)


def test_factory_is_initially_active(manager):
    assert manager.is_active(FACTORY_ID)
    assert manager.is_factory(FACTORY_ID)
    assert manager.rows()[0].name == "Monochrom"


@pytest.mark.parametrize("palette", RANDOM_PALETTES[:32])
def test_active_palette(manager, palette):
    pid = palette_to_id(palette)
    assert manager.is_active(FACTORY_ID)
    assert not manager.is_active(pid)
    manager.set_active_palette(palette)
    assert manager.is_active(pid)
    manager.switch_to(FACTORY_ID)
    assert not manager.is_active(pid)
    assert manager.is_active(FACTORY_ID)


def test_keep_and_discard_palettes(manager):
    rng = random.Random(7)
    kept = {}
    for palette in RANDOM_PALETTES:
        pid = palette_to_id(palette)
        keep = rng.randrange(2) == 0
        discard = rng.randrange(5) == 0
        if keep:
            if pid in kept:
                assert _item_count(manager, pid) == 1
            else:
                assert _item_count(manager, pid) == 0
                manager.keep(palette)
                assert manager.is_active(pid)
                assert _item_count(manager, pid) == 1
                kept[pid] = palette
        if discard and pid in kept:
            assert _item_count(manager, pid) == 1
            was_active = manager.is_active(pid)
            manager.discard(pid)
            assert not manager.is_active(pid)
            assert _item_count(manager, pid) == 0
            if was_active:
                assert manager.is_active(FACTORY_ID)
            del kept[pid]


def test_factory_never_discarded(manager):
    manager.discard(FACTORY_ID)
    assert _item_count(manager, FACTORY_ID) == 1
    assert manager.is_active(FACTORY_ID)


@pytest.mark.parametrize(
    "p1,p2",
    [(0.0, 1.0), (0.2, 0.8), (0.4, 0.6), (1.0, 0.0), (0.8, 0.2), (0.6, 0.4)],
)
def test_generate_ranged_palette(manager, p1, p2):
    for _ in range(64):
        hsv = HsvRange(ChannelRange(p1 * 360, p2 * 360), ChannelRange(p1, p2), ChannelRange(p1, p2))
        palette = manager.generate_palette(hsv)
        assert palette_from_id(palette_to_id(palette)) == palette
        for group in SORT_GROUPS:
            values = [palette[i].hsv_value() for i in group]
            assert values == sorted(values)


def test_switch_to_unknown_is_ignored(manager):
    manager.switch_to(palette_to_id(RANDOM_PALETTES[0]))
    assert manager.is_active(FACTORY_ID)


def test_subscribe_and_unsubscribe(manager):
    calls = []
    unsubscribe = manager.subscribe(lambda: calls.append(1))
    manager.set_active_palette(RANDOM_PALETTES[0])
    assert calls == [1]
    unsubscribe()
    manager.set_active_palette(RANDOM_PALETTES[1])
    assert calls == [1]


def test_color_and_ui_palette(manager):
    factory = factory_palette()
    assert manager.color(PaletteIndex.EDGE_TEXT) == factory[PaletteIndex.EDGE_TEXT]
    ui = manager.ui_palette()
    assert ui["window"] == factory[PaletteIndex.SCENE]
    assert ui["text"] == factory[PaletteIndex.SCENE_DARK]
    assert ui["highlight"] == factory[PaletteIndex.SCENE_MIDLIGHT]


def test_set_active_rejects_wrong_size(manager):
    with pytest.raises(ValueError):
        manager.set_active_palette(factory_palette()[:5])


def test_configure_restores_kept_and_active(tmp_path):
    path = tmp_path / "theme.db"
    palette = RANDOM_PALETTES[0]
    pid = palette_to_id(palette)
    with ThemeStore(path) as store:
        tm = ThemeManager(store, GoldenLds(0.5))
        tm.keep(palette)
        tm.set_name(pid, "sunset")
    with ThemeStore(path) as store:
        tm = ThemeManager(store, GoldenLds(0.5))
        assert tm.is_active(FACTORY_ID)
        tm.configure()
        assert tm.is_active(pid)
        names = {row.palette_id: row.name for row in tm.rows()}
        assert names[pid] == "sunset"
        assert names[FACTORY_ID] == "Monochrom"


def test_discard_removes_from_store(tmp_path):
    path = tmp_path / "theme.db"
    palette = RANDOM_PALETTES[1]
    pid = palette_to_id(palette)
    with ThemeStore(path) as store:
        tm = ThemeManager(store)
        tm.keep(palette)
        tm.discard(pid)
        assert tm.is_active(FACTORY_ID)
    with ThemeStore(path) as store:
        assert pid not in store.load_palettes()


def test_manager_without_store():
    tm = ThemeManager(None, GoldenLds(0.1))
    palette = RANDOM_PALETTES[2]
    tm.keep(palette)
    assert tm.is_active(palette_to_id(palette))
    tm.configure()
    assert len(tm.rows()) == 2