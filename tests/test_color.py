import random

import pytest

from surkl.color import TRANSPARENT, Color, color_from_hsv, parse_hex_argb


def test_hex_argb_of_factory_scene_light():
    assert Color(210, 210, 210, 255).hex_argb() == "#ffd2d2d2"


def test_hex_argb_transparent():
    assert TRANSPARENT.hex_argb() == "#00000000"


def test_parse_hex_argb_round_trip_fixed():
    assert parse_hex_argb("#ffd2d2d2") == Color(210, 210, 210, 255)
    assert parse_hex_argb("#80102030") == Color(0x10, 0x20, 0x30, 0x80)


def test_parse_is_case_insensitive():
    assert parse_hex_argb("#FFA0B0C0") == parse_hex_argb("#ffa0b0c0")


def test_parse_short_forms():
    assert parse_hex_argb("#fff") == Color(255, 255, 255, 255)
    assert parse_hex_argb("#102030") == Color(0x10, 0x20, 0x30, 255)


@pytest.mark.parametrize("text", ["", "ffd2d2d2", "#zzzzzzzz", "#12345", "#1234567890"])
def test_parse_invalid_raises(text):
    with pytest.raises(ValueError):
        parse_hex_argb(text)


def test_random_colors_round_trip():
    rng = random.Random(1234)
    for _ in range(1024):
        color = color_from_hsv(rng.random(), rng.random(), rng.random(), rng.random())
        assert parse_hex_argb(color.hex_argb()) == color


def test_color_from_hsv_primaries():
    assert color_from_hsv(0.0, 0.0, 1.0, 1.0) == Color(255, 255, 255, 255)
    assert color_from_hsv(0.0, 1.0, 1.0, 1.0) == Color(255, 0, 0, 255)
    assert color_from_hsv(0.0, 0.0, 0.0, 0.0) == TRANSPARENT


def test_color_from_hsv_out_of_range():
    with pytest.raises(ValueError):
        color_from_hsv(1.5, 0.5, 0.5, 1.0)
    with pytest.raises(ValueError):
        color_from_hsv(0.5, -0.1, 0.5, 1.0)


def test_channel_validation():
    with pytest.raises(ValueError):
        Color(256, 0, 0)
    with pytest.raises(ValueError):
        Color(0, -1, 0)


def test_hsv_value_is_max_channel():
    assert Color(10, 200, 30).hsv_value() == 200
    assert Color(4, 4, 4).hsv_value() == 4


def test_to_hsv_of_red():
    h, s, v = Color(255, 0, 0).to_hsv()
    assert (h, s, v) == pytest.approx((0.0, 1.0, 1.0))


def test_to_hsv_value_matches_hsv_value():
    color = Color(12, 99, 180)
    assert color.to_hsv()[2] == pytest.approx(color.hsv_value() / 255)