"""Tests for value objects, hex helpers and HSL conversion."""

import numpy as np
import pytest

from colour_thief.core_types import (
    QuantizedColour,
    assert_u8_image,
    coerce_to_rgb_tuple,
    rgb_to_hex,
)
from colour_thief.utils import palette_report_lines


def test_rgb_to_hex():
    assert rgb_to_hex((252, 4, 4)) == "#fc0404"
    assert rgb_to_hex(np.array([0, 128, 255], dtype=np.uint8)) == "#0080ff"


def test_coerce_to_rgb_tuple():
    assert coerce_to_rgb_tuple(np.array([1, 2, 3], dtype=np.uint8)) == (1, 2, 3)
    assert coerce_to_rgb_tuple([4, 5, 6, 7]) == (4, 5, 6)
    with pytest.raises(ValueError):
        coerce_to_rgb_tuple([1, 2])


def test_assert_u8_image():
    ok = np.zeros((2, 2, 4), dtype=np.uint8)
    assert assert_u8_image(ok) is ok
    with pytest.raises(TypeError):
        assert_u8_image(np.zeros((2, 2), dtype=np.uint8))


class TestQuantizedColour:
    def test_hex_and_str(self):
        entry = QuantizedColour(rgb=(0, 128, 255), population=3, is_dark=False)
        assert entry.hex == "#0080ff"
        assert str(entry) == "#0080ff"

    @pytest.mark.parametrize(
        "rgb, hue",
        [((255, 0, 0), 0.0), ((0, 255, 0), 120.0), ((0, 0, 255), 240.0)],
    )
    def test_primaries_to_hsl(self, rgb, hue):
        hsl = QuantizedColour(rgb=rgb, population=1, is_dark=True).to_hsl()
        assert hsl.h == pytest.approx(hue)
        assert hsl.s == pytest.approx(1.0)
        assert hsl.l == pytest.approx(0.5)

    def test_grey_has_no_saturation(self):
        hsl = QuantizedColour(rgb=(51, 51, 51), population=1, is_dark=True).to_hsl()
        assert hsl.h == 0.0
        assert hsl.s == 0.0
        assert hsl.l == pytest.approx(0.2)

    def test_frozen(self):
        entry = QuantizedColour(rgb=(1, 2, 3), population=1, is_dark=True)
        with pytest.raises(AttributeError):
            entry.population = 5


def test_palette_report_lines():
    palette = [
        QuantizedColour(rgb=(4, 4, 4), population=3, is_dark=True),
        QuantizedColour(rgb=(252, 252, 252), population=1, is_dark=False),
    ]
    assert palette_report_lines(palette) == [
        "#040404  rgb(4, 4, 4)  pixels=3  share=75.0%  dark",
        "#fcfcfc  rgb(252, 252, 252)  pixels=1  share=25.0%  light",
    ]
