import math

import pytest

from asciiwall.sampling import glyph_index, is_skipped, luminance


def test_luminance_weights():
    assert luminance(100, 150, 200) == pytest.approx(140.75)
    assert luminance(255, 0, 0) == pytest.approx(76.245)


def test_white_maps_to_densest_glyph():
    assert glyph_index(luminance(255, 255, 255), 11) == 0


def test_darkest_maps_to_lightest_glyph():
    assert glyph_index(0.0, 11) == 10


def test_index_matches_formula():
    lum = luminance(100, 150, 200)
    assert glyph_index(lum, 11) == math.floor((1 - lum / 255) * 10) == 4


def test_index_stays_in_range():
    for value in range(256):
        assert 0 <= glyph_index(float(value), 11) <= 10
    assert glyph_index(255.0000001, 11) == 0


def test_single_glyph_ramp():
    assert glyph_index(10.0, 1) == 0
    assert glyph_index(250.0, 1) == 0


@pytest.mark.parametrize(
    "pixel, skipped",
    [
        ((0, 10, 10), True),
        ((10, 0, 10), True),
        ((10, 10, 0), True),
        ((0, 0, 0), True),
        ((1, 1, 1), False),
        ((255, 255, 255), False),
    ],
)
def test_zero_channel_skip(pixel, skipped):
    assert is_skipped(*pixel) is skipped


def test_transparent_pixel_skipped():
    assert is_skipped(200, 200, 200, 0)
    assert not is_skipped(200, 200, 200, 1)
