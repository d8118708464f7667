import math

# ITU-R BT.601 luma weights, applied to gamma-encoded channels
LUMA_WEIGHTS = (0.299, 0.587, 0.114)


def luminance(r: int, g: int, b: int) -> float:
    wr, wg, wb = LUMA_WEIGHTS
    return wr * r + wg * g + wb * b


def glyph_index(lum: float, glyph_count: int) -> int:
    """Map a luminance in [0, 255] to an index into a dense-to-light glyph ramp.

    Bright pixels land on index 0 (the densest glyph). The result is clamped so
    rounding noise at the ends of the range cannot step outside the ramp.
    """
    index = math.floor((1 - lum / 255) * (glyph_count - 1))
    return min(max(index, 0), glyph_count - 1)


def is_skipped(r: int, g: int, b: int, a: int = 255) -> bool:
    """Pixels with any zero colour channel, or full transparency, emit no glyph."""
    return r == 0 or g == 0 or b == 0 or a == 0
