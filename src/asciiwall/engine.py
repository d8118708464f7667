from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import numpy as np
from PIL import Image


@dataclass(frozen=True)
class RenderResult:
    html: str  # span-per-glyph fragment, newline per row
    terminal: str  # ANSI truecolor escapes around each glyph
    plain: str  # glyphs and newlines only


class SourceImage(Protocol):
    width: int
    height: int

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Return (r, g, b, a) at the given position, each in 0-255."""
        ...


class ImageSource:
    """Read-only RGBA view of a Pillow image."""

    def __init__(self, image: Image.Image):
        self._pixels = np.asarray(image.convert("RGBA"), dtype=np.uint8)
        self.height, self.width = self._pixels.shape[:2]

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        r, g, b, a = self._pixels[y, x]
        return int(r), int(g), int(b), int(a)
