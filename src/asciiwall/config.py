from dataclasses import dataclass

from asciiwall.charsets import DENSE_TO_LIGHT

MAX_WIDTH = 240
# Monospaced cells are roughly 1.5x taller than wide
CHAR_ASPECT_RATIO = 1.5


@dataclass(frozen=True)
class RenderConfig:
    max_width: int = MAX_WIDTH
    char_aspect_ratio: float = CHAR_ASPECT_RATIO
    glyphs: str = DENSE_TO_LIGHT

    def __post_init__(self):
        if not self.glyphs:
            raise ValueError("Glyph sequence must not be empty")
        if self.max_width <= 0:
            raise ValueError(f"max_width must be positive, got {self.max_width}")
        if self.char_aspect_ratio <= 0:
            raise ValueError(f"char_aspect_ratio must be positive, got {self.char_aspect_ratio}")
