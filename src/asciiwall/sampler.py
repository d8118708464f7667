import math
from dataclasses import dataclass

from asciiwall.config import CHAR_ASPECT_RATIO, MAX_WIDTH


@dataclass(frozen=True)
class CharacterGrid:
    width: int
    height: int


def compute_grid(
    source_width: int,
    source_height: int,
    max_width: int = MAX_WIDTH,
    char_aspect_ratio: float = CHAR_ASPECT_RATIO,
) -> CharacterGrid:
    """Size the character grid for an image, keeping its aspect ratio.

    Width is capped at ``max_width``. Height is divided by ``char_aspect_ratio``
    because terminal cells are taller than wide, so the art is not stretched.
    """
    if source_width <= 0 or source_height <= 0:
        raise ValueError(f"Source dimensions must be positive, got {source_width}x{source_height}")
    if max_width <= 0:
        raise ValueError(f"max_width must be positive, got {max_width}")
    if char_aspect_ratio <= 0:
        raise ValueError(f"char_aspect_ratio must be positive, got {char_aspect_ratio}")

    width = min(source_width, max_width)
    image_aspect_ratio = source_height / source_width
    height = math.floor(width * image_aspect_ratio / char_aspect_ratio)
    return CharacterGrid(width=width, height=height)
