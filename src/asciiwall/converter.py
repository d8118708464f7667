import io
from html import escape
from pathlib import Path

from PIL import Image

from asciiwall.config import RenderConfig
from asciiwall.engine import ImageSource, RenderResult, SourceImage
from asciiwall.sampler import CharacterGrid, compute_grid
from asciiwall.sampling import glyph_index, is_skipped, luminance

ANSI_RESET = "\033[0m"


def _html_cell(r: int, g: int, b: int, glyph: str) -> str:
    return f'<span style="color: rgb({r},{g},{b})">{escape(glyph)}</span>'


def _ansi_cell(r: int, g: int, b: int, glyph: str) -> str:
    return f"\033[38;2;{r};{g};{b}m{glyph}{ANSI_RESET}"


def render_row(source: SourceImage, y: int, width: int, glyphs: str) -> tuple[str, str, str]:
    """Render one grid row as (html, terminal, plain), each ending in a newline."""
    html, terminal, plain = [], [], []
    count = len(glyphs)
    for x in range(width):
        r, g, b, a = source.pixel(x, y)
        if is_skipped(r, g, b, a):
            continue
        glyph = glyphs[glyph_index(luminance(r, g, b), count)]
        html.append(_html_cell(r, g, b, glyph))
        terminal.append(_ansi_cell(r, g, b, glyph))
        plain.append(glyph)
    return "".join(html) + "\n", "".join(terminal) + "\n", "".join(plain) + "\n"


def render(source: SourceImage, grid: CharacterGrid, glyphs: str) -> RenderResult:
    """Walk the grid row by row and build all three encodings in lockstep.

    Pixels are read directly at grid coordinates, so the source must be at
    least as large as the grid.
    """
    if not glyphs:
        raise ValueError("Glyph sequence must not be empty")
    if grid.width > source.width or grid.height > source.height:
        raise ValueError(
            f"Grid {grid.width}x{grid.height} exceeds source image {source.width}x{source.height}"
        )

    rows = [render_row(source, y, grid.width, glyphs) for y in range(grid.height)]
    return RenderResult(
        html="".join(row[0] for row in rows),
        terminal="".join(row[1] for row in rows),
        plain="".join(row[2] for row in rows),
    )


def image_to_ascii(
    image: Image.Image | str | Path | bytes,
    config: RenderConfig | None = None,
) -> RenderResult:
    if config is None:
        config = RenderConfig()
    if isinstance(image, bytes):
        image = Image.open(io.BytesIO(image))
    elif not isinstance(image, Image.Image):
        image = Image.open(image)
    image = image.convert("RGBA")

    grid = compute_grid(image.width, image.height, config.max_width, config.char_aspect_ratio)
    if grid.height > 0:
        image = image.resize((grid.width, grid.height), Image.LANCZOS)
    return render(ImageSource(image), grid, config.glyphs)
