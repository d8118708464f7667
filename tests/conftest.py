import io
import re

import pytest
from PIL import Image

from asciiwall.engine import ImageSource
from asciiwall.model import Wallpaper

_TAG = re.compile(r"<[^>]+>")
_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def strip_tags(html: str) -> str:
    return _TAG.sub("", html)


def strip_ansi(text: str) -> str:
    return _ANSI.sub("", text)


def make_source(width, height, colour=(255, 255, 255)):
    return ImageSource(Image.new("RGB", (width, height), colour))


def source_from_rows(rows):
    """Build a source from a list of rows of (r, g, b) tuples."""
    img = Image.new("RGB", (len(rows[0]), len(rows)))
    for y, row in enumerate(rows):
        for x, colour in enumerate(row):
            img.putpixel((x, y), colour)
    return ImageSource(img)


def png_bytes(width=4, height=4, colour=(200, 100, 50)) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (width, height), colour).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def wallpaper():
    return Wallpaper(
        title="Cherry blossoms <at> dusk",
        copyright="© Someone & Co",
        date="2025-09-22",
        image_url="https://example.com/full.jpg",
    )
