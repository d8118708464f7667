import logging
import re
from pathlib import Path

from asciiwall.document import ansi_document, html_document, text_document
from asciiwall.engine import RenderResult
from asciiwall.model import Wallpaper

logger = logging.getLogger(__name__)

MAX_SLUG_LENGTH = 80


def slugify(text: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")
    slug = slug[:MAX_SLUG_LENGTH].rstrip("-")
    return slug or "untitled"


def artifact_dir(root: str | Path, wallpaper: Wallpaper) -> Path:
    """Return ``root/YYYY/MM/DD-<title slug>`` for a wallpaper."""
    year, month, day = wallpaper.date_parts()
    return Path(root) / year / month / f"{day}-{slugify(wallpaper.title)}"


def save_artifacts(root: str | Path, result: RenderResult, wallpaper: Wallpaper) -> dict[str, Path]:
    out_dir = artifact_dir(root, wallpaper)
    out_dir.mkdir(parents=True, exist_ok=True)

    documents = {
        "html": html_document(result, wallpaper),
        "txt": text_document(result, wallpaper),
        "ansi": ansi_document(result, wallpaper),
    }
    paths = {}
    for ext, content in documents.items():
        path = out_dir / f"ascii.{ext}"
        path.write_text(content, encoding="utf-8")
        logger.info("Wrote %s", path)
        paths[ext] = path
    return paths
