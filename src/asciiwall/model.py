import datetime as dt
from dataclasses import dataclass


@dataclass(frozen=True)
class Wallpaper:
    title: str
    copyright: str
    date: str  # YYYY-MM-DD
    full_url: str = ""
    thumb_url: str = ""
    image_url: str = ""
    page_url: str = ""

    @classmethod
    def from_feed(cls, entry: dict) -> "Wallpaper":
        """Build from one item of the feed's JSON array."""
        if not isinstance(entry, dict):
            raise ValueError(f"Feed entry must be an object, got {type(entry).__name__}")
        try:
            wallpaper = cls(
                title=entry["title"],
                copyright=entry.get("copyright") or "",
                date=entry["date"],
                full_url=entry.get("fullUrl") or "",
                thumb_url=entry.get("thumbUrl") or "",
                image_url=entry["imageUrl"],
                page_url=entry.get("pageUrl") or "",
            )
        except KeyError as e:
            raise ValueError(f"Feed entry is missing {e.args[0]!r}") from None
        for name in ("title", "copyright", "date", "full_url", "thumb_url", "image_url", "page_url"):
            value = getattr(wallpaper, name)
            if not isinstance(value, str):
                raise ValueError(f"Feed entry field {name!r} must be a string, got {type(value).__name__}")
        wallpaper.date_parts()
        return wallpaper

    @classmethod
    def local(cls, title: str, date: dt.date | None = None) -> "Wallpaper":
        """Metadata for an image that did not come from the feed."""
        date = date or dt.date.today()
        return cls(title=title, copyright="", date=date.isoformat())

    def date_parts(self) -> tuple[str, str, str]:
        try:
            parsed = dt.date.fromisoformat(self.date)
        except ValueError:
            raise ValueError(f"Expected a YYYY-MM-DD date, got {self.date!r}") from None
        return f"{parsed.year:04d}", f"{parsed.month:02d}", f"{parsed.day:02d}"
