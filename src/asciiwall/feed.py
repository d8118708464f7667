"""Daily wallpaper feed client and image download/decoding."""

from __future__ import annotations

import io
import logging

import requests
from PIL import Image, UnidentifiedImageError
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from asciiwall.model import Wallpaper

logger = logging.getLogger(__name__)

FEED_URL = "https://peapix.com/bing/feed"
COUNTRIES = ("au", "br", "ca", "cn", "de", "fr", "in", "it", "jp", "es", "gb", "us")
MAX_IMAGES = 7


class FeedError(RuntimeError):
    """Fetching or decoding a wallpaper failed."""


class FeedClient:
    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: tuple[float, float] = (5.0, 15.0),
        retries: int = 3,
    ):
        self.timeout = timeout
        if session is None:
            session = requests.Session()
            retry = Retry(
                total=retries,
                connect=retries,
                read=retries,
                backoff_factor=0.3,
                status_forcelist=(429, 500, 502, 503, 504),
            )
            adapter = HTTPAdapter(max_retries=retry)
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        self.session = session

    def _get(self, url: str, params: dict | None = None) -> requests.Response:
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise FeedError(f"Request to {url} failed: {e}") from e
        return response

    def wallpapers(self, country: str = "jp", count: int = MAX_IMAGES) -> list[Wallpaper]:
        """List the most recent wallpapers for a region, newest first."""
        if country not in COUNTRIES:
            raise ValueError(f"Unknown country {country!r}, expected one of: {' '.join(COUNTRIES)}")
        if not 1 <= count <= MAX_IMAGES:
            raise ValueError(f"count must be between 1 and {MAX_IMAGES}, got {count}")

        logger.info("Fetching %d wallpapers for %s", count, country)
        response = self._get(FEED_URL, params={"country": country, "n": count})
        try:
            entries = response.json()
        except ValueError as e:
            raise FeedError(f"Feed returned invalid JSON: {e}") from e
        if not isinstance(entries, list):
            raise FeedError(f"Feed returned {type(entries).__name__}, expected a list")
        try:
            return [Wallpaper.from_feed(entry) for entry in entries]
        except ValueError as e:
            raise FeedError(str(e)) from e

    def image_bytes(self, url: str) -> bytes:
        logger.info("Downloading %s", url)
        data = self._get(url).content
        logger.debug("Downloaded %d bytes", len(data))
        return data


def decode_image(data: bytes) -> Image.Image:
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (UnidentifiedImageError, OSError) as e:
        raise FeedError(f"Could not decode image: {e}") from e
    return image
