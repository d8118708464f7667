import argparse
import logging
import sys
from pathlib import Path

from asciiwall.converter import image_to_ascii
from asciiwall.feed import COUNTRIES, MAX_IMAGES, FeedClient, FeedError, decode_image
from asciiwall.logging_conf import setup_logging
from asciiwall.model import Wallpaper
from asciiwall.storage import save_artifacts

logger = logging.getLogger(__name__)


def _fail(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Render a wallpaper or local image as coloured ASCII art")
    parser.add_argument("image", nargs="?", default=None, help="Local image to render (default: fetch from the feed)")
    parser.add_argument("-c", "--country", default="jp", choices=COUNTRIES, help="Feed region (default: jp)")
    parser.add_argument(
        "-n", "--count", type=int, default=MAX_IMAGES, help=f"Wallpapers to request, 1-{MAX_IMAGES} (default: {MAX_IMAGES})"
    )
    parser.add_argument("-i", "--index", type=int, default=0, help="Which wallpaper of the feed to render (default: 0)")
    parser.add_argument("-o", "--output", default=None, help="Directory to write .html, .txt and .ansi files into")
    parser.add_argument("-q", "--quiet", action="store_true", default=False, help="Do not print the art")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Debug logging")
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    try:
        if args.image is not None:
            image_path = Path(args.image)
            if not image_path.exists():
                return _fail(f"File not found: {image_path}")
            wallpaper = Wallpaper.local(image_path.stem)
            image = decode_image(image_path.read_bytes())
        else:
            client = FeedClient()
            wallpapers = client.wallpapers(args.country, args.count)
            if not wallpapers:
                return _fail("No wallpapers found")
            if not 0 <= args.index < len(wallpapers):
                return _fail(f"Index {args.index} out of range, feed has {len(wallpapers)} wallpapers")
            wallpaper = wallpapers[args.index]
            image = decode_image(client.image_bytes(wallpaper.image_url))
        if args.output:
            # the output layout is derived from the date, reject a bad one before rendering
            wallpaper.date_parts()
        result = image_to_ascii(image)
    except (FeedError, ValueError, OSError) as e:
        return _fail(str(e))

    logger.info("Rendered %s (%s)", wallpaper.title, wallpaper.date)
    if not args.quiet:
        print(result.terminal, end="")
    if args.output:
        try:
            save_artifacts(args.output, result, wallpaper)
        except OSError as e:
            return _fail(f"Could not write to {args.output}: {e}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
