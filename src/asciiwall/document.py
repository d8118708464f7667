"""Wrap a rendering in the documents that get printed or persisted."""

from html import escape

from asciiwall.engine import RenderResult
from asciiwall.model import Wallpaper

HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <style>
        body {{
            font-family: 'Courier New', monospace;
            background: #000;
            color: #fff;
            display: flex;
            flex-direction: column;
            justify-content: center;
            align-items: center;
            min-height: 100vh;
            margin: 0;
            padding: 0;
        }}
        #meta {{
            font-size: 12px;
            margin: 8px 0;
            text-align: center;
            color: #aaa;
        }}
        #ascii {{
            white-space: pre;
            line-height: 1;
            font-size: 8px;
            letter-spacing: 0.5px;
            text-align: center;
        }}
    </style>
</head>
<body>
    <div id="meta">
        <h1>{title}</h1>
        <p class="date">{date}</p>
        <p class="copyright">{copyright}</p>
    </div>
    <div id="ascii">{body}</div>
</body>
</html>
"""


def html_document(result: RenderResult, wallpaper: Wallpaper) -> str:
    return HTML_TEMPLATE.format(
        title=escape(wallpaper.title),
        date=escape(wallpaper.date),
        copyright=escape(wallpaper.copyright),
        body=result.html,
    )


def metadata_header(wallpaper: Wallpaper) -> str:
    return f"Title: {wallpaper.title}\nDate: {wallpaper.date}\nCopyright: {wallpaper.copyright}\n\n"


def text_document(result: RenderResult, wallpaper: Wallpaper) -> str:
    return metadata_header(wallpaper) + result.plain


def ansi_document(result: RenderResult, wallpaper: Wallpaper) -> str:
    return metadata_header(wallpaper) + result.terminal
