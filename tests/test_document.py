from asciiwall.charsets import DENSE_TO_LIGHT
from asciiwall.converter import render
from asciiwall.document import ansi_document, html_document, metadata_header, text_document
from asciiwall.sampler import CharacterGrid
from conftest import make_source


def _result():
    return render(make_source(3, 2, (100, 150, 200)), CharacterGrid(3, 2), DENSE_TO_LIGHT)


def test_metadata_header(wallpaper):
    assert metadata_header(wallpaper) == (
        "Title: Cherry blossoms <at> dusk\nDate: 2025-09-22\nCopyright: © Someone & Co\n\n"
    )


def test_text_document(wallpaper):
    assert text_document(_result(), wallpaper).endswith("\n\n???\n???\n")


def test_ansi_document(wallpaper):
    result = _result()
    doc = ansi_document(result, wallpaper)
    assert doc.startswith("Title: ")
    assert doc.endswith(result.terminal)


def test_html_document_embeds_body_and_escapes_metadata(wallpaper):
    result = _result()
    doc = html_document(result, wallpaper)
    assert doc.startswith("<!DOCTYPE html>")
    assert f'<div id="ascii">{result.html}</div>' in doc
    assert "<title>Cherry blossoms &lt;at&gt; dusk</title>" in doc
    assert "2025-09-22" in doc
    assert "© Someone &amp; Co" in doc
    assert "white-space: pre;" in doc
    assert '<meta charset="UTF-8">' in doc
