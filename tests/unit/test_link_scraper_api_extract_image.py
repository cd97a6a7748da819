"""Unit tests for the image metadata extractor."""

import io

import pytest
from PIL import Image

from link_scraper.api.extract._image._extract_image import _decode_user_comment, _decode_xp, _extract_image
from link_scraper.api.extract.ContainerUnreadable import ContainerUnreadable
from link_scraper.api.link.Provenance import Provenance

pytestmark = pytest.mark.extract


def test_png_text_chunk(png_with_text, config):
    result = _extract_image(png_with_text, config)

    assert [(str(link.location), link.normalized_uri) for link in result.links] == [
        ("text[Comment]!char[8]", "https://png.example/origin")
    ]


def test_jpeg_exif_tags(jpeg_with_exif, config):
    result = _extract_image(jpeg_with_exif, config)

    assert [(str(link.location), link.normalized_uri) for link in result.links] == [
        ("exif[0x010E]!char[13]", "https://exif.example/desc"),
        ("exif[0x8298]!char[10]", "http://www.rights.example"),
    ]
    assert all(link.provenance is Provenance.TEXTUAL for link in result.links)


def test_image_without_metadata(config):
    buffer = io.BytesIO()
    Image.new("RGB", (2, 2)).save(buffer, "PNG")

    result = _extract_image(buffer.getvalue(), config)

    assert result.links == ()
    assert result.errors == ()


def test_unidentified_image_is_unreadable(config):
    with pytest.raises(ContainerUnreadable, match="image"):
        _extract_image(b"not an image", config)


def test_decode_xp():
    encoded = "see https://xp.example/".encode("utf-16-le") + b"\x00\x00"

    assert _decode_xp(encoded) == "see https://xp.example/"
    assert _decode_xp(tuple(encoded)) == "see https://xp.example/"
    assert _decode_xp(None) is None


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (b"ASCII\x00\x00\x00mail me@example.org", "mail me@example.org"),
        (b"UNICODE\x00" + "hi".encode("utf-16-le"), "hi"),
        (b"UNICODE\x00" + "hi".encode("utf-16-be"), "hi"),
        (b"\x00" * 8 + b"plain", "plain"),
        (b"hello world", "hello world"),
        ("already text", "already text"),
        (None, None),
    ],
)
def test_decode_user_comment(value, expected):
    assert _decode_user_comment(value) == expected
