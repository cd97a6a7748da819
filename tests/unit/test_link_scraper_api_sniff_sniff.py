"""Unit tests for link_scraper.api.sniff module."""

import magic
import pytest

from link_scraper.api.sniff.FormatTag import FormatTag
from link_scraper.api.sniff.mime import decode_text, format_for_mime, guess_mime_type
from link_scraper.api.sniff.sniff import sniff

pytestmark = pytest.mark.sniff


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        (b"%PDF-1.7\n%\xe2\xe3\xcf\xd3\n", FormatTag.PDF),
        (b"junk before\n%PDF-1.4\n", FormatTag.PDF),
        (b"{\\rtf1\\ansi hello}", FormatTag.RTF),
        (b"\xef\xbb\xbf  \r\n{\\rtf1 hello}", FormatTag.RTF),
        (b"\x89PNG\r\n\x1a\n" + b"\x00" * 16, FormatTag.IMAGE),
        (b"\xff\xd8\xff\xe0\x00\x10JFIF", FormatTag.IMAGE),
        (b"GIF89a\x01\x00\x01\x00", FormatTag.IMAGE),
        (b"II*\x00\x08\x00\x00\x00", FormatTag.IMAGE),
        (b"RIFF\x00\x00\x00\x00WEBPVP8 ", FormatTag.IMAGE),
        (b'<?xml version="1.0"?><root/>', FormatTag.XML),
        (b'<svg xmlns="http://www.w3.org/2000/svg"/>', FormatTag.SVG),
        (b"<!-- drawing -->\n<svg/>", FormatTag.SVG),
        (b'<doc xmlns:xlink="http://www.w3.org/1999/xlink"/>', FormatTag.XLINK),
        (b"hello mailto:a@b.com", FormatTag.PLAIN_TEXT),
        (b"", FormatTag.PLAIN_TEXT),
        (b"\xff\xfeh\x00i\x00", FormatTag.PLAIN_TEXT),
        (b"<3 is not markup", FormatTag.PLAIN_TEXT),
        (b"<john@x.example> wrote: see http://a.example/", FormatTag.PLAIN_TEXT),
        (b"<a href=unquoted>text</a>", FormatTag.PLAIN_TEXT),
        (b"<b class='note'>bold</b>", FormatTag.XML),
        (b'<?xml version="1.0"?>\n<john@x.example>', FormatTag.XML),
        (b"\x00\x01\x02\xff\xfe binary", FormatTag.UNKNOWN),
    ],
)
def test_sniff(data, expected):
    assert sniff(data) is expected


def test_sniff_pdf_header_outside_window_is_not_pdf():
    assert sniff(b"x" * 2048 + b"%PDF-1.4") is FormatTag.PLAIN_TEXT


def test_sniff_ooxml(docx_bytes):
    assert sniff(docx_bytes) is FormatTag.OOXML


def test_sniff_odf(odt_bytes):
    assert sniff(odt_bytes) is FormatTag.ODF


def test_sniff_generic_zip_is_unknown(make_zip):
    assert sniff(make_zip([("notes.txt", "http://a.test")])) is FormatTag.UNKNOWN


def test_sniff_ooxml_marker_beyond_leading_entries(make_zip):
    """Content types entry beyond the leading headers is still found."""
    entries = [(f"part{index}.xml", "<x/>") for index in range(10)]
    entries.append(("[Content_Types].xml", "<Types/>"))

    assert sniff(make_zip(entries)) is FormatTag.OOXML


def test_sniff_odf_by_manifest(make_zip):
    data = make_zip([("content.xml", "<x/>"), ("META-INF/manifest.xml", "<m/>")])

    assert sniff(data) is FormatTag.ODF


def test_sniff_truncated_zip_is_unknown():
    assert sniff(b"PK\x03\x04" + b"\x00" * 10) is FormatTag.UNKNOWN


def test_guess_mime_type(make_zip):
    assert guess_mime_type(b"%PDF-1.4\n") == "application/pdf"
    assert guess_mime_type(make_zip([("notes.txt", "hello")])) == "application/zip"
    assert guess_mime_type(b"") == "application/x-empty"
    assert guess_mime_type(b"plain words") == "text/plain"
    assert guess_mime_type(b"\x00\x00\x00") == "application/octet-stream"


def test_format_for_mime():
    assert format_for_mime("image/png") is FormatTag.IMAGE
    assert format_for_mime(" Application/PDF ") is FormatTag.PDF
    assert format_for_mime("text/rtf") is FormatTag.RTF
    assert format_for_mime("text/xml") is FormatTag.XML
    assert format_for_mime("image/svg+xml") is FormatTag.SVG
    assert format_for_mime("application/x-empty") is FormatTag.PLAIN_TEXT
    assert format_for_mime("application/vnd.openxmlformats-officedocument.wordprocessingml.document") is FormatTag.OOXML
    assert format_for_mime("application/vnd.oasis.opendocument.text") is FormatTag.ODF
    assert format_for_mime("application/x-unknown") is FormatTag.UNKNOWN


def test_decode_text_honours_bom():
    assert decode_text(b"\xef\xbb\xbfhi") == "hi"
    assert decode_text("hi".encode("utf-16")) == "hi"
    assert decode_text(b"caf\xc3\xa9") == "café"
    assert decode_text(b"bad \xff", errors="replace") == "bad �"


def test_format_tag_supported_excludes_unknown():
    supported = FormatTag.supported()

    assert FormatTag.UNKNOWN not in supported
    assert len(supported) == 9


def test_sniff_odf_mimetype_in_leading_entries(make_zip):
    """A leading ODF mimetype entry decides even when an OOXML marker follows."""
    data = make_zip(
        [("mimetype", "application/vnd.oasis.opendocument.text"), ("[Content_Types].xml", "<Types/>")],
        stored=("mimetype",),
    )

    assert sniff(data) is FormatTag.ODF


def test_sniff_foreign_mimetype_entry_is_not_odf(make_zip):
    data = make_zip([("mimetype", "application/epub+zip"), ("content.xml", "<x/>")], stored=("mimetype",))

    assert sniff(data) is FormatTag.UNKNOWN


def test_guess_mime_type_falls_back_on_libmagic_error(monkeypatch):
    def fail(*args, **kwargs):
        raise magic.MagicException("no database")

    monkeypatch.setattr(magic, "from_buffer", fail)

    assert guess_mime_type(b"anything") == "application/octet-stream"
