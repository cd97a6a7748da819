"""Shared pytest configuration and fixtures for all tests."""

import io
import zipfile
from collections.abc import Callable

import fitz
import pytest
from PIL import Image, PngImagePlugin

from link_scraper.api.config.ScraperConfig import ScraperConfig
from link_scraper.utils.logger import reset_logging


def pytest_configure(config):
    for marker in ("unit", "config", "sniff", "scan", "extract"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def link_scraper_home(tmp_path, monkeypatch):
    """Point LINK_SCRAPER_HOME at an empty temporary directory."""
    home = tmp_path / ".link_scraper"
    monkeypatch.setenv("LINK_SCRAPER_HOME", str(home))
    yield home
    reset_logging()


@pytest.fixture
def config() -> ScraperConfig:
    return ScraperConfig()


# =============================================================================
# Document builders
# =============================================================================


@pytest.fixture
def make_zip() -> Callable[..., bytes]:
    """Factory building a zip archive from (name, content) pairs, in order.

    Entries named in ``stored`` are written uncompressed.
    """

    def build(entries: list[tuple[str, str | bytes]], stored: tuple[str, ...] = ()) -> bytes:
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as archive:
            for name, content in entries:
                compression = zipfile.ZIP_STORED if name in stored else zipfile.ZIP_DEFLATED
                archive.writestr(name, content, compress_type=compression)
        return buffer.getvalue()

    return build


CONTENT_TYPES = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
    '<Default Extension="rels" ContentType="application/vnd.openxmlformats-package.relationships+xml"/>'
    '<Default Extension="xml" ContentType="application/xml"/>'
    "</Types>"
)

PACKAGE_RELS = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">'
    '<Relationship Id="rId1" '
    'Type="http://schemas.openxmlformats.org/officeDocument/2006/relationships/officeDocument" '
    'Target="word/document.xml"/>'
    "</Relationships>"
)

DOCUMENT_RELS = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">'
    '<Relationship Id="rId1" '
    'Type="http://schemas.openxmlformats.org/officeDocument/2006/relationships/styles" '
    'Target="styles.xml"/>'
    '<Relationship Id="rId2" '
    'Type="http://schemas.openxmlformats.org/officeDocument/2006/relationships/hyperlink" '
    'Target="https://rels.example/page" TargetMode="External"/>'
    "</Relationships>"
)

DOCUMENT_XML = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main" '
    'xmlns:r="http://schemas.openxmlformats.org/officeDocument/2006/relationships">'
    "<w:body>"
    "<w:p><w:r><w:t>Plain mention of https://text.example/doc here</w:t></w:r></w:p>"
    '<w:p><w:fldSimple w:instr=" HYPERLINK &quot;https://simple-field.example/&quot; ">'
    "<w:r><w:t>simple</w:t></w:r></w:fldSimple></w:p>"
    '<w:p><w:r><w:fldChar w:fldCharType="begin"/></w:r>'
    '<w:r><w:instrText xml:space="preserve"> HYPERLINK </w:instrText></w:r>'
    '<w:r><w:instrText>"https://complex-field.example/" </w:instrText></w:r>'
    '<w:r><w:fldChar w:fldCharType="separate"/></w:r>'
    "<w:r><w:t>shown</w:t></w:r>"
    '<w:r><w:fldChar w:fldCharType="end"/></w:r></w:p>'
    '<w:p><w:hyperlink r:id="rId2"><w:r><w:t>rels link</w:t></w:r></w:hyperlink></w:p>'
    "</w:body></w:document>"
)


@pytest.fixture
def docx_entries() -> list[tuple[str, str]]:
    return [
        ("[Content_Types].xml", CONTENT_TYPES),
        ("_rels/.rels", PACKAGE_RELS),
        ("word/document.xml", DOCUMENT_XML),
        ("word/_rels/document.xml.rels", DOCUMENT_RELS),
    ]


@pytest.fixture
def docx_bytes(make_zip, docx_entries) -> bytes:
    """A minimal WordprocessingML package with text, field and relationship links."""
    return make_zip(docx_entries)


ODF_CONTENT = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<office:document-content xmlns:office="urn:oasis:names:tc:opendocument:xmlns:office:1.0" '
    'xmlns:text="urn:oasis:names:tc:opendocument:xmlns:text:1.0" '
    'xmlns:xlink="http://www.w3.org/1999/xlink">'
    "<office:body><office:text>"
    '<text:p>See <text:a xlink:type="simple" xlink:href="https://odf.example/">the site</text:a>'
    " or mail info@odf.example</text:p>"
    "</office:text></office:body></office:document-content>"
)

ODF_MANIFEST = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<manifest:manifest xmlns:manifest="urn:oasis:names:tc:opendocument:xmlns:manifest:1.0"/>'
)


@pytest.fixture
def odt_bytes(make_zip) -> bytes:
    """A minimal OpenDocument text package."""
    return make_zip(
        [
            ("mimetype", "application/vnd.oasis.opendocument.text"),
            ("content.xml", ODF_CONTENT),
            ("META-INF/manifest.xml", ODF_MANIFEST),
        ],
        stored=("mimetype",),
    )


@pytest.fixture
def pdf_bytes() -> bytes:
    """Three pages: a URI annotation plus text, a blank page, and an email in text."""
    doc = fitz.open()
    first = doc.new_page()
    first.insert_text((72, 72), "Read more at https://text.example/pdf")
    first.insert_link({"kind": fitz.LINK_URI, "from": fitz.Rect(72, 100, 300, 120), "uri": "https://annot.example/"})
    doc.new_page()
    third = doc.new_page()
    third.insert_text((72, 72), "Write to support@pdf.example")
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def png_with_text() -> bytes:
    info = PngImagePlugin.PngInfo()
    info.add_text("Comment", "Source: https://png.example/origin")
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4)).save(buffer, "PNG", pnginfo=info)
    return buffer.getvalue()


@pytest.fixture
def jpeg_with_exif() -> bytes:
    exif = Image.Exif()
    exif[0x010E] = "Described at https://exif.example/desc"
    exif[0x8298] = "Copyright www.rights.example"
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4)).save(buffer, "JPEG", exif=exif.tobytes())
    return buffer.getvalue()
