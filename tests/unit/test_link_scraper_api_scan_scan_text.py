"""Unit tests for link_scraper.api.scan.scan_text module."""

import pytest

from link_scraper.api.link.LinkKind import LinkKind
from link_scraper.api.link.Location import Location
from link_scraper.api.link.Provenance import Provenance
from link_scraper.api.scan.scan_text import scan_text

pytestmark = pytest.mark.scan


def test_scan_empty_text_yields_nothing():
    assert list(scan_text("")) == []


def test_scan_text_without_links():
    assert list(scan_text("Nothing to see here. Really, nothing (at all).")) == []


def test_scan_url_in_sentence_trims_period():
    links = list(scan_text("Visit https://example.com/path."))

    assert len(links) == 1
    assert links[0].raw_text == "https://example.com/path"
    assert links[0].normalized_uri == "https://example.com/path"
    assert links[0].kind is LinkKind.URL
    assert links[0].provenance is Provenance.TEXTUAL
    assert str(links[0].location) == "char[6]"


def test_scan_url_in_parentheses():
    links = list(scan_text("(see http://a.test)"))

    assert [link.raw_text for link in links] == ["http://a.test"]
    assert str(links[0].location) == "char[5]"


def test_scan_keeps_balanced_parentheses():
    links = list(scan_text("https://en.wikipedia.org/wiki/A_(b) is an article"))

    assert links[0].raw_text == "https://en.wikipedia.org/wiki/A_(b)"


def test_scan_email():
    links = list(scan_text("Contact bob@Example.COM today"))

    assert len(links) == 1
    assert links[0].kind is LinkKind.EMAIL
    assert links[0].raw_text == "bob@Example.COM"
    assert links[0].normalized_uri == "mailto:bob@example.com"


def test_scan_mailto_prefers_longer_span():
    """The bare address inside a mailto: URI is not reported twice."""
    links = list(scan_text("write to mailto:a@b.com please"))

    assert len(links) == 1
    assert links[0].raw_text == "mailto:a@b.com"
    assert links[0].kind is LinkKind.EMAIL
    assert links[0].normalized_uri == "mailto:a@b.com"


def test_scan_bare_www():
    links = list(scan_text("go to www.example.com/docs, then leave"))

    assert len(links) == 1
    assert links[0].raw_text == "www.example.com/docs"
    assert links[0].normalized_uri == "http://www.example.com/docs"
    assert links[0].kind is LinkKind.URL


def test_scan_bare_domain_with_path():
    links = list(scan_text("docs live at example.org/manual today"))

    assert [link.normalized_uri for link in links] == ["http://example.org/manual"]


def test_scan_bare_domain_without_path_is_ignored():
    assert list(scan_text("file.txt and config.json")) == []


def test_scan_unknown_scheme():
    links = list(scan_text("clone git+ssh://host.example/repo.git now"))

    assert links[0].raw_text == "git+ssh://host.example/repo.git"
    assert links[0].kind is LinkKind.UNKNOWN_SCHEME


def test_scan_multiple_links_in_order():
    text = "a http://one.example/ b two@mail.example c www.three.example"
    links = list(scan_text(text))

    assert [link.raw_text for link in links] == ["http://one.example/", "two@mail.example", "www.three.example"]
    assert [str(link.location) for link in links] == ["char[2]", "char[24]", "char[43]"]


def test_scan_location_is_nested_under_base():
    links = list(scan_text("x http://a.test", Location.of("p", "text()")))

    assert str(links[0].location) == "p!text()!char[2]"


def test_scan_is_restartable():
    text = "http://a.test and http://b.test"

    assert list(scan_text(text)) == list(scan_text(text))


def test_scan_bare_scheme_is_discarded():
    assert list(scan_text("the prefix http://... alone")) == []


@pytest.mark.parametrize(
    ("text", "raw_text", "offset"),
    [
        ("e.g.http://example.com/x", "http://example.com/x", 4),
        ("see foo-https://b.example/ now", "https://b.example/", 8),
        ("i.e.FTP://files.example/pub", "FTP://files.example/pub", 4),
    ],
)
def test_scan_known_scheme_glued_to_word(text, raw_text, offset):
    links = list(scan_text(text))

    assert [(link.raw_text, link.kind) for link in links] == [(raw_text, LinkKind.URL)]
    assert str(links[0].location) == f"char[{offset}]"


def test_scan_glued_schemes_normalize_to_plain_form():
    links = list(scan_text("e.g.http://example.com/x and foo-https://b.example/"))

    assert [link.normalized_uri for link in links] == ["http://example.com/x", "https://b.example/"]


def test_scan_unknown_compound_scheme_is_kept_whole():
    links = list(scan_text("open coap+tcp://device.example/state"))

    assert [(link.raw_text, link.kind) for link in links] == [
        ("coap+tcp://device.example/state", LinkKind.UNKNOWN_SCHEME)
    ]
