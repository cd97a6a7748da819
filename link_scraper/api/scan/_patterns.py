"""Candidate patterns for plaintext link scanning."""

import re

from ..link.normalize_uri import URL_SCHEMES

# Characters that may appear inside a URL found in prose
_URL_CHAR = r"[^\s<>\"'`{}|\\^\x00-\x1f\x7f]"

_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9\-]{0,61}[A-Za-z0-9])?"

SCHEME_URL_PATTERN = re.compile(rf"(?<![A-Za-z0-9+.\-])[A-Za-z][A-Za-z0-9+.\-]{{0,31}}://{_URL_CHAR}+")

MAILTO_PATTERN = re.compile(rf"(?<![A-Za-z0-9])mailto:{_URL_CHAR}+", re.IGNORECASE)

WWW_PATTERN = re.compile(
    rf"(?<![/\w.@\-])www\d{{0,3}}\.{_LABEL}(?:\.{_LABEL})+(?:[:/?#]{_URL_CHAR}*)?",
    re.IGNORECASE,
)

BARE_DOMAIN_PATTERN = re.compile(rf"(?<![/\w.@\-:])(?:{_LABEL}\.)+[A-Za-z]{{2,24}}/{_URL_CHAR}*")

EMAIL_PATTERN = re.compile(rf"(?<![\w.%+\-])[A-Za-z0-9._%+\-]+@{_LABEL}(?:\.{_LABEL})*\.[A-Za-z]{{2,24}}\b")

_SCHEME_SEPARATOR = re.compile(r"[.\-]")


def protected_prefix_length(candidate: str) -> int:
    """Length of the leading part of a candidate that trimming must never touch."""
    marker = candidate.find("://")
    if marker != -1:
        return marker + 3
    if candidate[:7].lower() == "mailto:":
        return 7
    return 0


def known_scheme_offset(candidate: str) -> int:
    """Offset at which a known URL scheme glued to a preceding word starts.

    ``e.g.http://a.test`` restarts at ``http`` and ``foo-https://b.test`` at
    ``https``. Candidates whose whole scheme is known, or that hold no known
    scheme after a ``.`` or ``-``, start at 0.
    """
    marker = candidate.find("://")
    if marker == -1:
        return 0
    scheme = candidate[:marker].lower()
    if scheme in URL_SCHEMES:
        return 0
    for separator in _SCHEME_SEPARATOR.finditer(scheme):
        if scheme[separator.end() :] in URL_SCHEMES:
            return separator.end()
    return 0


PATTERNS: tuple[re.Pattern[str], ...] = (
    SCHEME_URL_PATTERN,
    MAILTO_PATTERN,
    WWW_PATTERN,
    BARE_DOMAIN_PATTERN,
    EMAIL_PATTERN,
)
