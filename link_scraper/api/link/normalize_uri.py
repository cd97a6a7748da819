"""URI normalization and kind classification."""

import re
from urllib.parse import urlsplit

from .LinkKind import LinkKind

URL_SCHEMES = frozenset(
    {
        "http",
        "https",
        "ftp",
        "ftps",
        "sftp",
        "file",
        "ws",
        "wss",
        "git",
        "ssh",
        "svn",
        "news",
        "nntp",
        "telnet",
        "gopher",
        "irc",
        "ircs",
    }
)

_SCHEME_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")
_EMAIL_RE = re.compile(r"^[A-Za-z0-9._%+\-]+@[A-Za-z0-9\-]+(?:\.[A-Za-z0-9\-]+)*\.[A-Za-z]{2,}$")
_WWW_RE = re.compile(r"^www\d{0,3}\.", re.IGNORECASE)
_BARE_HOST_RE = re.compile(
    r"^(?:[A-Za-z0-9](?:[A-Za-z0-9\-]*[A-Za-z0-9])?\.)+[A-Za-z]{2,24}/",
)


def _is_bare_host(value: str) -> bool:
    return bool(_WWW_RE.match(value) or _BARE_HOST_RE.match(value))


def split_scheme(value: str) -> str | None:
    """Return the scheme of ``value`` or None for scheme-less references."""
    if _is_bare_host(value):
        return None
    match = _SCHEME_RE.match(value)
    return match.group(1) if match else None


def classify_kind(value: str) -> LinkKind:
    """Classify a reference as url, email or unknown-scheme."""
    value = value.strip()
    if _EMAIL_RE.match(value):
        return LinkKind.EMAIL
    if _is_bare_host(value):
        return LinkKind.URL
    scheme = split_scheme(value)
    if scheme is None:
        return LinkKind.UNKNOWN_SCHEME
    scheme = scheme.lower()
    if scheme == "mailto":
        return LinkKind.EMAIL
    if scheme in URL_SCHEMES:
        return LinkKind.URL
    return LinkKind.UNKNOWN_SCHEME


def _lower_domain(address: str) -> str:
    local, at, domain = address.rpartition("@")
    return f"{local}{at}{domain.lower()}" if at else address


def _lower_authority(authority: str) -> str:
    userinfo, at, hostport = authority.rpartition("@")
    return f"{userinfo}{at}{hostport.lower()}"


def normalize_uri(value: str) -> str | None:
    """Best-effort canonical form of a reference.

    Lower-cases the scheme and host and keeps path, query and fragment
    exactly. Bare ``www.``/domain references gain an ``http://`` prefix and
    bare emails a ``mailto:`` prefix.

    Returns:
        The normalized URI, or None for relative references and values that
        cannot be parsed as a URI.
    """
    value = value.strip()
    if not value:
        return None

    if _EMAIL_RE.match(value):
        return f"mailto:{_lower_domain(value)}"

    if _is_bare_host(value):
        value = f"http://{value}"

    scheme = split_scheme(value)
    if scheme is None:
        return None

    rest = value[len(scheme) + 1 :]
    scheme = scheme.lower()

    if scheme == "mailto":
        address, sep, query = rest.partition("?")
        if not address and not query:
            return None
        return f"mailto:{_lower_domain(address)}{sep}{query}"

    try:
        urlsplit(value)
    except ValueError:
        return None

    if not rest.startswith("//"):
        if not rest:
            return None
        return f"{scheme}:{rest}"

    remainder = rest[2:]
    cut = len(remainder)
    for delimiter in "/?#":
        index = remainder.find(delimiter)
        if index != -1:
            cut = min(cut, index)
    authority, tail = remainder[:cut], remainder[cut:]

    if not authority and scheme != "file":
        return None

    return f"{scheme}://{_lower_authority(authority)}{tail}"
