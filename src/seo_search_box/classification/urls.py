"""URL and domain matching shared by the classifier and its helpers."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit

from seo_search_box.classification import patterns


@dataclass(frozen=True)
class ParsedUrl:
    domain: str
    protocol: str
    path: str
    has_scheme: bool
    has_path: bool


def matches_url_shape(value: str) -> bool:
    """Return True if ``value`` looks like ``[scheme://]host.tld[/path]``."""
    scheme = patterns.SCHEME_PATTERN.match(value)
    rest = value[scheme.end():] if scheme else value
    if not patterns.URL_ALPHABET.fullmatch(rest):
        return False
    return patterns.URL_PATTERN.match(value) is not None


def matches_domain_shape(value: str) -> bool:
    """Return True if ``value`` is a bare domain such as ``shop.example.com``."""
    return patterns.DOMAIN_PATTERN.match(value) is not None


def parse_url(value: str) -> ParsedUrl | None:
    """Split ``value`` into domain, protocol and path.

    A missing scheme is read as ``https``. Returns None when the host part is
    not a plain dotted hostname.
    """
    has_scheme = patterns.SCHEME_PATTERN.match(value) is not None
    candidate = value if has_scheme else f"https://{value}"
    try:
        parts = urlsplit(candidate)
        hostname = parts.hostname
    except ValueError:
        return None
    if not hostname or not patterns.HOSTNAME_PATTERN.match(hostname):
        return None
    return ParsedUrl(
        domain=strip_www(hostname),
        protocol=parts.scheme,
        path=parts.path or "/",
        has_scheme=has_scheme,
        has_path=bool(parts.path),
    )


def strip_www(hostname: str) -> str:
    """Lower-case ``hostname`` and drop a leading ``www.`` label.

    ``www.com`` is kept whole; stripping would leave a single label.
    """
    hostname = hostname.lower()
    rest = hostname.removeprefix("www.")
    return rest if "." in rest else hostname
