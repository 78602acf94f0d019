"""Uri scalar: an absolute resource locator sent on the wire as a string."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

import httpx

from scryfall_types.errors import InvalidUri

# RFC 3986 unreserved, reserved and percent characters.
_URI_CHARS_RE = re.compile(r"[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]+")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*:")
# RFC 3986 appendix B split: scheme, authority, path, query, fragment.
_COMPONENTS_RE = re.compile(r"[^:/?#]+:(?://([^/?#]*))?([^?#]*)(?:\?([^#]*))?(?:#(.*))?")
# Brackets only delimit an IP-literal host.
_AUTHORITY_RE = re.compile(r"(?:[^\[\]@]*@)?(?:\[[^\[\]]+\]|[^\[\]]*)(?::[0-9]*)?")


@dataclass(frozen=True)
class Uri:
    """A validated absolute URI, kept exactly as received."""

    value: str

    @classmethod
    def parse(cls, raw: Any) -> Uri:
        """Parse a wire URI string, raising ``InvalidUri`` on bad input.

        Only syntax is checked; nothing is normalized or fetched.
        """
        if not isinstance(raw, str):
            raise InvalidUri(raw)
        if not _URI_CHARS_RE.fullmatch(raw) or _BAD_ESCAPE_RE.search(raw):
            raise InvalidUri(raw)
        if not _SCHEME_RE.match(raw):
            raise InvalidUri(raw)
        parts = _COMPONENTS_RE.fullmatch(raw)
        if parts is None:
            raise InvalidUri(raw)
        authority, path, query, fragment = parts.groups()
        if authority is not None and not _AUTHORITY_RE.fullmatch(authority):
            raise InvalidUri(raw)
        rest = path + (query or "") + (fragment or "")
        if "[" in rest or "]" in rest or "#" in (fragment or ""):
            raise InvalidUri(raw)
        try:
            url = httpx.URL(raw)
        except httpx.InvalidURL as exc:
            raise InvalidUri(raw) from exc
        if not url.is_absolute_url:
            raise InvalidUri(raw)
        return cls(raw)

    @property
    def url(self) -> httpx.URL:
        """Return the URI as an ``httpx.URL`` for transports."""
        return httpx.URL(self.value)

    def __str__(self) -> str:
        return self.value
