"""Dialect detection from the domain name echoed back in a WHOIS response."""

from __future__ import annotations

import re


_DOMAIN_RE = re.compile(
    r"\[?Domain(?:\s+name)?\]?\s*:?\s*[a-z0-9\-]+\.(?P<tld>[a-z]{2,})",
    re.IGNORECASE,
)


def detect_tld(text: str) -> str | None:
    """Return the lower-cased TLD of the first `Domain name: x.tld` match.

    Only the label after the first dot is taken, so `example.co.uk` yields
    `co`. The label is only a lookup key; it is never checked against a TLD
    list.
    """

    match = _DOMAIN_RE.search(text)
    if match is None:
        return None
    return match.group("tld").lower()
