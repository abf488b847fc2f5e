"""Heuristic email and URL detection for clickable text regions.

The patterns are intentionally loose. They can sweep trailing punctuation
into a URL or match dotted words such as ``Node.js``; callers treat the
result as best effort, not as RFC-exact parsing.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["LinkMatch", "find_links", "to_link_target"]

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")

URL_PATTERN = re.compile(
    r"(?:https?://)?"  # optional scheme
    r"(?:www\.)?"
    r"(?:[A-Za-z0-9-]+\.)+[A-Za-z]{2,}"  # dotted host ending in a TLD
    r"(?:/[^\s|]*)?",  # optional path
    re.IGNORECASE,
)

_SCHEME = re.compile(r"^https?://", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class LinkMatch:
    """A linkable substring: ``text[start:end]`` pointing at ``target``."""

    start: int
    end: int
    text: str
    target: str


def to_link_target(value: str, *, is_email: bool = False) -> str:
    """Return the link target for *value*: ``mailto:`` or https by default."""
    if is_email:
        return f"mailto:{value}"
    if _SCHEME.match(value):
        return value
    return f"https://{value}"


def find_links(text: str) -> list[LinkMatch]:
    """Return email and URL matches in *text*, ordered by position.

    URL matches that overlap an email (its domain, typically) are dropped.
    """
    matches = [
        LinkMatch(m.start(), m.end(), m.group(0), to_link_target(m.group(0), is_email=True))
        for m in EMAIL_PATTERN.finditer(text)
    ]
    email_spans = [(match.start, match.end) for match in matches]

    for m in URL_PATTERN.finditer(text):
        if any(m.start() < end and start < m.end() for start, end in email_spans):
            continue
        matches.append(LinkMatch(m.start(), m.end(), m.group(0), to_link_target(m.group(0))))

    return sorted(matches, key=lambda match: match.start)
