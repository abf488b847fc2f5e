"""String safety checks and display sanitization for user input."""

from __future__ import annotations

import re
import unicodedata

__all__ = [
    "is_safe_string",
    "normalize_whitespace",
    "sanitize_string",
    "sanitize_string_list",
]

_HTML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#x27;",
    "/": "&#x2F;",
}
_HTML_SPECIAL = re.compile(r"[&<>\"'/]")

_WHITESPACE_RUN = re.compile(r"\s+")

_ALLOWED_PUNCTUATION = frozenset(".,;:!?()-_@#$%&+=[]{}'\"/\\")
_ALLOWED_CONTROL_WHITESPACE = frozenset("\t\n\r\f\v")


def _is_safe_char(char: str) -> bool:
    if char in _ALLOWED_PUNCTUATION or char in _ALLOWED_CONTROL_WHITESPACE:
        return True
    category = unicodedata.category(char)
    # L* letters, N* digits/numerals, Z* space/line/paragraph separators
    return category[0] in ("L", "N", "Z")


def is_safe_string(value: str) -> bool:
    """Return True if *value* holds only letters, digits, whitespace and
    common punctuation.

    Control characters other than tab and line breaks are rejected, and a
    NUL byte is never accepted.
    """
    if not isinstance(value, str):
        return False
    if "\0" in value:
        return False
    return all(_is_safe_char(char) for char in value)


def sanitize_string(value: str) -> str:
    """Escape HTML special characters in *value* for safe display."""
    if not isinstance(value, str):
        return ""
    return _HTML_SPECIAL.sub(lambda match: _HTML_ESCAPES[match.group(0)], value)


def sanitize_string_list(values: list[str]) -> list[str]:
    """Apply :func:`sanitize_string` to every element of *values*."""
    if not isinstance(values, list):
        return []
    return [sanitize_string(value) for value in values]


def normalize_whitespace(value: str) -> str:
    """Trim *value* and collapse internal whitespace runs to one space."""
    if not isinstance(value, str):
        return ""
    return _WHITESPACE_RUN.sub(" ", value.strip())
