"""Small string helpers: trimming, markup escaping and column width."""

import unicodedata

WHITESPACE = " \n\r\t\f\v"

# Order matters: '&' must be escaped before the entities that contain it.
_MARKUP_REPLACEMENTS = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def ltrim(s: str) -> str:
    """Strip leading whitespace."""
    return s.lstrip(WHITESPACE)


def rtrim(s: str) -> str:
    """Strip trailing whitespace."""
    return s.rstrip(WHITESPACE)


def trim(s: str) -> str:
    """Strip whitespace from both ends."""
    return rtrim(ltrim(s))


def sanitize_string(text: str) -> str:
    """Escape the characters ``&<>"'`` for use in Pango markup."""
    for char, entity in _MARKUP_REPLACEMENTS:
        text = text.replace(char, entity)
    return text


def column_width(text: str) -> int:
    """Number of terminal columns the text takes; wide characters count twice."""
    return sum(2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1 for ch in text)