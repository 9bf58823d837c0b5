# src/recipe_kit/extractors/text.py

"""Line-cleaning helpers shared by the field extractors."""

import re

_DASH_BULLET_RE = re.compile(r"^-\s*")
_ANY_BULLET_RE = re.compile(r"^[-*]\s*")
_NUMBERING_RE = re.compile(r"^\d+\.\s*")
_LEADING_DIGIT_RE = re.compile(r"^\d", re.ASCII)
_PARENTHETICAL_RE = re.compile(r"\([^)]*\)")
_REMARKS_RE = re.compile(r"\(.*\)")
_WHITESPACE_RE = re.compile(r"\s+")


def strip_bullet(line: str) -> str:
    """Drop a leading `-` marker and the whitespace after it."""
    return _DASH_BULLET_RE.sub("", line, count=1)


def strip_any_bullet(line: str) -> str:
    """Drop a leading `-` or `*` marker."""
    return _ANY_BULLET_RE.sub("", line, count=1)


def strip_numbering(line: str) -> str:
    """Drop a leading `N.` step number."""
    return _NUMBERING_RE.sub("", line, count=1)


def starts_with_digit(line: str) -> bool:
    return _LEADING_DIGIT_RE.match(line) is not None


def strip_parentheticals(text: str) -> str:
    return _PARENTHETICAL_RE.sub("", text)


def strip_remarks(text: str) -> str:
    """Drop the span from the first `(` to the last `)`."""
    return _REMARKS_RE.sub("", text)


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def capitalize_first(text: str) -> str:
    """Upper-case the first character only; the rest is left as authored."""
    return text[:1].upper() + text[1:]
