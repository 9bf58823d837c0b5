# src/recipe_kit/extractors/lists.py

import logging
import re

from recipe_kit.parsers.models import Section

from .text import (
    capitalize_first,
    collapse_whitespace,
    starts_with_digit,
    strip_any_bullet,
    strip_bullet,
    strip_numbering,
    strip_parentheticals,
    strip_remarks,
)

logger = logging.getLogger(__name__)

# Each pattern captures a comma-separated clause that names wines. The cue
# words are not anchored to word boundaries: "unlike Chianti" still matches.
_WINE_CLAUSE = r"([^,.]+(?:,\s*[^,.]+)*)"
WINE_PATTERNS = [
    re.compile(r"such as " + _WINE_CLAUSE, re.IGNORECASE),
    re.compile(r"like " + _WINE_CLAUSE, re.IGNORECASE),
    re.compile(r"pair(?:s|ed)? with " + _WINE_CLAUSE, re.IGNORECASE),
    re.compile(r"recommend(?:ed)? " + _WINE_CLAUSE, re.IGNORECASE),
]
_CONNECTOR_RE = re.compile(r"\b(?:such as|like|or|and)\b", re.IGNORECASE)


def extract_equipment(section: Section | None) -> list[str]:
    if section is None:
        logger.debug("No equipment section found")
        return []

    items = [strip_bullet(line) for line in section.content if line]
    return [item for item in items if item]


def extract_allergens(section: Section | None) -> list[str]:
    """Allergen lines with bullets and parenthesized remarks removed.

    Everything from the first `(` to the last `)` goes, so a line carrying
    several remarks keeps only its leading name.
    """
    if section is None:
        logger.debug("No allergens section found")
        return []

    allergens = []
    for line in section.content:
        cleaned = collapse_whitespace(strip_remarks(strip_bullet(line)))
        if cleaned:
            allergens.append(cleaned)
    return allergens


def _title_case_words(text: str) -> str:
    return " ".join(capitalize_first(word) for word in text.split(" "))


def extract_tags(section: Section | None) -> list[str]:
    """Comma-split, title-cased, deduplicated and sorted tags.

    >>> from recipe_kit.parsers.models import Section
    >>> extract_tags(Section("Tags", ["- italian, Quick-Easy, (optional)"]))
    ['Italian', 'Quick-Easy']
    """
    if section is None:
        logger.debug("No tags section found")
        return []

    tags: set[str] = set()
    for line in section.content:
        for token in strip_any_bullet(line).split(","):
            cleaned = strip_parentheticals(token.strip()).strip()
            cleaned = _title_case_words(cleaned)
            if cleaned:
                tags.add(cleaned)

    return sorted(tags)


def _split_sentences(line: str) -> list[str]:
    notes = []
    for fragment in line.split(". "):
        fragment = fragment.strip()
        if not fragment:
            continue
        notes.append(fragment if fragment.endswith(".") else fragment + ".")
    return notes


def extract_chef_notes(section: Section | None) -> list[str]:
    """One note per bullet or numbered line; plain paragraphs are split
    into sentences."""
    if section is None:
        logger.debug("No chef notes section found")
        return []

    raw: list[str] = []
    for line in section.content:
        if not line.strip():
            continue
        if line.startswith(("-", "*")):
            raw.append(strip_any_bullet(line))
        elif starts_with_digit(line):
            raw.append(strip_numbering(line))
        else:
            raw.extend(_split_sentences(line))

    notes = []
    for note in raw:
        cleaned = capitalize_first(strip_parentheticals(note).strip())
        if cleaned:
            notes.append(cleaned)
    return notes


def _clean_wine(candidate: str) -> str:
    cleaned = strip_parentheticals(candidate)
    cleaned = collapse_whitespace(_CONNECTOR_RE.sub("", cleaned))
    return capitalize_first(cleaned)


def extract_wine_pairings(section: Section | None) -> list[str]:
    """Wine names from prose clauses ("pairs with ...") and bullet lines."""
    if section is None:
        logger.debug("No wine pairings section found")
        return []

    candidates: set[str] = set()
    content = " ".join(section.content)
    for pattern in WINE_PATTERNS:
        match = pattern.search(content)
        if match is None:
            continue
        for wine in match.group(1).split(","):
            wine = wine.strip()
            if wine:
                candidates.add(wine)

    for line in section.content:
        if line.startswith("-"):
            bullet = strip_bullet(line)
            if bullet:
                candidates.add(bullet)

    pairings = {_clean_wine(candidate) for candidate in candidates}
    pairings.discard("")
    return sorted(pairings)
