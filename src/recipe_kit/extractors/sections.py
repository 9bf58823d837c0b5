# src/recipe_kit/extractors/sections.py

import logging
from collections.abc import Callable

from recipe_kit.parsers.models import Section
from recipe_kit.recipes.models import PRESENTATION_KEY, RecipeSectionMap

from .text import starts_with_digit, strip_bullet, strip_numbering

logger = logging.getLogger(__name__)

SUBSECTION_MARKER = "#### "


def _subsection_key(title: str) -> str:
    return title.replace(SUBSECTION_MARKER, "").strip()


def _collect_subsections(
    section: Section,
    keep: Callable[[str], bool],
    clean: Callable[[str], str],
) -> dict[str, list[str]]:
    result: dict[str, list[str]] = {}
    for subsection in section.subsections:
        items = [clean(line) for line in subsection.content if keep(line)]
        items = [item for item in items if item]
        if items:
            result[_subsection_key(subsection.title)] = items
    return result


def extract_ingredients(section: Section | None) -> RecipeSectionMap:
    """Bullet lines of every `####` group under Ingredients."""
    if section is None:
        logger.warning("No ingredients section found")
        return RecipeSectionMap()

    sections = _collect_subsections(
        section,
        keep=lambda line: line.startswith("-"),
        clean=strip_bullet,
    )
    logger.debug(
        "Extracted %d ingredient groups: %s", len(sections), list(sections)
    )
    return RecipeSectionMap(sections)


def extract_instructions(section: Section | None) -> RecipeSectionMap:
    """Numbered lines of every `####` group under Instructions."""
    if section is None:
        logger.warning("No instructions section found")
        return RecipeSectionMap()

    sections = _collect_subsections(
        section,
        keep=lambda line: starts_with_digit(line.strip()),
        clean=strip_numbering,
    )
    logger.debug(
        "Extracted %d instruction groups: %s", len(sections), list(sections)
    )
    return RecipeSectionMap(sections)


def extract_plating(section: Section | None) -> RecipeSectionMap | None:
    """All plating lines under a single ``Presentation`` key.

    Unlike ingredients, lines without a bullet marker are kept as well.
    """
    if section is None:
        logger.debug("No plating section found")
        return None

    steps = [strip_bullet(line) for line in section.content if line]
    return RecipeSectionMap({PRESENTATION_KEY: steps})
