# src/recipe_kit/extractors/scalars.py

import logging
import re

from recipe_kit.parsers.models import ParsedDocument, Section
from recipe_kit.recipes.models import (
    DEFAULT_DIFFICULTY_LEVEL,
    DEFAULT_SERVING_SIZE,
    DifficultyRating,
    NutritionInfo,
)

logger = logging.getLogger(__name__)

_DIGITS_RE = re.compile(r"\d+", re.ASCII)

LEVEL_PREFIX = "- Level:"
RATIONALE_PREFIX = "- Rationale:"

CALORIES_PREFIX = "- Calories:"
PROTEIN_PREFIX = "- Protein:"
CARBOHYDRATES_PREFIX = "- Carbohydrates:"
FAT_PREFIX = "- Fat:"


def extract_title(document: ParsedDocument) -> str:
    """First line of the section titled exactly `Title`, or ``""``."""
    section = document.section_titled("title")
    if section is None or section.first_line is None:
        logger.warning("No title found in document")
        return ""
    return section.first_line.strip()


def extract_first_line(section: Section | None) -> str:
    """Used for the prep, cook and total time fields."""
    if section is None or section.first_line is None:
        return ""
    return section.first_line


def extract_serving_size(section: Section | None) -> int:
    """First run of digits in the section's first line; 4 when absent."""
    line = section.first_line if section is not None else None
    if line is None:
        logger.warning(
            "No serving size found, using default of %d", DEFAULT_SERVING_SIZE
        )
        return DEFAULT_SERVING_SIZE

    match = _DIGITS_RE.search(line)
    if match is None:
        logger.warning(
            "Could not parse serving size from %r, using default of %d",
            line,
            DEFAULT_SERVING_SIZE,
        )
        return DEFAULT_SERVING_SIZE

    return int(match.group())


def extract_difficulty(section: Section | None) -> DifficultyRating:
    if section is None:
        logger.debug("No difficulty section, using defaults")
        return DifficultyRating()

    level = DEFAULT_DIFFICULTY_LEVEL
    rationale = ""
    for line in section.content:
        if line.startswith(LEVEL_PREFIX):
            level = line[len(LEVEL_PREFIX) :].strip()
        elif line.startswith(RATIONALE_PREFIX):
            rationale = line[len(RATIONALE_PREFIX) :].strip()

    return DifficultyRating(level=level, rationale=rationale)


def extract_nutrition(section: Section | None) -> NutritionInfo:
    if section is None:
        logger.debug("No nutrition section, using empty values")
        return NutritionInfo()

    values = {
        CALORIES_PREFIX: "",
        PROTEIN_PREFIX: "",
        CARBOHYDRATES_PREFIX: "",
        FAT_PREFIX: "",
    }
    for line in section.content:
        trimmed = line.strip()
        for prefix in values:
            if trimmed.startswith(prefix):
                values[prefix] = trimmed[len(prefix) :].strip()
                break

    return NutritionInfo(
        calories=values[CALORIES_PREFIX],
        protein=values[PROTEIN_PREFIX],
        carbohydrates=values[CARBOHYDRATES_PREFIX],
        fat=values[FAT_PREFIX],
    )
