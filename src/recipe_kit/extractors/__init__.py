"""Field extractors.

Independent, pure functions that decode one named section of a
`ParsedDocument` into a typed field. A missing section is never an error:
every extractor falls back to a documented default.
"""

from .lists import (
    extract_allergens,
    extract_chef_notes,
    extract_equipment,
    extract_tags,
    extract_wine_pairings,
)
from .scalars import (
    extract_difficulty,
    extract_first_line,
    extract_nutrition,
    extract_serving_size,
    extract_title,
)
from .sections import extract_ingredients, extract_instructions, extract_plating

__all__ = [
    # Scalars
    "extract_title",
    "extract_serving_size",
    "extract_first_line",
    "extract_difficulty",
    "extract_nutrition",
    # Section maps
    "extract_ingredients",
    "extract_instructions",
    "extract_plating",
    # Lists
    "extract_equipment",
    "extract_allergens",
    "extract_tags",
    "extract_chef_notes",
    "extract_wine_pairings",
]
