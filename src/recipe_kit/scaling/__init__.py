"""Serving-size scaling for ingredient lines.

Two strategies are available and the caller picks one:

- `LinearScaling` (default): quantity * target / original, ASCII fractions.
- `CategoryScaling`: per-category curves from `classify_ingredient`,
  Unicode fraction glyphs.

Example:
    >>> from recipe_kit.scaling import CategoryScaling, scale_ingredient
    >>> scale_ingredient("2 ribeye steaks", 4, 6, strategy=CategoryScaling())
    '6 ribeye steaks'
"""

from .classifier import CATEGORY_KEYWORDS, IngredientCategory, classify_ingredient
from .formatting import FractionStyle, QuantityFormatter
from .scaler import (
    CategoryScaling,
    LinearScaling,
    ScalingStrategy,
    parse_quantity,
    scale_ingredient,
    scale_recipe,
    scale_section_map,
)

__all__ = [
    # Classifier
    "CATEGORY_KEYWORDS",
    "IngredientCategory",
    "classify_ingredient",
    # Formatting
    "FractionStyle",
    "QuantityFormatter",
    # Strategies
    "ScalingStrategy",
    "LinearScaling",
    "CategoryScaling",
    # Operations
    "parse_quantity",
    "scale_ingredient",
    "scale_section_map",
    "scale_recipe",
]
