# src/recipe_kit/scaling/classifier.py

import math
from enum import Enum

# Servings the category curves are normalized against.
BASE_SERVINGS = 4.0


class IngredientCategory(str, Enum):
    """Closed set of categories driving category-aware scaling."""

    STEAK = "steak"
    OTHER_PROTEIN = "other_protein"
    PASTA = "pasta"
    RICE = "rice"
    VEGETABLE = "vegetable"
    POTATO = "potato"
    SAUCE = "sauce"
    SEASONING = "seasoning"
    LIQUID = "liquid"
    OTHER = "other"

    @property
    def base_portion_per_person(self) -> float:
        """Standard portion per person, in the category's usual unit."""
        return _BASE_PORTIONS[self]

    @property
    def counts_whole_items(self) -> bool:
        """Whether the quantity is one whole item per serving."""
        return self is IngredientCategory.STEAK

    def scaling_curve(self, servings: float) -> float:
        """Multiplier for `servings`.

        Every curve equals 1.0 at four servings except steak, which is the
        count of whole items itself.
        """
        if self is IngredientCategory.STEAK:
            return servings
        if self is IngredientCategory.PASTA:
            ounces = self.base_portion_per_person * servings
            return ounces / (self.base_portion_per_person * BASE_SERVINGS)
        if self is IngredientCategory.SEASONING:
            return math.sqrt(servings) / math.sqrt(BASE_SERVINGS)
        if self is IngredientCategory.SAUCE:
            discount = 0.9 if servings > 6 else 1.0
            return servings * discount / BASE_SERVINGS
        return servings / BASE_SERVINGS


_BASE_PORTIONS: dict[IngredientCategory, float] = {
    IngredientCategory.STEAK: 1.0,  # one steak
    IngredientCategory.OTHER_PROTEIN: 6.0,  # oz
    IngredientCategory.PASTA: 4.0,  # oz dry
    IngredientCategory.RICE: 0.25,  # cup dry
    IngredientCategory.VEGETABLE: 1.0,  # cup cooked
    IngredientCategory.POTATO: 1.0,  # medium potato
    IngredientCategory.SAUCE: 0.25,  # cup
    IngredientCategory.SEASONING: 1.0,
    IngredientCategory.LIQUID: 1.0,
    IngredientCategory.OTHER: 1.0,
}

# Checked in this order; the first category with a matching keyword wins.
CATEGORY_KEYWORDS: list[tuple[IngredientCategory, tuple[str, ...]]] = [
    (IngredientCategory.STEAK, ("ribeye", "sirloin", "filet", "t-bone", "steak")),
    (
        IngredientCategory.PASTA,
        ("pasta", "spaghetti", "fettuccine", "penne", "linguine", "tagliatelle"),
    ),
    (IngredientCategory.RICE, ("rice", "arborio", "basmati", "jasmine")),
    (
        IngredientCategory.VEGETABLE,
        ("asparagus", "broccoli", "carrot", "spinach", "kale", "zucchini"),
    ),
    (IngredientCategory.POTATO, ("potato", "yukon", "russet")),
    (IngredientCategory.SAUCE, ("sauce", "gravy", "dressing", "marinade")),
    (
        IngredientCategory.SEASONING,
        ("salt", "pepper", "spice", "herb", "garlic", "seasoning"),
    ),
    (
        IngredientCategory.OTHER_PROTEIN,
        ("chicken", "fish", "pork", "beef", "salmon"),
    ),
]


def classify_ingredient(ingredient: str) -> IngredientCategory:
    """Keyword-based category for one ingredient line.

    Ties go to the earlier category in `CATEGORY_KEYWORDS`, not to the
    longest or most specific keyword: "steak sauce" is a steak.
    """
    lowered = ingredient.lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return category
    return IngredientCategory.OTHER
