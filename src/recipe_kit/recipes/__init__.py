from .models import (
    DEFAULT_DIFFICULTY_LEVEL,
    DEFAULT_SERVING_SIZE,
    PRESENTATION_KEY,
    DifficultyRating,
    NutritionInfo,
    Recipe,
    RecipeSectionMap,
    RequestTier,
)

__all__ = [
    "DEFAULT_DIFFICULTY_LEVEL",
    "DEFAULT_SERVING_SIZE",
    "PRESENTATION_KEY",
    "DifficultyRating",
    "NutritionInfo",
    "Recipe",
    "RecipeSectionMap",
    "RequestTier",
]
