# src/recipe_kit/cookbook/models.py

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from recipe_kit.recipes.models import Recipe


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class SavedRecipe:
    recipe: Recipe
    id: str = field(default_factory=_new_id)
    added_at: datetime = field(default_factory=utc_now)


@dataclass(frozen=True)
class RecipeCollection:
    """A named, caller-owned group of recipes.

    Immutable; every change produces a new collection value.
    """

    name: str
    description: str = ""
    premium_only: bool = False
    recipes: tuple[SavedRecipe, ...] = ()
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def contains(self, recipe: Recipe) -> bool:
        return any(saved.recipe.id == recipe.id for saved in self.recipes)

    def __len__(self) -> int:
        return len(self.recipes)
