# src/recipe_kit/recipes/models.py

import uuid
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

PRESENTATION_KEY = "Presentation"
DEFAULT_SERVING_SIZE = 4
DEFAULT_DIFFICULTY_LEVEL = "Medium"


class RequestTier(str, Enum):
    """Tier of the request a recipe was generated for."""

    BASIC = "basic"
    PREMIUM = "premium"


@dataclass(frozen=True)
class RecipeSectionMap:
    """Titled groups of items (ingredients, steps, plating notes).

    Keys are subsection titles as authored. Storage order carries no meaning;
    use `sorted_items()` for display. The mapping is read-only and its item
    groups are tuples, whatever the caller passed in.
    """

    sections: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = {title: tuple(items) for title, items in self.sections.items()}
        object.__setattr__(self, "sections", MappingProxyType(frozen))

    @property
    def total_items(self) -> int:
        return sum(len(items) for items in self.sections.values())

    @property
    def all_items(self) -> list[str]:
        return [item for items in self.sections.values() for item in items]

    @property
    def is_empty(self) -> bool:
        return not self.sections

    def sorted_items(self) -> list[tuple[str, tuple[str, ...]]]:
        return sorted(self.sections.items())


@dataclass(frozen=True)
class DifficultyRating:
    level: str = DEFAULT_DIFFICULTY_LEVEL
    rationale: str = ""


@dataclass(frozen=True)
class NutritionInfo:
    calories: str = ""
    protein: str = ""
    carbohydrates: str = ""
    fat: str = ""


@dataclass(frozen=True)
class Recipe:
    """A fully assembled recipe.

    Immutable all the way down: list fields are stored as tuples. Built once
    from a parsed document and handed to the caller.
    `chef_notes` and `wine_pairings` are empty for non-premium requests.
    """

    title: str
    serving_size: int
    prep_time: str
    cook_time: str
    total_time: str
    ingredients: RecipeSectionMap
    instructions: RecipeSectionMap
    plating: RecipeSectionMap | None = None
    difficulty: DifficultyRating = field(default_factory=DifficultyRating)
    nutrition: NutritionInfo = field(default_factory=NutritionInfo)
    equipment: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    allergens: tuple[str, ...] | None = None
    chef_notes: tuple[str, ...] = ()
    wine_pairings: tuple[str, ...] = ()
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def __post_init__(self) -> None:
        for name in _LIST_FIELDS:
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, tuple(value))

    def to_dict(self) -> dict[str, Any]:
        """Plain-type representation, safe for JSON or YAML dumping."""
        return {
            "id": self.id,
            "title": self.title,
            "serving_size": self.serving_size,
            "prep_time": self.prep_time,
            "cook_time": self.cook_time,
            "total_time": self.total_time,
            "ingredients": _copy_sections(self.ingredients.sections),
            "instructions": _copy_sections(self.instructions.sections),
            "plating": (
                _copy_sections(self.plating.sections) if self.plating else None
            ),
            "difficulty": {
                "level": self.difficulty.level,
                "rationale": self.difficulty.rationale,
            },
            "nutrition": {
                "calories": self.nutrition.calories,
                "protein": self.nutrition.protein,
                "carbohydrates": self.nutrition.carbohydrates,
                "fat": self.nutrition.fat,
            },
            "equipment": list(self.equipment),
            "tags": list(self.tags),
            "allergens": (
                list(self.allergens) if self.allergens is not None else None
            ),
            "chef_notes": list(self.chef_notes),
            "wine_pairings": list(self.wine_pairings),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Recipe":
        """Inverse of `to_dict`. Missing optional keys take their defaults."""
        plating = data.get("plating")
        allergens = data.get("allergens")
        extra: dict[str, Any] = {}
        if data.get("id"):
            extra["id"] = data["id"]

        return cls(
            title=data["title"],
            serving_size=int(data["serving_size"]),
            prep_time=data.get("prep_time", ""),
            cook_time=data.get("cook_time", ""),
            total_time=data.get("total_time", ""),
            ingredients=RecipeSectionMap(
                _copy_sections(data.get("ingredients") or {})
            ),
            instructions=RecipeSectionMap(
                _copy_sections(data.get("instructions") or {})
            ),
            plating=(
                RecipeSectionMap(_copy_sections(plating))
                if plating is not None
                else None
            ),
            difficulty=DifficultyRating(**(data.get("difficulty") or {})),
            nutrition=NutritionInfo(**(data.get("nutrition") or {})),
            equipment=tuple(data.get("equipment") or ()),
            tags=tuple(data.get("tags") or ()),
            allergens=tuple(allergens) if allergens is not None else None,
            chef_notes=tuple(data.get("chef_notes") or ()),
            wine_pairings=tuple(data.get("wine_pairings") or ()),
            **extra,
        )


_LIST_FIELDS = ("equipment", "tags", "allergens", "chef_notes", "wine_pairings")


def _copy_sections(
    sections: Mapping[str, Iterable[str]],
) -> dict[str, list[str]]:
    return {title: list(items) for title, items in sections.items()}
