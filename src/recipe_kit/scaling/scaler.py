# src/recipe_kit/scaling/scaler.py

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Protocol

from recipe_kit.observability import names
from recipe_kit.observability.base import MetricsHook, NoOpMetricsHook
from recipe_kit.recipes.models import Recipe, RecipeSectionMap

from .classifier import IngredientCategory, classify_ingredient
from .formatting import QuantityFormatter

logger = logging.getLogger(__name__)

# Leading quantity, then an optional letters-only unit, then the rest verbatim.
_QUANTITY_RE = re.compile(
    r"^(\d+/\d+|\d+(?:\.\d+)?)(?:\s*([A-Za-z]+))?(.*)$", re.ASCII | re.DOTALL
)


class ScalingStrategy(Protocol):
    """How a leading quantity reacts to a change in servings."""

    formatter: QuantityFormatter

    def scale(
        self,
        quantity: float,
        ingredient: str,
        original_servings: int,
        target_servings: int,
    ) -> float: ...


@dataclass(frozen=True)
class LinearScaling:
    """Plain proportional scaling: quantity * target / original."""

    formatter: QuantityFormatter = field(default_factory=QuantityFormatter.ascii)

    def scale(
        self,
        quantity: float,
        ingredient: str,
        original_servings: int,
        target_servings: int,
    ) -> float:
        return quantity * target_servings / original_servings


@dataclass(frozen=True)
class CategoryScaling:
    """Non-linear scaling keyed by the ingredient's category.

    Whole-item categories (steak) take the target serving count as the new
    quantity. Other categories follow their curve relative to the recipe's
    own serving count, so scaling to the same count is a no-op.
    """

    formatter: QuantityFormatter = field(default_factory=QuantityFormatter.unicode)
    classifier: Callable[[str], IngredientCategory] = classify_ingredient

    def scale(
        self,
        quantity: float,
        ingredient: str,
        original_servings: int,
        target_servings: int,
    ) -> float:
        category = self.classifier(ingredient)
        if category.counts_whole_items:
            return float(target_servings)
        return (
            quantity
            * category.scaling_curve(target_servings)
            / category.scaling_curve(original_servings)
        )


def parse_quantity(text: str) -> float | None:
    """Decimal or ``a/b`` text to a number; None when it cannot be read."""
    numerator, slash, denominator = text.partition("/")
    try:
        if slash:
            return float(numerator) / float(denominator)
        return float(text)
    except (ValueError, ZeroDivisionError):
        return None


def scale_ingredient(
    ingredient: str,
    original_servings: int,
    target_servings: int,
    strategy: ScalingStrategy | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> str:
    """Rescale the leading quantity of one ingredient line.

    Lines without a leading number, with an unreadable number, or with
    non-positive serving counts come back unchanged.

        >>> scale_ingredient("400g spaghetti", 4, 8)
        '800 g spaghetti'
        >>> scale_ingredient("1/2 cup sauce", 4, 2)
        '1/4 cup sauce'
    """
    strategy = strategy or LinearScaling()
    metrics_hook.increment(names.SCALING_LINES_TOTAL)

    match = _QUANTITY_RE.match(ingredient)
    if match is None or original_servings <= 0 or target_servings <= 0:
        metrics_hook.increment(names.SCALING_PASSTHROUGH_TOTAL)
        return ingredient

    number_text, unit, remainder = match.groups()
    quantity = parse_quantity(number_text)
    if quantity is None:
        logger.debug("Unreadable quantity %r in %r", number_text, ingredient)
        metrics_hook.increment(names.SCALING_PASSTHROUGH_TOTAL)
        return ingredient

    scaled = strategy.scale(quantity, ingredient, original_servings, target_servings)
    formatted = strategy.formatter.format(scaled)
    unit_part = f" {unit}" if unit else ""
    return f"{formatted}{unit_part}{remainder}"


def scale_section_map(
    section_map: RecipeSectionMap,
    original_servings: int,
    target_servings: int,
    strategy: ScalingStrategy | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> RecipeSectionMap:
    return RecipeSectionMap(
        {
            title: [
                scale_ingredient(
                    item,
                    original_servings,
                    target_servings,
                    strategy=strategy,
                    metrics_hook=metrics_hook,
                )
                for item in items
            ]
            for title, items in section_map.sections.items()
        }
    )


def scale_recipe(
    recipe: Recipe,
    target_servings: int,
    strategy: ScalingStrategy | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Recipe:
    """A copy of `recipe` with ingredients rescaled to `target_servings`.

    The original recipe is left untouched; the copy keeps its id.
    """
    if target_servings <= 0:
        raise ValueError("target_servings must be > 0")

    ingredients = scale_section_map(
        recipe.ingredients,
        recipe.serving_size,
        target_servings,
        strategy=strategy,
        metrics_hook=metrics_hook,
    )
    logger.debug(
        "Scaled %r from %d to %d servings",
        recipe.title,
        recipe.serving_size,
        target_servings,
    )
    return replace(recipe, ingredients=ingredients, serving_size=target_servings)
