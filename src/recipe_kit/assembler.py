# src/recipe_kit/assembler.py

import logging
from enum import Enum

from recipe_kit.errors import EmptyRecipeTextError
from recipe_kit.extractors import (
    extract_allergens,
    extract_chef_notes,
    extract_difficulty,
    extract_equipment,
    extract_first_line,
    extract_ingredients,
    extract_instructions,
    extract_nutrition,
    extract_plating,
    extract_serving_size,
    extract_tags,
    extract_title,
    extract_wine_pairings,
)
from recipe_kit.observability import names
from recipe_kit.observability.base import MetricsHook, NoOpMetricsHook
from recipe_kit.parsers.base import DocumentParser
from recipe_kit.parsers.markdown_parser import MarkdownRecipeParser
from recipe_kit.parsers.models import ParsedDocument
from recipe_kit.recipes.models import Recipe, RequestTier

logger = logging.getLogger(__name__)


class SectionName(str, Enum):
    """Main sections of the generation grammar, in their expected order."""

    TITLE = "Title"
    SERVING_SIZE = "Serving Size"
    PREP_TIME = "Prep Time"
    COOK_TIME = "Cook Time"
    TOTAL_TIME = "Total Time"
    INGREDIENTS = "Ingredients"
    INSTRUCTIONS = "Instructions"
    PLATING = "Plating"
    DIFFICULTY_RATING = "Difficulty Rating"
    NUTRITION_INFORMATION = "Nutrition Information"
    EQUIPMENT = "Equipment"
    TAGS = "Tags"
    ALLERGENS = "Allergens"
    CHEF_NOTES = "Chef Notes"
    WINE_PAIRINGS = "Wine Pairings"


def assemble_recipe(
    document: ParsedDocument,
    tier: RequestTier = RequestTier.BASIC,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Recipe:
    """Run every extractor against one parsed document.

    Chef notes and wine pairings are redacted to empty lists unless the
    request tier is premium, whatever the document contains.
    """

    def find(name: SectionName):
        return document.find_section(name.value)

    chef_notes = tuple(extract_chef_notes(find(SectionName.CHEF_NOTES)))
    wine_pairings = tuple(extract_wine_pairings(find(SectionName.WINE_PAIRINGS)))
    if tier is not RequestTier.PREMIUM:
        chef_notes = ()
        wine_pairings = ()

    recipe = Recipe(
        title=extract_title(document),
        serving_size=extract_serving_size(find(SectionName.SERVING_SIZE)),
        prep_time=extract_first_line(find(SectionName.PREP_TIME)),
        cook_time=extract_first_line(find(SectionName.COOK_TIME)),
        total_time=extract_first_line(find(SectionName.TOTAL_TIME)),
        ingredients=extract_ingredients(find(SectionName.INGREDIENTS)),
        instructions=extract_instructions(find(SectionName.INSTRUCTIONS)),
        plating=extract_plating(find(SectionName.PLATING)),
        difficulty=extract_difficulty(find(SectionName.DIFFICULTY_RATING)),
        nutrition=extract_nutrition(find(SectionName.NUTRITION_INFORMATION)),
        equipment=tuple(extract_equipment(find(SectionName.EQUIPMENT))),
        tags=tuple(extract_tags(find(SectionName.TAGS))),
        allergens=tuple(extract_allergens(find(SectionName.ALLERGENS))),
        chef_notes=chef_notes,
        wine_pairings=wine_pairings,
    )

    warnings = validate_recipe(recipe)
    for warning in warnings:
        logger.warning("Recipe %r: %s", recipe.title, warning)

    metrics_hook.increment(
        names.RECIPES_ASSEMBLED_TOTAL, labels={"tier": tier.value}
    )
    if warnings:
        metrics_hook.increment(names.RECIPE_VALIDATION_WARNINGS_TOTAL, len(warnings))

    logger.info(
        "Assembled recipe %r: servings=%d, ingredients=%d, steps=%d, tier=%s",
        recipe.title,
        recipe.serving_size,
        recipe.ingredients.total_items,
        recipe.instructions.total_items,
        tier.value,
    )
    return recipe


def parse_recipe(
    text: str | None,
    tier: RequestTier = RequestTier.BASIC,
    parser: DocumentParser | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Recipe:
    """Parse generated text straight into a `Recipe`.

    Raises:
        EmptyRecipeTextError: If there is no text to parse at all.
    """
    if text is None or not text.strip():
        raise EmptyRecipeTextError("No recipe text to parse")

    parser = parser or MarkdownRecipeParser(metrics_hook=metrics_hook)
    document = parser.parse(text)
    return assemble_recipe(document, tier=tier, metrics_hook=metrics_hook)


def validate_recipe(recipe: Recipe) -> list[str]:
    """Human-readable warnings for critical fields that came back empty."""
    warnings = []
    if not recipe.title:
        warnings.append("Recipe title is missing")
    if recipe.ingredients.is_empty:
        warnings.append("Recipe ingredients are missing")
    if recipe.instructions.is_empty:
        warnings.append("Recipe instructions are missing")
    if not recipe.nutrition.calories:
        warnings.append("Nutrition information is incomplete")
    if not (recipe.prep_time and recipe.cook_time and recipe.total_time):
        warnings.append("One or more time fields are missing")
    return warnings
