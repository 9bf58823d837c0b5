import pytest

from recipe_kit.assembler import (
    SectionName,
    assemble_recipe,
    parse_recipe,
    validate_recipe,
)
from recipe_kit.errors import EmptyRecipeTextError, RecipeGenerationError
from recipe_kit.observability.base import InMemoryMetricsHook
from recipe_kit.parsers.markdown_parser import MarkdownRecipeParser
from recipe_kit.recipes.models import DifficultyRating, RequestTier


class TestParseRecipe:
    def test_full_premium_recipe(self, sample_recipe_text: str) -> None:
        recipe = parse_recipe(sample_recipe_text, tier=RequestTier.PREMIUM)

        assert recipe.title == "Creamy Garlic Tuscan Pasta"
        assert recipe.serving_size == 4
        assert recipe.prep_time == "15 minutes"
        assert recipe.cook_time == "20 minutes"
        assert recipe.total_time == "35 minutes"
        assert recipe.ingredients.sections == {
            "For the Pasta": ("400g spaghetti", "1 tbsp salt"),
            "For the Sauce": (
                "1/2 cup tomato sauce",
                "2 cloves garlic, minced",
                "Salt to taste",
            ),
        }
        assert recipe.instructions.sections["For the Sauce"] == (
            "Saute the garlic in olive oil.",
            "Stir in the tomato sauce and simmer.",
        )
        assert recipe.plating is not None
        assert recipe.plating.sections == {
            "Presentation": ("Twirl the pasta into a nest", "Finish with basil leaves")
        }
        assert recipe.difficulty == DifficultyRating(
            "Easy", "Few steps and common ingredients"
        )
        assert recipe.nutrition.calories == "520 kcal"
        assert recipe.nutrition.fat == "14 g"
        assert recipe.equipment == ("Large pot", "Skillet")
        assert recipe.tags == ("Italian", "Pasta", "Quick-Easy")
        assert recipe.allergens == ("Gluten", "Dairy")
        assert recipe.chef_notes == (
            "Reserve a cup of pasta water",
            "Salt the water generously.",
            "Taste before serving.",
        )
        assert recipe.wine_pairings == ("Chianti", "Pinot Grigio")

    def test_basic_tier_redacts_premium_fields(self, sample_recipe_text: str) -> None:
        """Populated sections in the text are still dropped for basic requests."""
        recipe = parse_recipe(sample_recipe_text, tier=RequestTier.BASIC)

        assert recipe.chef_notes == ()
        assert recipe.wine_pairings == ()
        assert recipe.tags == ("Italian", "Pasta", "Quick-Easy")

    def test_default_tier_is_basic(self, sample_recipe_text: str) -> None:
        recipe = parse_recipe(sample_recipe_text)

        assert recipe.chef_notes == ()
        assert recipe.wine_pairings == ()

    def test_missing_sections_fall_back_to_defaults(self) -> None:
        recipe = parse_recipe("### Title\nToast\n")

        assert recipe.title == "Toast"
        assert recipe.serving_size == 4
        assert recipe.prep_time == ""
        assert recipe.ingredients.is_empty
        assert recipe.plating is None
        assert recipe.difficulty == DifficultyRating(level="Medium", rationale="")
        assert recipe.equipment == ()

    def test_text_without_any_headings_still_parses(self) -> None:
        recipe = parse_recipe("Sorry, I cannot help with that.")

        assert recipe.title == ""
        assert recipe.ingredients.is_empty

    @pytest.mark.parametrize("text", [None, "", "   \n\t"])
    def test_empty_text_raises(self, text: str | None) -> None:
        with pytest.raises(EmptyRecipeTextError, match="No recipe text"):
            parse_recipe(text)

    def test_empty_text_error_is_a_generation_error(self) -> None:
        with pytest.raises(RecipeGenerationError):
            parse_recipe("")


class TestAssembleRecipe:
    def test_sections_are_found_by_normalized_title(self) -> None:
        document = MarkdownRecipeParser().parse(
            "### Serving Size:\nServes 6\n### DIFFICULTY RATING\n- Level: Hard\n"
        )

        recipe = assemble_recipe(document)

        assert recipe.serving_size == 6
        assert recipe.difficulty.level == "Hard"

    def test_records_metrics(self, sample_recipe_text: str) -> None:
        metrics = InMemoryMetricsHook()
        document = MarkdownRecipeParser().parse("### Title\nToast\n")

        assemble_recipe(document, metrics_hook=metrics)

        assert metrics.counters["recipes_assembled_total"] == 1
        assert metrics.counters["recipe_validation_warnings_total"] == 4


class TestValidateRecipe:
    def test_complete_recipe_has_no_warnings(self, sample_recipe_text: str) -> None:
        assert validate_recipe(parse_recipe(sample_recipe_text)) == []

    def test_reports_missing_fields(self) -> None:
        warnings = validate_recipe(parse_recipe("### Prep Time\n5 minutes\n"))

        assert warnings == [
            "Recipe title is missing",
            "Recipe ingredients are missing",
            "Recipe instructions are missing",
            "Nutrition information is incomplete",
            "One or more time fields are missing",
        ]


def test_section_names_follow_grammar_order() -> None:
    assert [name.value for name in SectionName][:3] == [
        "Title",
        "Serving Size",
        "Prep Time",
    ]
    assert len(SectionName) == 15
