import pytest

from recipe_kit.assembler import parse_recipe
from recipe_kit.observability.base import InMemoryMetricsHook
from recipe_kit.recipes.models import RecipeSectionMap
from recipe_kit.scaling.classifier import IngredientCategory
from recipe_kit.scaling.scaler import (
    CategoryScaling,
    LinearScaling,
    parse_quantity,
    scale_ingredient,
    scale_recipe,
    scale_section_map,
)


class TestParseQuantity:
    @pytest.mark.parametrize(
        "text, expected",
        [("2", 2.0), ("1.5", 1.5), ("1/2", 0.5), ("3/4", 0.75)],
    )
    def test_readable(self, text: str, expected: float) -> None:
        assert parse_quantity(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", ["1/0", "", "abc"])
    def test_unreadable(self, text: str) -> None:
        assert parse_quantity(text) is None


class TestLinearScaling:
    @pytest.mark.parametrize(
        "ingredient, original, target, expected",
        [
            ("400g spaghetti", 4, 8, "800 g spaghetti"),
            ("1/2 cup sauce", 4, 2, "1/4 cup sauce"),
            ("1 tbsp salt", 4, 8, "2 tbsp salt"),
            ("1.5 cups flour", 4, 8, "3 cups flour"),
            ("2 cloves garlic, minced", 4, 6, "3 cloves garlic, minced"),
            ("3 eggs", 4, 2, "1 1/2 eggs"),
        ],
    )
    def test_scales_leading_quantity(
        self, ingredient: str, original: int, target: int, expected: str
    ) -> None:
        assert scale_ingredient(ingredient, original, target) == expected

    def test_same_serving_count_is_identity(self) -> None:
        assert scale_ingredient("2 cups milk", 4, 4) == "2 cups milk"

    def test_number_without_unit_keeps_spacing(self) -> None:
        assert (
            scale_ingredient("2 (14 oz) cans tomatoes", 4, 8)
            == "4 (14 oz) cans tomatoes"
        )

    @pytest.mark.parametrize(
        "ingredient",
        ["Salt to taste", "a pinch of nutmeg", "Juice of 1 lemon", ""],
    )
    def test_lines_without_leading_number_pass_through(self, ingredient: str) -> None:
        assert scale_ingredient(ingredient, 4, 8) == ingredient

    def test_unreadable_quantity_passes_through(self) -> None:
        assert scale_ingredient("1/0 cup sugar", 4, 8) == "1/0 cup sugar"

    @pytest.mark.parametrize("original, target", [(0, 4), (4, 0), (-2, 4)])
    def test_non_positive_servings_pass_through(
        self, original: int, target: int
    ) -> None:
        assert scale_ingredient("2 eggs", original, target) == "2 eggs"

    def test_records_passthrough_metrics(self) -> None:
        metrics = InMemoryMetricsHook()

        scale_ingredient("2 eggs", 4, 8, metrics_hook=metrics)
        scale_ingredient("Salt to taste", 4, 8, metrics_hook=metrics)

        assert metrics.counters["scaling_lines_total"] == 2
        assert metrics.counters["scaling_passthrough_total"] == 1


class TestCategoryScaling:
    @pytest.fixture
    def strategy(self) -> CategoryScaling:
        return CategoryScaling()

    def test_steak_becomes_one_per_serving(self, strategy: CategoryScaling) -> None:
        assert scale_ingredient("2 ribeye steaks", 4, 6, strategy) == "6 ribeye steaks"

    def test_pasta_scales_linearly(self, strategy: CategoryScaling) -> None:
        assert scale_ingredient("400g spaghetti", 4, 8, strategy) == "800 g spaghetti"

    def test_seasoning_scales_sublinearly(self, strategy: CategoryScaling) -> None:
        assert scale_ingredient("1 tsp salt", 4, 16, strategy) == "2 tsp salt"

    def test_sauce_uses_unicode_fractions(self, strategy: CategoryScaling) -> None:
        assert scale_ingredient("1/2 cup sauce", 4, 2, strategy) == "¼ cup sauce"
        assert (
            scale_ingredient("1 cup tomato sauce", 4, 10, strategy)
            == "2 ¼ cup tomato sauce"
        )

    def test_same_serving_count_is_identity(self, strategy: CategoryScaling) -> None:
        assert scale_ingredient("1 cup arborio rice", 4, 4, strategy) == (
            "1 cup arborio rice"
        )

    def test_custom_classifier(self) -> None:
        strategy = CategoryScaling(classifier=lambda _: IngredientCategory.SEASONING)

        assert scale_ingredient("1 cup flour", 4, 16, strategy) == "2 cup flour"


class TestScaleRecipe:
    def test_scales_every_ingredient_section(self, sample_recipe_text: str) -> None:
        recipe = parse_recipe(sample_recipe_text)

        scaled = scale_recipe(recipe, 8, strategy=LinearScaling())

        assert scaled.serving_size == 8
        assert scaled.ingredients.sections == {
            "For the Pasta": ("800 g spaghetti", "2 tbsp salt"),
            "For the Sauce": (
                "1 cup tomato sauce",
                "4 cloves garlic, minced",
                "Salt to taste",
            ),
        }

    def test_leaves_original_untouched(self, sample_recipe_text: str) -> None:
        recipe = parse_recipe(sample_recipe_text)

        scaled = scale_recipe(recipe, 2)

        assert recipe.serving_size == 4
        assert recipe.ingredients.sections["For the Pasta"][0] == "400g spaghetti"
        assert scaled.id == recipe.id
        assert scaled.instructions == recipe.instructions

    def test_scaled_copy_shares_no_mutable_state(
        self, sample_recipe_text: str
    ) -> None:
        """Nothing reachable from the copy can change the original."""
        recipe = parse_recipe(sample_recipe_text)

        scaled = scale_recipe(recipe, 8)

        with pytest.raises(AttributeError):
            scaled.tags.append("Mutated")  # type: ignore[attr-defined]
        with pytest.raises(AttributeError):
            scaled.equipment.clear()  # type: ignore[attr-defined]
        with pytest.raises(TypeError):
            scaled.instructions.sections["For the Pasta"] = ()  # type: ignore[index]
        assert recipe.tags == ("Italian", "Pasta", "Quick-Easy")
        assert recipe.equipment == ("Large pot", "Skillet")
        assert recipe.instructions.sections["For the Pasta"] == (
            "Bring a large pot of salted water to a boil.",
            "Cook the spaghetti until al dente.",
        )

    @pytest.mark.parametrize("target", [0, -1])
    def test_rejects_non_positive_target(
        self, sample_recipe_text: str, target: int
    ) -> None:
        recipe = parse_recipe(sample_recipe_text)

        with pytest.raises(ValueError, match="target_servings"):
            scale_recipe(recipe, target)

    def test_scale_section_map_keeps_titles(self) -> None:
        section_map = RecipeSectionMap({"Main": ["1 egg"], "Side": []})

        scaled = scale_section_map(section_map, 2, 4)

        assert scaled.sections == {"Main": ("2 egg",), "Side": ()}
