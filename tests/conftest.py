import pytest

SAMPLE_RECIPE = """\
### Title
Creamy Garlic Tuscan Pasta

### Serving Size
4 servings

### Prep Time
15 minutes

### Cook Time
20 minutes

### Total Time
35 minutes

### Ingredients
#### For the Pasta:
- 400g spaghetti
- 1 tbsp salt

#### For the Sauce:
- 1/2 cup tomato sauce
- 2 cloves garlic, minced
- Salt to taste

### Instructions
#### For the Pasta:
1. Bring a large pot of salted water to a boil.
2. Cook the spaghetti until al dente.

#### For the Sauce:
1. Saute the garlic in olive oil.
2. Stir in the tomato sauce and simmer.

### Plating
- Twirl the pasta into a nest
Finish with basil leaves

### Difficulty Rating
- Level: Easy
- Rationale: Few steps and common ingredients

### Nutrition Information
- Calories: 520 kcal
- Protein: 16 g
- Carbohydrates: 78 g
- Fat: 14 g

### Equipment
- Large pot
- Skillet

### Tags
- italian, Quick-Easy, (optional)
- pasta

### Allergens
- Gluten (from pasta)
- Dairy

### Chef Notes
- Reserve a cup of pasta water (it is starchy)
salt the water generously. taste before serving

### Wine Pairings
- Chianti
- Pinot Grigio (chilled)
"""


@pytest.fixture
def sample_recipe_text() -> str:
    """A complete, well-formed generated recipe."""
    return SAMPLE_RECIPE
