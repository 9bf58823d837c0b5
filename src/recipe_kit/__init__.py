# Parsing
from .parsers import (
    DocumentParser,
    MarkdownRecipeParser,
    ParsedDocument,
    Section,
    Subsection,
    tokenize_heading,
)

# Recipes
from .recipes import (
    DifficultyRating,
    NutritionInfo,
    Recipe,
    RecipeSectionMap,
    RequestTier,
)

# Assembly
from .assembler import SectionName, assemble_recipe, parse_recipe, validate_recipe

# Scaling
from .scaling import (
    CategoryScaling,
    FractionStyle,
    IngredientCategory,
    LinearScaling,
    QuantityFormatter,
    classify_ingredient,
    scale_ingredient,
    scale_recipe,
)

# Generation
from .generation import GenerationConfig, GenerationResult, RecipeGenerator

# Collections
from .cookbook import CollectionStore, RecipeCollection

# Errors
from .errors import (
    EmptyRecipeTextError,
    MalformedResponseError,
    RecipeGenerationError,
    RecipeKitError,
)

# Observability
from .observability import MetricsHook, NoOpMetricsHook

__all__ = [
    # Parsing
    "DocumentParser",
    "MarkdownRecipeParser",
    "ParsedDocument",
    "Section",
    "Subsection",
    "tokenize_heading",
    # Recipes
    "DifficultyRating",
    "NutritionInfo",
    "Recipe",
    "RecipeSectionMap",
    "RequestTier",
    # Assembly
    "SectionName",
    "assemble_recipe",
    "parse_recipe",
    "validate_recipe",
    # Scaling
    "CategoryScaling",
    "FractionStyle",
    "IngredientCategory",
    "LinearScaling",
    "QuantityFormatter",
    "classify_ingredient",
    "scale_ingredient",
    "scale_recipe",
    # Generation
    "GenerationConfig",
    "GenerationResult",
    "RecipeGenerator",
    # Collections
    "CollectionStore",
    "RecipeCollection",
    # Errors
    "EmptyRecipeTextError",
    "MalformedResponseError",
    "RecipeGenerationError",
    "RecipeKitError",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
]
