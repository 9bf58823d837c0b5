from .config import (
    BASIC_PRICING,
    PREMIUM_PRICING,
    GenerationConfig,
    ModelPricing,
)
from .generator import GenerationResult, RecipeGenerator

__all__ = [
    "BASIC_PRICING",
    "PREMIUM_PRICING",
    "GenerationConfig",
    "GenerationResult",
    "ModelPricing",
    "RecipeGenerator",
]
