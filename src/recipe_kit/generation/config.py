# src/recipe_kit/generation/config.py

from dataclasses import dataclass, field

from recipe_kit.llms.base import Usage
from recipe_kit.recipes.models import RequestTier


@dataclass(frozen=True)
class ModelPricing:
    """Model used for one request tier and what its tokens cost (USD)."""

    model: str
    input_cost_per_token: float
    output_cost_per_token: float
    max_tokens: int

    def estimate_cost(self, usage: Usage) -> float:
        return (
            usage.prompt_tokens * self.input_cost_per_token
            + usage.completion_tokens * self.output_cost_per_token
        )


BASIC_PRICING = ModelPricing(
    model="gpt-3.5-turbo-0125",
    input_cost_per_token=0.5 / 1_000_000,
    output_cost_per_token=1.5 / 1_000_000,
    max_tokens=1500,
)

PREMIUM_PRICING = ModelPricing(
    model="gpt-4-0125-preview",
    input_cost_per_token=10.0 / 1_000_000,
    output_cost_per_token=30.0 / 1_000_000,
    max_tokens=2000,
)

NON_PREMIUM_NOTE = (
    "Exclude the Chef Notes and Wine Pairings sections for non-premium users."
)


@dataclass(frozen=True)
class GenerationConfig:
    """Settings for recipe generation requests.

    Immutable. Explicit. No magic defaults from environment.
    """

    temperature: float = 0.8
    basic: ModelPricing = field(default=BASIC_PRICING)
    premium: ModelPricing = field(default=PREMIUM_PRICING)
    system_prompt: tuple[str, str] = ("recipe_system", "1.0")
    request_prompt: tuple[str, str] = ("recipe_request", "1.0")

    def pricing_for(self, tier: RequestTier) -> ModelPricing:
        return self.premium if tier is RequestTier.PREMIUM else self.basic
