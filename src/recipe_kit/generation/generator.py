# src/recipe_kit/generation/generator.py

import logging
from dataclasses import dataclass
from time import monotonic

from recipe_kit.assembler import parse_recipe
from recipe_kit.errors import EmptyRecipeTextError
from recipe_kit.llms.base import LLMClient, Message, Role, Usage
from recipe_kit.observability import names
from recipe_kit.observability.base import MetricsHook, NoOpMetricsHook
from recipe_kit.parsers.base import DocumentParser
from recipe_kit.parsers.markdown_parser import MarkdownRecipeParser
from recipe_kit.prompts.prompts_library import PromptsLibrary
from recipe_kit.recipes.models import Recipe, RequestTier

from .config import NON_PREMIUM_NOTE, GenerationConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    recipe: Recipe
    usage: Usage
    cost: float
    model: str


class RecipeGenerator:
    """Turns a search query into a `Recipe` with one completion call.

    One request per call, no retries beyond the client's transport retries.
    A response without usable text fails the request; no partial recipe is
    returned.
    """

    def __init__(
        self,
        client: LLMClient,
        prompts: PromptsLibrary | None = None,
        config: GenerationConfig = GenerationConfig(),
        parser: DocumentParser | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._client = client
        self._prompts = prompts or PromptsLibrary.default()
        self._config = config
        self._parser = parser or MarkdownRecipeParser(metrics_hook=metrics_hook)
        self.metrics_hook = metrics_hook
        self.last_cost = 0.0
        self.total_cost = 0.0

    def build_messages(self, query: str, tier: RequestTier) -> list[Message]:
        system = self._prompts.get(*self._config.system_prompt).render()
        request = self._prompts.get(*self._config.request_prompt).render(
            query=query,
            tier_note="" if tier is RequestTier.PREMIUM else NON_PREMIUM_NOTE,
        )
        return [
            Message(role=Role.SYSTEM, content=system),
            Message(role=Role.USER, content=request),
        ]

    async def generate(
        self, query: str, tier: RequestTier = RequestTier.BASIC
    ) -> GenerationResult:
        """Generate and parse one recipe.

        Raises:
            ValueError: If the query is blank.
            EmptyRecipeTextError: If the model returned no text.
            MalformedResponseError: If the response envelope was unusable.
        """
        query = query.strip()
        if not query:
            raise ValueError("query must not be empty")

        pricing = self._config.pricing_for(tier)
        labels = {"tier": tier.value}
        start = monotonic()

        logger.info("Generating recipe for %r (tier=%s)", query, tier.value)
        self.metrics_hook.increment(names.GENERATION_REQUESTS_TOTAL, labels=labels)

        try:
            response = await self._client.complete(
                messages=self.build_messages(query, tier),
                model=pricing.model,
                temperature=self._config.temperature,
                max_tokens=pricing.max_tokens,
            )

            if response.content is None or not response.content.strip():
                detail = f": {response.refusal}" if response.refusal else ""
                raise EmptyRecipeTextError(f"Model returned no recipe text{detail}")

            logger.debug("Raw recipe text:\n%s", response.content)
            recipe = parse_recipe(
                response.content,
                tier=tier,
                parser=self._parser,
                metrics_hook=self.metrics_hook,
            )
        except Exception:
            self.metrics_hook.increment(names.GENERATION_ERRORS_TOTAL, labels=labels)
            logger.exception("Recipe generation failed for %r", query)
            raise

        cost = pricing.estimate_cost(response.usage)
        self.last_cost = cost
        self.total_cost += cost

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.GENERATION_DURATION, elapsed_ms)
        self.metrics_hook.record_gauge(names.GENERATION_LAST_COST, cost, labels=labels)

        logger.info(
            "Generated %r: tokens=%d, cost=$%.6f, latency=%.0fms",
            recipe.title,
            response.usage.total_tokens,
            cost,
            elapsed_ms,
        )
        return GenerationResult(
            recipe=recipe, usage=response.usage, cost=cost, model=response.model
        )
