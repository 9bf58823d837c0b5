# src/recipe_kit/llms/factory.py

from recipe_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import LLMClient
from .config import LLMConfig


def create_llm_client(
    config: LLMConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> LLMClient:
    """Create an LLM client from config.

    Raises:
        ValueError: If provider is unknown.

    Example:
        >>> config = LLMConfig(provider="openai", model="gpt-3.5-turbo-0125")
        >>> client = create_llm_client(config)
    """
    if config.provider == "openai":
        from .openai import OpenAILLMClient

        return OpenAILLMClient(
            api_key=config.api_key,
            model=config.model,
            timeout=config.timeout,
            max_retries=config.max_retries,
            metrics_hook=metrics_hook,
        )

    raise ValueError(f"Unknown LLM provider: {config.provider}")
