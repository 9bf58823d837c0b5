# src/recipe_kit/llms/openai.py

import logging
from time import monotonic
from typing import Any

from openai import NOT_GIVEN, AsyncOpenAI, OpenAIError
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from recipe_kit.errors import MalformedResponseError
from recipe_kit.observability import names
from recipe_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import FinishReason, LLMClient, LLMResponse, Message, Usage

logger = logging.getLogger(__name__)


class OpenAILLMClient(LLMClient):
    """OpenAI chat-completions client.

    Stateless. Transport-only retries. No behavior.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "gpt-3.5-turbo-0125",
        timeout: float = 30.0,
        max_retries: int = 3,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ):
        self._client = AsyncOpenAI(api_key=api_key, timeout=timeout)
        self._model = model
        self._max_retries = max_retries
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized OpenAILLMClient with model=%s, timeout=%s",
            model,
            timeout,
        )

    async def complete(
        self,
        *,
        messages: list[Message],
        model: str | None = None,
        temperature: float = 0.0,
        max_tokens: int | None = None,
    ) -> LLMResponse:
        model = model or self._model
        labels = {"provider": "openai", "model": model}
        start = monotonic()

        logger.debug("Calling OpenAI: model=%s, messages=%d", model, len(messages))

        try:
            raw = await self._call_api(
                model=model,
                messages=[{"role": m.role.value, "content": m.content} for m in messages],
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except OpenAIError:
            self.metrics_hook.increment(names.LLM_ERRORS_TOTAL, labels=labels)
            raise

        elapsed_ms = 1000 * (monotonic() - start)

        # Provider objects stop here
        response = self._normalize_response(raw, model, elapsed_ms)

        self.metrics_hook.record_latency(names.LLM_COMPLETION_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.LLM_REQUESTS_TOTAL, labels=labels)
        self.metrics_hook.increment(
            names.LLM_TOKENS_PROMPT, response.usage.prompt_tokens
        )
        self.metrics_hook.increment(
            names.LLM_TOKENS_COMPLETION, response.usage.completion_tokens
        )
        self.metrics_hook.increment(names.LLM_TOKENS_TOTAL, response.usage.total_tokens)

        logger.info(
            "OpenAI completion: finish=%s, tokens=%d, latency=%.0fms",
            response.finish_reason,
            response.usage.total_tokens,
            elapsed_ms,
        )

        return response

    async def _call_api(
        self,
        *,
        model: str,
        messages: list[dict[str, Any]],
        temperature: float,
        max_tokens: int | None,
    ) -> Any:
        """Call OpenAI API with transport-only retries."""
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._max_retries),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=10),
            retry=retry_if_exception_type(OpenAIError),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                return await self._client.chat.completions.create(
                    model=model,
                    messages=messages,  # type: ignore[arg-type]
                    temperature=temperature,
                    max_tokens=max_tokens if max_tokens else NOT_GIVEN,  # type: ignore[arg-type]
                )

    def _normalize_response(
        self, raw: Any, model: str, latency_ms: float
    ) -> LLMResponse:
        """Normalize an OpenAI response to LLMResponse.

        This is the boundary. Raw provider objects stop here.
        """
        if not getattr(raw, "choices", None):
            logger.error("OpenAI response has no choices")
            raise MalformedResponseError("Response contained no choices")

        choice = raw.choices[0]

        finish_reason: FinishReason
        if choice.finish_reason in ("stop", "length", "content_filter"):
            finish_reason = choice.finish_reason
        else:
            finish_reason = "error"

        if raw.usage is None:
            logger.warning("OpenAI response has no usage block")
            usage = Usage(prompt_tokens=0, completion_tokens=0, total_tokens=0)
        else:
            usage = Usage(
                prompt_tokens=raw.usage.prompt_tokens,
                completion_tokens=raw.usage.completion_tokens,
                total_tokens=raw.usage.total_tokens,
            )

        return LLMResponse(
            content=choice.message.content,
            finish_reason=finish_reason,
            usage=usage,
            model=getattr(raw, "model", None) or model,
            latency_ms=latency_ms,
            refusal=getattr(choice.message, "refusal", None),
        )
