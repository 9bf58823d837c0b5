# src/recipe_kit/llms/base.py

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Protocol

from recipe_kit.observability.base import MetricsHook


class Role(str, Enum):
    """Message role in a conversation."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    """A single chat message. Immutable, provider-agnostic."""

    role: Role
    content: str


@dataclass(frozen=True)
class Usage:
    """Token usage for a completion."""

    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


FinishReason = Literal["stop", "length", "content_filter", "error"]


@dataclass(frozen=True)
class LLMResponse:
    """Normalized completion.

    `content` is None when the provider returned no text (for example a
    refusal); callers decide whether that is fatal.
    """

    content: str | None
    finish_reason: FinishReason
    usage: Usage
    model: str
    latency_ms: float
    refusal: str | None = None


class LLMClient(Protocol):
    """Protocol for the text-generation collaborator.

    - Stateless: every call receives the full message list
    - Transport only: retries only on network / rate-limit errors
    - No leakage: provider objects never escape the adapter
    """

    metrics_hook: MetricsHook

    async def complete(
        self,
        *,
        messages: list[Message],
        model: str | None = None,
        temperature: float = 0.0,
        max_tokens: int | None = None,
    ) -> LLMResponse:
        """Single completion.

        Args:
            messages: Complete conversation. No internal state.
            model: Overrides the client's default model for this call.
            temperature: Sampling temperature.
            max_tokens: Maximum tokens in the response.

        Raises:
            MalformedResponseError: If the response carries no choices.
            Provider errors after retry exhaustion.
        """
        ...
