# src/recipe_kit/llms/__init__.py

"""Transport layer for the text-generation collaborator.

Example:
    >>> from recipe_kit.llms import create_llm_client, LLMConfig, Message, Role
    >>>
    >>> client = create_llm_client(LLMConfig(provider="openai", model="gpt-4o"))
    >>> response = await client.complete(
    ...     messages=[Message(role=Role.USER, content="Hello!")]
    ... )
"""

from .base import LLMClient, LLMResponse, Message, Role, Usage
from .config import LLMConfig
from .factory import create_llm_client

__all__ = [
    # Factory
    "create_llm_client",
    # Protocol
    "LLMClient",
    # Config
    "LLMConfig",
    # Types
    "Message",
    "Role",
    "LLMResponse",
    "Usage",
]
