"""Exceptions raised by recipe-kit.

Structural problems in a generated document never raise: extractors fall
back to per-field defaults. Only a request that produced no usable text
escalates to the caller.
"""


class RecipeKitError(Exception):
    """Base exception for recipe-kit errors."""

    pass


class RecipeGenerationError(RecipeKitError):
    """A single recipe generation request failed terminally."""

    pass


class EmptyRecipeTextError(RecipeGenerationError):
    """The generated text was missing or blank; no recipe can be assembled."""

    pass


class MalformedResponseError(RecipeGenerationError):
    """The provider response envelope could not be normalized."""

    pass
