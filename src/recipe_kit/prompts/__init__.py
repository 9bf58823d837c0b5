from .prompt import Prompt
from .prompts_library import PromptsLibrary

RECIPE_SYSTEM_PROMPT = ("recipe_system", "1.0")
RECIPE_REQUEST_PROMPT = ("recipe_request", "1.0")

__all__ = [
    "Prompt",
    "PromptsLibrary",
    "RECIPE_REQUEST_PROMPT",
    "RECIPE_SYSTEM_PROMPT",
]
