from .models import RecipeCollection, SavedRecipe
from .store import CollectionStore

__all__ = [
    "CollectionStore",
    "RecipeCollection",
    "SavedRecipe",
]
