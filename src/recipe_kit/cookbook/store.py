# src/recipe_kit/cookbook/store.py

import logging
from dataclasses import replace
from datetime import datetime
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

from recipe_kit.recipes.models import Recipe

from .models import RecipeCollection, SavedRecipe, utc_now

logger = logging.getLogger(__name__)


class _StoredRecipe(BaseModel):
    id: str
    added_at: datetime
    recipe: dict[str, Any]

    class Config:
        extra = "forbid"


class _StoredCollection(BaseModel):
    id: str
    name: str
    description: str
    premium_only: bool
    created_at: datetime
    updated_at: datetime
    recipes: list[_StoredRecipe]

    class Config:
        extra = "forbid"


class CollectionStore:
    """In-memory store of named recipe collections keyed by id."""

    def __init__(self) -> None:
        self._collections: dict[str, RecipeCollection] = {}

    def create(
        self, name: str, description: str = "", premium_only: bool = False
    ) -> RecipeCollection:
        if not name.strip():
            raise ValueError("Collection name must not be empty")

        collection = RecipeCollection(
            name=name.strip(),
            description=description.strip(),
            premium_only=premium_only,
        )
        self._collections[collection.id] = collection
        logger.debug("Created collection %r (%s)", collection.name, collection.id)
        return collection

    def get(self, collection_id: str) -> RecipeCollection:
        try:
            return self._collections[collection_id]
        except KeyError:
            logger.error("Collection not found: %s", collection_id)
            raise KeyError(f"Collection '{collection_id}' not found") from None

    def list_collections(self) -> list[RecipeCollection]:
        return list(self._collections.values())

    def add_recipe(self, collection_id: str, recipe: Recipe) -> RecipeCollection:
        """Append `recipe` unless the collection already holds it."""
        collection = self.get(collection_id)
        if collection.contains(recipe):
            logger.debug(
                "Recipe %s already in collection %s", recipe.id, collection_id
            )
            return collection

        updated = replace(
            collection,
            recipes=collection.recipes + (SavedRecipe(recipe=recipe),),
            updated_at=utc_now(),
        )
        self._collections[collection_id] = updated
        logger.debug("Added recipe %r to collection %r", recipe.title, updated.name)
        return updated

    def contains(self, collection_id: str, recipe: Recipe) -> bool:
        return self.get(collection_id).contains(recipe)

    def save(self, path: str | Path) -> None:
        payload = [
            _StoredCollection(
                id=c.id,
                name=c.name,
                description=c.description,
                premium_only=c.premium_only,
                created_at=c.created_at,
                updated_at=c.updated_at,
                recipes=[
                    _StoredRecipe(
                        id=s.id, added_at=s.added_at, recipe=s.recipe.to_dict()
                    )
                    for s in c.recipes
                ],
            ).model_dump(mode="json")
            for c in self._collections.values()
        ]
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump({"collections": payload}, f, sort_keys=False)
        logger.info("Saved %d collections to %s", len(payload), path)

    @classmethod
    def load(cls, path: str | Path) -> "CollectionStore":
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        store = cls()
        for raw in data.get("collections", []):
            stored = _StoredCollection(**raw)
            collection = RecipeCollection(
                id=stored.id,
                name=stored.name,
                description=stored.description,
                premium_only=stored.premium_only,
                created_at=stored.created_at,
                updated_at=stored.updated_at,
                recipes=tuple(
                    SavedRecipe(
                        id=s.id,
                        added_at=s.added_at,
                        recipe=Recipe.from_dict(s.recipe),
                    )
                    for s in stored.recipes
                ),
            )
            store._collections[collection.id] = collection

        logger.info("Loaded %d collections from %s", len(store._collections), path)
        return store
