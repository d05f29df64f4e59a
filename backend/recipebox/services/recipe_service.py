"""
RecipeBox Backend: Recipe Service (Business Logic Orchestrator)
===============================================================

What:  Coordinates the image file and the recipe row for every endpoint.
How:   Composes FileService (upload directory) and RecipeStore (SQL). Both
       are passed in by the caller on each call; the service keeps no state.
Who:   Called by the route handlers in routes/recipes.py.

Create flow (POST /api/recipes):
    ┌──────────┐    ┌──────────────┐    ┌──────────────┐
    │  Upload  │───▶│  Write file  │───▶│  Insert row  │
    │  (Route) │    │ (FileService)│    │ (RecipeStore)│
    └──────────┘    └──────────────┘    └──────────────┘
                                              │ fails
                                              ▼
                                     remove written file, re-raise

Delete flow (DELETE /api/recipes/{id}):
    DELETE ... RETURNING image → no row: NotFoundError (404)
                               → row:    remove file best-effort, return id
"""

import logging
from typing import Optional

from recipebox.exceptions import DatabaseError, NotFoundError, RecipeBoxError
from recipebox.models.recipe import Recipe
from recipebox.schemas.recipe import (
    DeletedRecipe,
    FavoritedResponse,
    FavoritedState,
    LikedResponse,
    LikedState,
    RecipeCreatedResponse,
    RecipeDeletedResponse,
    RecipeListResponse,
    RecipeOut,
)
from recipebox.services.file_service import FileService
from recipebox.services.recipe_store import RecipeStore

logger = logging.getLogger(__name__)


class RecipeService:
    """
    Business logic layer for recipe operations.

    Error Handling Strategy:
        RecipeStore already converts SQL failures to DatabaseError; those
        propagate unchanged. Anything unexpected during create is wrapped in
        DatabaseError after the orphaned file has been removed.
    """

    def to_public(self, recipe: Recipe, files: FileService) -> RecipeOut:
        """Serialize a row, swapping the stored image path for its URL."""
        return RecipeOut(
            id=recipe.id,
            name=recipe.name,
            poster=recipe.poster,
            ingredients=recipe.ingredients,
            instructions=recipe.instructions,
            image=files.public_url(recipe.image),
            liked=recipe.liked if recipe.liked is not None else 0,
            favorited=recipe.favorited if recipe.favorited is not None else 0,
        )

    async def list_recipes(self, store: RecipeStore, files: FileService) -> RecipeListResponse:
        recipes = await store.list_all()
        return RecipeListResponse(data=[self.to_public(r, files) for r in recipes])

    async def create_recipe(
        self,
        store: RecipeStore,
        files: FileService,
        name: str,
        poster: str,
        ingredients: str,
        instructions: str,
        content: bytes,
        filename: Optional[str],
    ) -> RecipeCreatedResponse:
        """
        Store the image, then insert the row that references it.

        If the insert fails the file is removed again before the error
        propagates, so a failed create leaves neither a row nor a file.

        Raises:
            FileStorageError: the image could not be written (nothing to undo)
            DatabaseError: the insert failed (file already removed)
        """
        image_path = await files.store_upload(content, filename)

        try:
            recipe_id = await store.insert(
                name=name,
                poster=poster,
                ingredients=ingredients,
                instructions=instructions,
                image_path=image_path,
            )
        except Exception as e:
            await files.cleanup_file(image_path)
            if isinstance(e, RecipeBoxError):
                raise
            logger.error("Unexpected error inserting recipe: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the recipe",
                context={"original_error": type(e).__name__},
            )

        return RecipeCreatedResponse(
            data=RecipeOut(
                id=recipe_id,
                name=name,
                poster=poster,
                ingredients=ingredients,
                instructions=instructions,
                image=files.public_url(image_path),
                liked=0,
                favorited=0,
            ),
        )

    async def delete_recipe(
        self,
        store: RecipeStore,
        files: FileService,
        recipe_id: int,
    ) -> RecipeDeletedResponse:
        """
        Delete one recipe and its image.

        Raises:
            NotFoundError: no row has this id (table unchanged)
            DatabaseError: the DELETE statement failed
        """
        image_path = await store.delete_by_id(recipe_id)
        if image_path is None:
            raise NotFoundError(resource="Recipe", resource_id=recipe_id)

        # Failure here is logged inside cleanup_file and never surfaces
        await files.cleanup_file(image_path)
        logger.info("Recipe %d deleted", recipe_id)

        return RecipeDeletedResponse(data=DeletedRecipe(id=recipe_id))

    async def set_liked(self, store: RecipeStore, recipe_id: int, liked: int) -> LikedResponse:
        await store.update_flag(recipe_id, "liked", liked)
        return LikedResponse(data=LikedState(id=recipe_id, liked=liked))

    async def set_favorited(
        self, store: RecipeStore, recipe_id: int, favorited: int
    ) -> FavoritedResponse:
        await store.update_flag(recipe_id, "favorited", favorited)
        return FavoritedResponse(data=FavoritedState(id=recipe_id, favorited=favorited))


# ── Singleton Instance ────────────────────────────────────────────────────
recipe_service = RecipeService()
