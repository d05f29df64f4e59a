"""
RecipeBox Backend: Recipe Route Handlers
========================================

What:  The five recipe endpoints under /api/recipes.
How:   Extracts path/form/body parameters, delegates to RecipeService with the
       request's RecipeStore and FileService, returns the JSON envelope.
       Errors are raised, never rendered here; the global handlers in main.py
       turn them into `{"error": ...}` responses.

Route Inventory:
    GET    /api/recipes                 list every recipe
    POST   /api/recipes                 multipart create (field `image` holds the file)
    DELETE /api/recipes/{id}            delete recipe and its image
    PUT    /api/recipes/{id}/like       set `liked`
    PUT    /api/recipes/{id}/favorite   set `favorited`
"""

import logging

from fastapi import APIRouter, Depends, File, Form, UploadFile

from recipebox.schemas.recipe import (
    ErrorResponse,
    FavoritedResponse,
    FavoritedUpdate,
    LikedResponse,
    LikedUpdate,
    RecipeCreatedResponse,
    RecipeDeletedResponse,
    RecipeListResponse,
)
from recipebox.services.file_service import FileService, get_file_service
from recipebox.services.recipe_service import recipe_service
from recipebox.services.recipe_store import RecipeStore, get_recipe_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Recipes"])

STORAGE_ERROR = {400: {"description": "Storage error", "model": ErrorResponse}}


@router.get(
    "/recipes",
    response_model=RecipeListResponse,
    responses=STORAGE_ERROR,
    summary="List all recipes",
)
async def list_recipes(
    store: RecipeStore = Depends(get_recipe_store),
    files: FileService = Depends(get_file_service),
) -> RecipeListResponse:
    """Every stored recipe, with `image` rewritten to its public URL."""
    return await recipe_service.list_recipes(store, files)


@router.post(
    "/recipes",
    response_model=RecipeCreatedResponse,
    responses={
        **STORAGE_ERROR,
        500: {"description": "Image could not be written", "model": ErrorResponse},
    },
    summary="Create a recipe with its image",
)
async def create_recipe(
    name: str = Form(...),
    poster: str = Form(...),
    ingredients: str = Form(...),
    instructions: str = Form(...),
    image: UploadFile = File(..., description="Recipe image; stored as-is"),
    store: RecipeStore = Depends(get_recipe_store),
    files: FileService = Depends(get_file_service),
) -> RecipeCreatedResponse:
    """
    Create a recipe from a multipart form.

    The image is written first, then the row is inserted. Missing fields or
    a missing file are rejected by FastAPI's request validation.
    """
    content = await image.read()
    logger.info(
        "Received recipe upload: name=%s, filename=%s, size=%d bytes",
        name,
        image.filename or "unknown",
        len(content),
    )

    try:
        return await recipe_service.create_recipe(
            store,
            files,
            name=name,
            poster=poster,
            ingredients=ingredients,
            instructions=instructions,
            content=content,
            filename=image.filename,
        )
    finally:
        await image.close()


@router.delete(
    "/recipes/{recipe_id}",
    response_model=RecipeDeletedResponse,
    responses={
        **STORAGE_ERROR,
        404: {"description": "Recipe not found", "model": ErrorResponse},
    },
    summary="Delete a recipe and its image",
)
async def delete_recipe(
    recipe_id: int,
    store: RecipeStore = Depends(get_recipe_store),
    files: FileService = Depends(get_file_service),
) -> RecipeDeletedResponse:
    return await recipe_service.delete_recipe(store, files, recipe_id)


@router.put(
    "/recipes/{recipe_id}/like",
    response_model=LikedResponse,
    responses=STORAGE_ERROR,
    summary="Set the liked flag",
)
async def update_liked(
    recipe_id: int,
    body: LikedUpdate,
    store: RecipeStore = Depends(get_recipe_store),
) -> LikedResponse:
    """Unconditional: reports success even when no recipe has this id."""
    return await recipe_service.set_liked(store, recipe_id, body.liked)


@router.put(
    "/recipes/{recipe_id}/favorite",
    response_model=FavoritedResponse,
    responses=STORAGE_ERROR,
    summary="Set the favorited flag",
)
async def update_favorited(
    recipe_id: int,
    body: FavoritedUpdate,
    store: RecipeStore = Depends(get_recipe_store),
) -> FavoritedResponse:
    """Unconditional: reports success even when no recipe has this id."""
    return await recipe_service.set_favorited(store, recipe_id, body.favorited)
