"""
RecipeBox Backend: Pydantic Request/Response Schemas
====================================================

What:  The JSON contract of the recipe API.
How:   FastAPI validates request bodies against the *Update models and
       serializes responses through the envelope models.

Every response is a JSON envelope:
    { "message"?: str, "data": ..., "error"?: str }

    - List responses carry only `data`
    - Mutations carry `message` + `data`
    - Failures carry only `error` (built by the global exception handlers)
"""

from typing import List

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Bodies
# ══════════════════════════════════════════════════════════════════════════


class LikedUpdate(BaseModel):
    """Body of PUT /api/recipes/{id}/like."""
    liked: int = Field(description="New liked flag (0 or 1), stored as given")


class FavoritedUpdate(BaseModel):
    """Body of PUT /api/recipes/{id}/favorite."""
    favorited: int = Field(description="New favorited flag (0 or 1), stored as given")


# ══════════════════════════════════════════════════════════════════════════
# Payloads
# ══════════════════════════════════════════════════════════════════════════


class RecipeOut(BaseModel):
    """
    A recipe as clients see it.

    `image` is the absolute URL under /uploads, never the server-local path.
    """
    id: int
    name: str
    poster: str
    ingredients: str
    instructions: str
    image: str = Field(description="Absolute URL of the recipe image")
    liked: int = 0
    favorited: int = 0


class DeletedRecipe(BaseModel):
    id: int


class LikedState(BaseModel):
    id: int
    liked: int


class FavoritedState(BaseModel):
    id: int
    favorited: int


# ══════════════════════════════════════════════════════════════════════════
# Envelopes
# ══════════════════════════════════════════════════════════════════════════


class RecipeListResponse(BaseModel):
    """GET /api/recipes."""
    data: List[RecipeOut]


class RecipeCreatedResponse(BaseModel):
    """POST /api/recipes."""
    message: str = "Recipe added successfully"
    data: RecipeOut


class RecipeDeletedResponse(BaseModel):
    """DELETE /api/recipes/{id}."""
    message: str = "Recipe deleted successfully"
    data: DeletedRecipe


class LikedResponse(BaseModel):
    message: str = "Recipe liked status updated successfully"
    data: LikedState


class FavoritedResponse(BaseModel):
    message: str = "Recipe favorited status updated successfully"
    data: FavoritedState


class ErrorResponse(BaseModel):
    """
    Failure envelope for 400/404/500 responses.

    Example:
        {"error": "Recipe not found"}
    """
    error: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
