"""
RecipeBox Backend: Recipe Store (Storage Layer)
===============================================

What:  The only code that issues SQL against the `recipes` table.
How:   Wraps one AsyncSession; each operation is a single statement.
       Mutating operations commit before returning.
Who:   Constructed per request by the get_recipe_store dependency and handed
       to RecipeService. Tests substitute it through dependency overrides.

Operations:
    list_all()                  SELECT * FROM recipes ORDER BY id
    insert(...)                 INSERT ... → new id
    delete_by_id(id)            DELETE ... WHERE id = ? RETURNING image
    update_flag(id, flag, v)    UPDATE recipes SET <flag> = ? WHERE id = ?

Any SQLAlchemyError is logged and re-raised as DatabaseError (HTTP 400).
Integers outside SQLite's 64-bit range never reach the table: as a delete
id they match nothing, as an update id or flag value they are a DatabaseError.
"""

import logging
from typing import List, Optional

from fastapi import Depends
from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from recipebox.database import get_db_session
from recipebox.exceptions import DatabaseError
from recipebox.models.recipe import Recipe

logger = logging.getLogger(__name__)

FLAG_COLUMNS = ("liked", "favorited")


class RecipeStore:
    """Storage handle over the recipes table, bound to one session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _fail(self, operation: str, exc: Exception, **context) -> DatabaseError:
        await self.session.rollback()
        logger.error("Database error during %s: %s", operation, str(exc))
        context["operation"] = operation
        context["error_type"] = type(exc).__name__
        return DatabaseError(message=str(getattr(exc, "orig", None) or exc), context=context)

    async def list_all(self) -> List[Recipe]:
        """Every row, in insertion (id) order. No filtering or paging."""
        try:
            result = await self.session.execute(
                select(Recipe)
                .order_by(Recipe.id)
                .execution_options(populate_existing=True)
            )
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise await self._fail("list", e)

    async def insert(
        self,
        name: str,
        poster: str,
        ingredients: str,
        instructions: str,
        image_path: str,
    ) -> int:
        """Insert one recipe with both flags at 0 and return its new id."""
        recipe = Recipe(
            name=name,
            poster=poster,
            ingredients=ingredients,
            instructions=instructions,
            image=image_path,
            liked=0,
            favorited=0,
        )
        try:
            self.session.add(recipe)
            await self.session.flush()
            await self.session.commit()
        except SQLAlchemyError as e:
            raise await self._fail("insert", e, image=image_path)

        logger.info("Recipe inserted successfully with ID: %d", recipe.id)
        return recipe.id

    async def delete_by_id(self, recipe_id: int) -> Optional[str]:
        """
        Delete a row and hand back its image path in one statement.

        Returns:
            The deleted row's stored image path, or None if no row matched.
        """
        stmt = (
            delete(Recipe)
            .where(Recipe.id == recipe_id)
            .returning(Recipe.image)
        )
        try:
            result = await self.session.execute(stmt)
            image_path = result.scalar_one_or_none()
            await self.session.commit()
        except OverflowError:
            # Ids beyond SQLite's 64-bit INTEGER range cannot name a row.
            await self.session.rollback()
            logger.info("Delete requested for out-of-range recipe id %d", recipe_id)
            return None
        except SQLAlchemyError as e:
            raise await self._fail("delete", e, recipe_id=recipe_id)

        return image_path

    async def update_flag(self, recipe_id: int, flag: str, value: int) -> None:
        """
        Overwrite `liked` or `favorited` on one row.

        Matching zero rows is not an error: the update is reported as done
        whether or not the id exists.
        """
        if flag not in FLAG_COLUMNS:
            raise ValueError(f"Unknown recipe flag '{flag}'. Must be one of: {FLAG_COLUMNS}")

        stmt = (
            update(Recipe)
            .where(Recipe.id == recipe_id)
            .values({flag: value})
        )
        try:
            await self.session.execute(stmt)
            await self.session.commit()
        except (SQLAlchemyError, OverflowError) as e:
            raise await self._fail("update", e, recipe_id=recipe_id, flag=flag)


async def get_recipe_store(db: AsyncSession = Depends(get_db_session)) -> RecipeStore:
    """FastAPI dependency: a RecipeStore bound to the request's session."""
    return RecipeStore(db)
