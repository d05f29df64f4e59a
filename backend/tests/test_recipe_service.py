"""
RecipeBox Backend: Recipe Service Unit Tests
============================================

What:  Tests for RecipeService orchestration (create, delete, flags, list).
How:   Mock RecipeStore (no database); real FileService on a temp directory
       so file writes and compensating deletes can be observed on disk.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from recipebox.exceptions import DatabaseError, NotFoundError
from recipebox.services.file_service import FileService
from recipebox.services.recipe_service import RecipeService

RECIPE_FIELDS = dict(
    name="Soup",
    poster="Alice",
    ingredients="water,salt",
    instructions="boil",
)


class TestCreateRecipe:

    def setup_method(self):
        self.service = RecipeService()

    @pytest.mark.asyncio
    async def test_writes_file_then_inserts(self, mock_store, files, upload_dir, sample_image_bytes):
        mock_store.insert.return_value = 7

        result = await self.service.create_recipe(
            mock_store, files, content=sample_image_bytes, filename="photo.jpg", **RECIPE_FIELDS
        )

        stored = list(upload_dir.iterdir())
        assert len(stored) == 1
        assert result.message == "Recipe added successfully"
        assert result.data.id == 7
        assert result.data.name == "Soup"
        assert result.data.liked == 0
        assert result.data.favorited == 0
        assert result.data.image == f"http://localhost:5000/uploads/{stored[0].name}"
        assert mock_store.insert.await_args.kwargs["image_path"] == str(stored[0])

    @pytest.mark.asyncio
    async def test_insert_failure_removes_written_file(
        self, mock_store, files, upload_dir, sample_image_bytes
    ):
        mock_store.insert.side_effect = DatabaseError(message="database is locked")

        with pytest.raises(DatabaseError, match="database is locked"):
            await self.service.create_recipe(
                mock_store, files, content=sample_image_bytes, filename="photo.jpg", **RECIPE_FIELDS
            )

        assert list(upload_dir.iterdir()) == []

    @pytest.mark.asyncio
    async def test_unexpected_insert_error_is_wrapped(
        self, mock_store, files, upload_dir, sample_image_bytes
    ):
        mock_store.insert.side_effect = RuntimeError("boom")

        with pytest.raises(DatabaseError) as excinfo:
            await self.service.create_recipe(
                mock_store, files, content=sample_image_bytes, filename="photo.jpg", **RECIPE_FIELDS
            )

        assert excinfo.value.context["original_error"] == "RuntimeError"
        assert list(upload_dir.iterdir()) == []


class TestDeleteRecipe:

    def setup_method(self):
        self.service = RecipeService()
        self.files = MagicMock(spec=FileService)
        self.files.cleanup_file = AsyncMock()

    @pytest.mark.asyncio
    async def test_absent_recipe_raises_not_found(self, mock_store):
        mock_store.delete_by_id.return_value = None

        with pytest.raises(NotFoundError, match="Recipe not found"):
            await self.service.delete_recipe(mock_store, self.files, 99)

        self.files.cleanup_file.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_removes_image_of_deleted_row(self, mock_store):
        mock_store.delete_by_id.return_value = "/srv/uploads/soup.jpg"

        result = await self.service.delete_recipe(mock_store, self.files, 3)

        assert result.message == "Recipe deleted successfully"
        assert result.data.id == 3
        self.files.cleanup_file.assert_awaited_once_with("/srv/uploads/soup.jpg")

    @pytest.mark.asyncio
    async def test_missing_image_file_does_not_block_delete(self, mock_store, tmp_path):
        mock_store.delete_by_id.return_value = str(tmp_path / "already-gone.jpg")
        files = FileService(upload_dir=str(tmp_path))

        result = await self.service.delete_recipe(mock_store, files, 3)
        assert result.data.id == 3


class TestFlags:

    def setup_method(self):
        self.service = RecipeService()

    @pytest.mark.asyncio
    async def test_set_liked(self, mock_store):
        result = await self.service.set_liked(mock_store, 5, 1)

        mock_store.update_flag.assert_awaited_once_with(5, "liked", 1)
        assert result.message == "Recipe liked status updated successfully"
        assert result.data.model_dump() == {"id": 5, "liked": 1}

    @pytest.mark.asyncio
    async def test_set_favorited(self, mock_store):
        result = await self.service.set_favorited(mock_store, 5, 0)

        mock_store.update_flag.assert_awaited_once_with(5, "favorited", 0)
        assert result.message == "Recipe favorited status updated successfully"
        assert result.data.model_dump() == {"id": 5, "favorited": 0}


class TestListRecipes:

    @pytest.mark.asyncio
    async def test_rewrites_image_paths(self, mock_store, files):
        mock_store.list_all.return_value = [
            SimpleNamespace(
                id=1, image="/var/lib/recipebox/uploads/1718000000123-deadbeef.jpg",
                liked=1, favorited=0, **RECIPE_FIELDS
            ),
        ]

        result = await RecipeService().list_recipes(mock_store, files)

        (recipe,) = result.data
        assert recipe.image == "http://localhost:5000/uploads/1718000000123-deadbeef.jpg"
        assert recipe.liked == 1
