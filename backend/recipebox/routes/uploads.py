"""
RecipeBox Backend: Upload File Route
====================================

What:  Serves previously uploaded recipe images at GET /uploads/{filename}.
How:   Looks the name up through FileService.resolve() and streams it with
       Starlette's FileResponse, which infers the content type from the name.
Who:   Hit by <img> tags using the `image` URL from the recipe API.

No access control. Names that resolve outside the upload directory are
treated the same as absent files (404).
"""

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from recipebox.exceptions import NotFoundError
from recipebox.schemas.recipe import ErrorResponse
from recipebox.services.file_service import FileService, get_file_service

router = APIRouter(tags=["Uploads"])


@router.get(
    "/uploads/{filename}",
    summary="Serve an uploaded recipe image",
    responses={
        200: {"description": "Image file"},
        404: {"description": "File not found", "model": ErrorResponse},
    },
)
async def serve_upload(
    filename: str,
    files: FileService = Depends(get_file_service),
) -> FileResponse:
    path = files.resolve(filename)
    if path is None:
        raise NotFoundError(resource="File", resource_id=filename)

    return FileResponse(path=str(path))
