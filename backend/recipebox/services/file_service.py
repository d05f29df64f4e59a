"""
RecipeBox Backend: Upload File Service
======================================

What:  Writes uploaded recipe images into the flat upload directory, removes
       them again, and maps stored paths to public URLs.
How:   Async writes through aiofiles; filenames generated server-side.
Who:   Called by RecipeService (create/delete) and the /uploads route.

Filename scheme:
    <unix-millis>-<8 hex chars>.<original extension>
    e.g. 1718000000123-9f3a1c2e.jpg

    The millisecond prefix keeps directory listings in upload order; the
    random suffix keeps two uploads within the same millisecond apart.
    The extension is copied verbatim from the client filename (it may be
    empty). No content-type or size checks are made: any file is stored as-is.

Directory layout:
    uploads/
    ├── 1718000000123-9f3a1c2e.jpg
    └── 1718000004567-04bd77aa.png
"""

import logging
import os
import time
import uuid
from pathlib import Path
from typing import Optional

import aiofiles

from recipebox.config import settings
from recipebox.exceptions import FileStorageError

logger = logging.getLogger(__name__)


class FileService:
    """
    Owns the upload directory.

    Lifecycle of an uploaded image:
        1. store_upload() writes the bytes under a generated name
        2. The returned path is persisted in the recipe row
        3. public_url() turns that path into the URL clients fetch
        4. cleanup_file() removes it when the recipe is deleted, or when the
           row could not be inserted
    """

    def __init__(self, upload_dir: Optional[str] = None, public_base_url: Optional[str] = None):
        """
        Args:
            upload_dir: Override the upload directory (used in tests).
            public_base_url: Override the URL prefix (used in tests).
        """
        self.upload_root = Path(upload_dir or settings.upload_dir).resolve()
        self.public_base_url = (public_base_url or settings.public_base_url).rstrip("/")

    def generate_filename(self, original_filename: Optional[str]) -> str:
        """Build the on-disk name for an upload, keeping the client's extension."""
        extension = Path(original_filename or "").suffix
        millis = int(time.time() * 1000)
        return f"{millis}-{uuid.uuid4().hex[:8]}{extension}"

    async def store_upload(self, content: bytes, original_filename: Optional[str]) -> str:
        """
        Write an uploaded image to the upload directory.

        The directory is created on first use.

        Returns:
            Filesystem path of the written file (stored verbatim in the row).

        Raises:
            FileStorageError if the directory cannot be created or the write fails.
        """
        path = self.upload_root / self.generate_filename(original_filename)

        try:
            self.upload_root.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(path, "wb") as f:
                await f.write(content)
        except OSError as e:
            logger.error("Failed to store upload at %s: %s", path, str(e))
            raise FileStorageError(
                context={"path": str(path), "os_error": str(e)},
            )

        logger.info("Upload stored: %s (%d bytes)", path.name, len(content))
        return str(path)

    async def cleanup_file(self, file_path: str) -> None:
        """
        Remove an image file, best-effort.

        When:    After a recipe row is deleted, or after an insert failed
                 for a file that was already written.

        A missing file is ignored; any other failure is logged as a warning
        and swallowed so the caller's operation still completes.
        """
        try:
            path = Path(file_path)
            if path.exists():
                os.remove(path)
                logger.info("Removed image file: %s", path.name)
            else:
                logger.debug("Image file already gone: %s", path.name)
        except OSError as e:
            logger.warning("Error deleting image file %s: %s", file_path, str(e))

    def public_url(self, stored_path: str) -> str:
        """
        Map a stored path to the URL it is served from.

        Only the basename survives: the file is assumed to still live
        directly under the upload directory.
        """
        return f"{self.public_base_url}/uploads/{os.path.basename(stored_path)}"

    def resolve(self, filename: str) -> Optional[Path]:
        """
        Locate an upload by name for serving.

        Returns None when the name escapes the upload directory or no such
        file exists.
        """
        candidate = (self.upload_root / filename).resolve()
        if candidate.parent != self.upload_root or not candidate.is_file():
            return None
        return candidate


# ── Singleton Instance ────────────────────────────────────────────────────
file_service = FileService()


def get_file_service() -> FileService:
    """FastAPI dependency returning the process-wide FileService."""
    return file_service
