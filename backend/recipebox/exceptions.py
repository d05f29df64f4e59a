"""
RecipeBox Backend: Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for the recipe API's error scenarios.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return `{"error": <message>}` envelopes with the matching HTTP status.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    RecipeBoxError (base)
    ├── DatabaseError      → 400 Bad Request (query execution failed)
    ├── NotFoundError      → 404 Not Found   (recipe id or upload file absent)
    └── FileStorageError   → 500 Internal Server Error (upload could not be written)

Image-file deletion failures are deliberately absent: they are logged by the
file service and never reach the client.
"""

from typing import Any, Dict, Optional


class RecipeBoxError(Exception):
    """
    Base exception for all RecipeBox application errors.

    Attributes:
        message:  User-facing error description (returned as the `error` field)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(RecipeBoxError):
    """
    Raised when a requested resource does not exist.

    When:    DELETE /api/recipes/{id} for an id with no row, or
             GET /uploads/{filename} for a file that is not on disk.
    HTTP:    404 Not Found

    The recipe variant keeps the fixed message "Recipe not found" that API
    clients match on.
    """

    def __init__(
        self,
        resource: str = "Recipe",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(RecipeBoxError):
    """
    Raised when a SQL statement fails during a request.

    When:    Locked database, disk I/O error, constraint violation.
    HTTP:    400 Bad Request

    The SQL text and driver message go into `context` for the server log;
    the client only sees `message`.
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class FileStorageError(RecipeBoxError):
    """
    Raised when an uploaded image cannot be written to the upload directory.

    When:    Disk full, permission denied, directory not writable.
    HTTP:    500 Internal Server Error
    """

    def __init__(
        self,
        message: str = "Failed to save uploaded image",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
