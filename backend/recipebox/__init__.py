"""
RecipeBox Backend: Application Package Initializer
==================================================

What: Marks the `recipebox` directory as a Python package.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend is split into thin layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Recipe Logic)     │  ← create/delete orchestration, URL rewriting
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic envelopes
    ├─────────────────────────────────────┤
    │     Database + Upload Directory     │  ← Async SQLAlchemy sessions, aiofiles
    └─────────────────────────────────────┘

    Routes receive their storage handles (RecipeStore, FileService) through
    FastAPI dependencies, never through module globals.
"""

__version__ = "1.0.0"
