"""
RecipeBox Backend: Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
How:   The environment is pointed at a throw-away SQLite file and upload
       directory BEFORE the recipebox package is imported, so the module-level
       settings and engine pick them up.

Fixture Hierarchy (all function-scoped):
    ├── db:                 recipes table created before, dropped after each test
    ├── store:              RecipeStore on a real session (needs db)
    ├── upload_dir:         fresh temporary upload directory
    ├── files:              FileService rooted at upload_dir
    ├── mock_store:         AsyncMock-backed RecipeStore double
    ├── sample_image_bytes: tiny JPEG payload
    └── test_client:        HTTPX AsyncClient wired to the app (needs db, files)
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

# Must run before any recipebox import
_test_root = tempfile.mkdtemp(prefix="recipebox_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_test_root, 'test.db')}"
os.environ["UPLOAD_DIR"] = os.path.join(_test_root, "uploads")
os.environ["PUBLIC_BASE_URL"] = "http://localhost:5000"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from recipebox.database import Base, async_session_factory, engine, init_db  # noqa: E402
from recipebox.services.file_service import FileService, get_file_service  # noqa: E402
from recipebox.services.recipe_store import RecipeStore  # noqa: E402


@pytest_asyncio.fixture
async def db():
    """Creates the schema for one test and removes it afterwards."""
    await init_db()
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    # Pooled aiosqlite connections are bound to this test's event loop
    await engine.dispose()


@pytest_asyncio.fixture
async def store(db):
    async with async_session_factory() as session:
        yield RecipeStore(session)


@pytest.fixture
def upload_dir(tmp_path):
    """A per-test upload directory (not created yet: FileService makes it on first use)."""
    return tmp_path / "uploads"


@pytest.fixture
def files(upload_dir):
    return FileService(upload_dir=str(upload_dir), public_base_url="http://localhost:5000")


@pytest.fixture
def mock_store():
    """
    RecipeStore double for service tests.

    Usage:
        mock_store.delete_by_id.return_value = None
        with pytest.raises(NotFoundError): ...
    """
    store = MagicMock(spec=RecipeStore)
    store.list_all = AsyncMock(return_value=[])
    store.insert = AsyncMock(return_value=1)
    store.delete_by_id = AsyncMock(return_value=None)
    store.update_flag = AsyncMock(return_value=None)
    return store


@pytest.fixture
def sample_image_bytes():
    """Minimal JPEG: SOI marker + JFIF header + EOI marker."""
    return (
        b'\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00'
        b'\xff\xd9'
    )


@pytest_asyncio.fixture
async def test_client(db, files):
    """
    HTTPX AsyncClient talking to the app in-process.

    ASGITransport does not run the lifespan, so the schema comes from the
    db fixture and the upload directory from the files fixture.
    """
    from recipebox.main import app

    app.dependency_overrides[get_file_service] = lambda: files
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
