"""
Palette Picker Backend — Test Configuration (conftest.py)
===========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── mock_db_session: Mock async session for service unit tests
    ├── sample_palette_body: A complete POST /api/v1/palettes body
    └── test_client: HTTPX AsyncClient over ASGITransport, backed by a
                     fresh SQLite schema for each test
"""

import os
import tempfile

# Must run before palette_picker is imported: the engine is built at import time.
_TEST_DB_DIR = tempfile.mkdtemp(prefix="palette_picker_test_")
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(_TEST_DB_DIR, "test.db")
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_list(mock_db_session):
            result = MagicMock()
            result.scalars.return_value.all.return_value = [project]
            mock_db_session.execute.return_value = result
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def sample_palette_body():
    return {
        "palette_name": "Autumn",
        "color1": "#F2A541",
        "color2": "#F08A4B",
        "color3": "#D78A76",
        "color4": "#8C5E58",
        "color5": "#3F3047",
    }


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP client talking to the app with empty tables.

    Tables are created from the ORM metadata before the test and dropped
    after it; the engine is disposed so no pooled connection outlives the
    test's event loop.
    """
    from palette_picker.database import Base, engine
    from palette_picker.main import app
    from palette_picker.models.project import Project  # noqa: F401
    from palette_picker.models.palette import Palette  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()
