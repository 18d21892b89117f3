"""
Notes API — Test Configuration (conftest.py)
=============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, created fresh for each test):
    ├── static_dir: empty temporary assets directory
    ├── test_settings: Settings pointing at static_dir, seeded store
    ├── test_app: a brand-new FastAPI instance (own NoteStore)
    ├── test_client: HTTPX AsyncClient bound to test_app
    └── seeded_store: NoteStore holding the three demo notes
"""

import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["STATIC_DIR"] = "__no_static_assets__"

from notes_api.config import Settings  # noqa: E402
from notes_api.main import create_app  # noqa: E402
from notes_api.services.note_store import NoteStore, seed_notes  # noqa: E402


@pytest.fixture
def static_dir(tmp_path):
    """Empty assets directory; tests drop files into it as needed."""
    directory = tmp_path / "dist"
    directory.mkdir()
    return directory


@pytest.fixture
def test_settings(static_dir):
    """Settings for one test: seeded store, temporary assets directory."""
    return Settings(static_dir=str(static_dir), seed_notes=True, log_level="WARNING")


@pytest.fixture
def test_app(test_settings):
    """A fresh application, so every test starts from the three seed notes."""
    return create_app(test_settings)


@pytest.fixture
def seeded_store():
    """Standalone store with the demo notes, for service-level tests."""
    return NoteStore(seed_notes())


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/notes")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
