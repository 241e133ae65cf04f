"""
Shared pytest fixtures.

Environment is set before any app import: app.database reads MONGO_URL and
DB_NAME at import time. Motor connects lazily, so no server is needed; every
test replaces the collections it touches with mocks.
"""

import os

os.environ.setdefault("MONGO_URL", "mongodb://localhost:27017")
os.environ.setdefault("DB_NAME", "subjects_api_test")
os.environ["API_METRICS_ENABLED"] = "false"

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


def make_cursor(docs):
    """A Motor-like cursor: sort() chains, to_list() is awaited."""
    cursor = MagicMock()
    cursor.sort.return_value = cursor
    cursor.to_list = AsyncMock(return_value=docs)
    return cursor


@pytest.fixture
def mock_db():
    """
    Mock of the Motor database used by the services.

    Usage:
        mock_db.subjects.find_one = AsyncMock(return_value={...})
        mock_db.users.find.return_value = make_cursor([...])
    """
    db = MagicMock()
    with patch("app.services.subjects.db", db), \
         patch("app.services.users.db", db), \
         patch("app.services.metrics.db", db):
        yield db


@pytest.fixture
def sample_users():
    return [
        {"user_id": "user_aaaaaaaaaaaa", "name": "Ana", "age": 21, "email": "ana@example.com"},
        {"user_id": "user_bbbbbbbbbbbb", "name": "Luis", "age": 23, "email": "luis@example.com"},
    ]


@pytest.fixture
def sample_subject():
    return {
        "subject_id": "subj_1a2b3c4d",
        "name": "Algebra",
        "teacher": "Dr. Ruiz",
        "alumni": ["user_aaaaaaaaaaaa", "user_bbbbbbbbbbbb"],
        "created_at": "2026-01-15T10:00:00+00:00",
    }


@pytest_asyncio.fixture
async def test_client():
    """HTTPX AsyncClient talking to the FastAPI app without a running server."""
    from main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
