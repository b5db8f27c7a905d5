"""
Test configuration and fixtures.

Tests run against a throwaway SQLite file per test (aiosqlite) and talk to
the FastAPI app through httpx.AsyncClient with the database dependencies
overridden.
"""

import os
import tempfile

import pytest

# Must be set BEFORE any import of inkwell.core.config
os.environ["ADMIN_TOKEN"] = "test-admin-token"
os.environ["API_TOKENS"] = '{"artist-token": "artist-user-1:artist"}'
os.environ["SQLALCHEMY_DATABASE_URI"] = "sqlite+aiosqlite:///:memory:"
os.environ["TIMEZONE"] = "Europe/Madrid"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="inkwell-uploads-")
os.environ["DB_CREATE_TABLES"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

from httpx import ASGITransport, AsyncClient  # noqa: E402

from inkwell.api import deps  # noqa: E402
from inkwell.db import models  # noqa: E402,F401
from inkwell.db.database import Base, build_engine, build_sessionmaker  # noqa: E402

ADMIN_HEADERS = {"Authorization": "Bearer test-admin-token"}


@pytest.fixture
async def engine(tmp_path):
    """Fresh SQLite database with every table created."""
    test_engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'inkwell-test.db'}")
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_sessionmaker(engine)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    """HTTP client bound to the app, sharing the test database."""
    from inkwell.main import app

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[deps.get_db] = override_get_db
    app.dependency_overrides[deps.get_session_factory] = lambda: session_factory

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return dict(ADMIN_HEADERS)


@pytest.fixture
async def make_client(client, auth_headers):
    """Creates a client through the API and returns its JSON."""
    async def _make(**overrides):
        payload = {"firstName": "Ana", "lastName": "García"}
        payload.update(overrides)
        response = await client.post("/api/clients", json=payload, headers=auth_headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture
async def make_artist(client, auth_headers):
    async def _make(**overrides):
        payload = {"name": "Leo Ink", "specialties": ["blackwork", "fineline"]}
        payload.update(overrides)
        response = await client.post("/api/artists", json=payload, headers=auth_headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture
async def make_appointment(client, auth_headers):
    async def _make(client_id, artist_id, **overrides):
        payload = {
            "clientId": client_id,
            "artistId": artist_id,
            "scheduledDate": "2024-05-15T12:00:00+00:00",
            "duration": 120,
            "bodyPart": "forearm",
        }
        payload.update(overrides)
        response = await client.post("/api/appointments", json=payload, headers=auth_headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture
async def make_sale(client, auth_headers):
    async def _make(client_id, artist_id, **overrides):
        payload = {"clientId": client_id, "artistId": artist_id, "totalAmount": "100.00"}
        payload.update(overrides)
        response = await client.post("/api/sales", json=payload, headers=auth_headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _make
