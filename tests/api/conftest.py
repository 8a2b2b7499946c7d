"""
API test fixtures.

Provides httpx AsyncClient instances that talk to the FastAPI app
in-process via ASGITransport (no server needed).

ASGITransport does not trigger ASGI lifespan, so init_globals() never
runs.  The module-level _db_manager is pointed at the test database so
that get_db_session() (which calls get_db_manager() directly, not via
Depends) creates one session per request, as in production.
"""

import pytest
from httpx import ASGITransport, AsyncClient

import api.dependencies as deps
from api.main import create_app
from api.dependencies import get_db_manager
from db.database import DatabaseManager


@pytest.fixture
async def app(db_manager: DatabaseManager):
    """FastAPI app bound to the per-test in-memory database."""
    application = create_app()

    old_db_manager = deps._db_manager
    deps._db_manager = db_manager
    application.dependency_overrides[get_db_manager] = lambda: db_manager

    yield application

    application.dependency_overrides.clear()
    deps._db_manager = old_db_manager


@pytest.fixture
async def client(app) -> AsyncClient:
    """Client that identifies itself as 'registrar'."""
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://testserver",
        headers={"X-Caller": "registrar"},
    ) as c:
        yield c


@pytest.fixture
async def anon_client(app) -> AsyncClient:
    """Client without an X-Caller header."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c


@pytest.fixture
async def seeded_user(client: AsyncClient) -> dict:
    resp = await client.post(
        "/api/v1/users",
        json={
            "username": "alice",
            "password": "Passw0rd",
            "email": "alice@example.edu",
            "role": "student",
        },
    )
    assert resp.status_code == 200
    return resp.json()
