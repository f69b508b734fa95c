"""Shared fixtures: a throwaway SQLite database and HTTP clients signed in to two organizations.

Settings are read at import time, so the environment is prepared before the
application is imported.
"""

import os
import tempfile

_DB_DIR = tempfile.mkdtemp(prefix="waste-dashboard-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_DIR}/test.db"
os.environ["AUDIT_ENABLED"] = "false"
os.environ["PASSWORD_ITERATIONS"] = "1000"
os.environ["OPENAI_API_KEY"] = ""
os.environ["APP_ENV"] = "test"

import httpx  # noqa: E402
import pytest  # noqa: E402

import app.domain  # noqa: E402,F401  (registers every model on Base.metadata)
from app.db.base import Base, engine  # noqa: E402
from app.main import app as asgi_app  # noqa: E402

API = "/api/v1"
PASSWORD = "correct-horse-battery"


def _http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=asgi_app), base_url="http://test")


async def register(client: httpx.AsyncClient, organization: str, email: str) -> dict:
    response = await client.post(
        f"{API}/auth/register",
        json={
            "organizationName": organization,
            "email": email,
            "password": PASSWORD,
            "firstName": "Test",
            "lastName": "Owner",
        },
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


@pytest.fixture
async def db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    # Pooled aiosqlite connections must not outlive the test's event loop
    await engine.dispose()


@pytest.fixture
async def anon(db):
    async with _http_client() as client:
        yield client


@pytest.fixture
async def client(db):
    async with _http_client() as c:
        await register(c, "Acme Recycling", "owner@acme.test")
        yield c


@pytest.fixture
async def other_client(db):
    async with _http_client() as c:
        await register(c, "Globex Waste", "owner@globex.test")
        yield c


@pytest.fixture
def register_org():
    return register
