"""
Shared test fixtures.

Settings are read once at import time, so the environment is prepared
before anything from chirp is imported.

Two ways to reach the database:
    client  - TestClient around the real app; each test gets a fresh
              in-memory database (the engine is disposed on shutdown)
    session - AsyncSession on a private in-memory engine for service tests
"""

import os
import tempfile

os.environ["APP_ENV"] = "test"
os.environ["SECRET_KEY"] = "test-secret-key-that-is-long-enough-for-hs256"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["DATABASE_AUTO_CREATE"] = "true"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["SLACK_WEBHOOK_URL"] = ""
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="chirp-uploads-")

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from chirp.api.main import app
from chirp.shared.models import Base
from chirp.shared.realtime import registry
from chirp.shared.schemas.user import UserCreate
from chirp.shared.services.auth_service import AuthService

PASSWORD = "secret123"


@pytest.fixture(autouse=True)
def clear_registry():
    registry.clear()
    yield
    registry.clear()


# ═══════════════════════════════════════════════════════════════════════════════
# API FIXTURES
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


def register(client: TestClient, username: str, email: str | None = None) -> dict:
    """Create an account and log in; returns the login body plus auth headers."""
    email = email or f"{username}@example.com"
    response = client.post(
        "/api/auth/create-account",
        json={
            "username": username,
            "fullname": username.title(),
            "email": email,
            "password": PASSWORD,
        },
    )
    assert response.status_code == 201, response.text
    login = client.post("/api/auth/login", json={"email": email, "password": PASSWORD})
    assert login.status_code == 200, login.text
    body = login.json()
    body["headers"] = {"Authorization": f"Bearer {body['access_token']}"}
    return body


@pytest.fixture
def alice(client):
    return register(client, "alice")


@pytest.fixture
def bob(client):
    return register(client, "bobby")


# ═══════════════════════════════════════════════════════════════════════════════
# SERVICE FIXTURES
# ═══════════════════════════════════════════════════════════════════════════════


@pytest_asyncio.fixture
async def session():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
    async with factory() as db:
        yield db

    await engine.dispose()


@pytest_asyncio.fixture
async def make_user(session):
    auth = AuthService(session)

    async def _make(username: str, email: str | None = None):
        return await auth.register_user(
            UserCreate(
                username=username,
                fullname=username.title(),
                email=email or f"{username}@example.com",
                password=PASSWORD,
            )
        )

    return _make
