"""Test configuration and fixtures."""

import os

# Settings are read at import time, so the environment must be ready first
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ENVIRONMENT"] = "testing"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"
os.environ["SEED_ON_STARTUP"] = "false"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from user_management.adapters.outbound.persistence.database import (  # noqa: E402
    build_engine,
    build_session_factory,
    create_tables,
    get_db,
)
from user_management.adapters.outbound.persistence.seeds import run_all_seeds  # noqa: E402
from user_management.main import app  # noqa: E402


@pytest_asyncio.fixture
async def engine():
    """Fresh in-memory database with every table created."""
    test_engine = build_engine("sqlite+aiosqlite:///:memory:")
    await create_tables(bind=test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    """Session factory bound to a database seeded with groups and permissions."""
    factory = build_session_factory(engine)
    async with factory() as session:
        await run_all_seeds(session)
    return factory


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def api_client(session_factory):
    """HTTP client for the API, each request getting its own session."""

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def user_payload():
    """Build a valid create/update body, camelCase as sent by API clients."""

    def build(**overrides):
        payload = {
            "firstName": "John",
            "lastName": "Doe",
            "email": "john.doe@example.com",
            "groupIds": [1, 2],
        }
        payload.update(overrides)
        return payload

    return build
