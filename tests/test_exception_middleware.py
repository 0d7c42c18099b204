import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import IntegrityError, OperationalError

from user_management.domain.exceptions import (
    DatabaseOperationException,
    DomainException,
    ResourceAlreadyExistsException,
)
from user_management.shared.middleware import AsyncExceptionMiddleware
from user_management.shared.middleware.exception_middleware import extract_constraint_name

app = FastAPI()
app.add_middleware(AsyncExceptionMiddleware)


@app.get("/conflict")
async def conflict():
    raise ResourceAlreadyExistsException("User with these data already exists")


@app.get("/unmapped")
async def unmapped():
    raise DomainException("Something odd", internal_code="SOMETHING_ODD")


@app.get("/db-failure")
async def db_failure():
    raise DatabaseOperationException("Error creating User", original_error=RuntimeError("disk full"))


@app.get("/integrity")
async def integrity():
    raise IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed: users.email"))


@app.get("/operational")
async def operational():
    raise OperationalError("SELECT", {}, Exception("database is locked"))


@app.get("/boom")
async def boom():
    raise RuntimeError("boom")


@app.get("/ok")
async def ok():
    return {"ok": True}


@pytest.fixture
def client():
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
@pytest.mark.parametrize("path,status_code,code", [
    ("/conflict", 409, "RESOURCE_ALREADY_EXISTS"),
    ("/unmapped", 400, "SOMETHING_ODD"),
    ("/db-failure", 500, "DATABASE_OPERATION_ERROR"),
    ("/integrity", 409, "INTEGRITY_ERROR_users.email"),
    ("/operational", 500, "DATABASE_ERROR"),
    ("/boom", 500, "INTERNAL_SERVER_ERROR"),
])
async def test_exceptions_are_mapped(client, path, status_code, code):
    async with client:
        response = await client.get(path)

    assert response.status_code == status_code
    assert response.json()["code"] == code


@pytest.mark.asyncio
async def test_domain_exception_body(client):
    async with client:
        response = await client.get("/unmapped")

    assert response.json() == {"detail": "Something odd", "code": "SOMETHING_ODD"}


@pytest.mark.asyncio
async def test_details_are_redacted_in_production(client, monkeypatch):
    from user_management.adapters.configuration.config import settings
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")

    async with client:
        db_response = await client.get("/db-failure")
        boom_response = await client.get("/boom")

    assert db_response.json()["detail"] == "Internal database error"
    assert boom_response.json()["detail"] == "Internal server error"


@pytest.mark.asyncio
async def test_process_time_header(client):
    async with client:
        response = await client.get("/ok")

    assert response.status_code == 200
    assert float(response.headers["x-process-time"]) >= 0


@pytest.mark.parametrize("message,expected", [
    ('duplicate key value violates unique constraint "ix_users_email"', "ix_users_email"),
    ("UNIQUE constraint failed: users.email", "users.email"),
    ("something else entirely", None),
])
def test_extract_constraint_name(message, expected):
    assert extract_constraint_name(message) == expected
