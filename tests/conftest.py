"""Shared test fixtures.

Every test gets a fresh SQLite database in its own temp directory, and the
real application lifespan (bootstrap, admin account, seed data) runs against it.
"""

from __future__ import annotations

import os
import tempfile
from collections.abc import AsyncGenerator, Awaitable, Callable
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

# Importing gosmooth.main builds a module-level app; keep its upload dir out of the repo.
os.environ.setdefault("GOSMOOTH_UPLOAD_DIR", tempfile.mkdtemp(prefix="gosmooth_uploads_"))
os.environ.setdefault("GOSMOOTH_LOG_FORMAT", "console")

from gosmooth.config import get_settings  # noqa: E402
from gosmooth.main import create_app  # noqa: E402

ADMIN_EMAIL = "Admin001@go-smooth.co.th"
ADMIN_PASSWORD = "goadmin7"
DEFAULT_PASSWORD = "secret123"

Register = Callable[..., Awaitable[dict]]


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    return tmp_path / "uploads"


@pytest_asyncio.fixture
async def app(tmp_path: Path, upload_dir: Path, monkeypatch: pytest.MonkeyPatch) -> AsyncGenerator[FastAPI, None]:
    """Application with its lifespan running against a throwaway database."""
    monkeypatch.setenv("GOSMOOTH_DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'gosmooth.db'}")
    monkeypatch.setenv("GOSMOOTH_UPLOAD_DIR", str(upload_dir))
    monkeypatch.setenv("GOSMOOTH_DB_CONNECT_BACKOFF_SECONDS", "0")
    monkeypatch.setenv("GOSMOOTH_PASSWORD_POLICY", "basic")
    monkeypatch.setenv("GOSMOOTH_ENFORCE_OWNERSHIP", "false")
    get_settings.cache_clear()

    application = create_app()
    async with application.router.lifespan_context(application):
        yield application

    get_settings.cache_clear()


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to the running app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def register(client: AsyncClient) -> Register:
    """Register an account and return ``{"email", "password", "token", "user", "headers"}``."""

    async def _register(
        email: str = "traveller@example.com",
        password: str = DEFAULT_PASSWORD,
        name: str = "Traveller",
    ) -> dict:
        response = await client.post(
            "/api/auth/register",
            json={"email": email, "password": password, "name": name},
        )
        assert response.status_code == 201, response.text
        data = response.json()
        return {
            "email": email,
            "password": password,
            "token": data["token"],
            "user": data["user"],
            "headers": {"Authorization": f"Bearer {data['token']}"},
        }

    return _register


@pytest_asyncio.fixture
async def registered_user(register: Register) -> dict:
    return await register()


@pytest_asyncio.fixture
async def other_user(register: Register) -> dict:
    return await register(email="second@example.com", name="Second")


@pytest_asyncio.fixture
async def admin_headers(client: AsyncClient) -> dict[str, str]:
    """Bearer header for the bootstrap admin account."""
    response = await client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}
