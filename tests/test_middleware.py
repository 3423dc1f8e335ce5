"""Tests for request ids, CORS, error bodies and the request deadline."""

import asyncio

import pytest
from fastapi import Depends, FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from gosmooth.config import Settings
from gosmooth.database import get_session
from gosmooth.db.models import Location
from gosmooth.errors import NotFoundError
from gosmooth.middleware.cors import setup_cors
from gosmooth.middleware.error_handler import setup_error_handlers
from gosmooth.middleware.logging import REDACTED, redact_secrets
from gosmooth.middleware.timeout import RequestDeadlineMiddleware


class TestRequestId:
    async def test_generated(self, client: AsyncClient):
        response = await client.get("/health")
        assert response.headers["X-Request-Id"]

    async def test_propagated(self, client: AsyncClient):
        response = await client.get("/health", headers={"X-Request-Id": "trace-123"})
        assert response.headers["X-Request-Id"] == "trace-123"


class TestCors:
    async def test_preflight_allowed_origin(self, client: AsyncClient):
        response = await client.options(
            "/api/places",
            headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "GET"},
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
        assert response.headers["access-control-allow-credentials"] == "true"

    async def test_unknown_origin_not_echoed(self, client: AsyncClient):
        response = await client.get("/health", headers={"Origin": "http://evil.example.com"})
        assert "access-control-allow-origin" not in response.headers

    async def test_preflight_cached_for_twelve_hours(self, client: AsyncClient):
        response = await client.options(
            "/api/reviews",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Authorization, X-Requested-With",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-max-age"] == "43200"

    async def test_request_id_exposed(self, client: AsyncClient):
        response = await client.get("/health", headers={"Origin": "http://localhost:5173"})
        assert "X-Request-Id" in response.headers["access-control-expose-headers"]

    def test_wildcard_origin_refused(self):
        settings = Settings(cors_origins=["*"])
        with pytest.raises(ValueError, match="cannot contain"):
            setup_cors(FastAPI(), settings)


class TestLogRedaction:
    def test_secret_keys_are_masked(self):
        event = {"event": "login_failed", "email": "a@example.com", "password": "hunter22"}
        event = redact_secrets(None, "info", event)
        assert event == {"event": "login_failed", "email": "a@example.com", "password": REDACTED}

    def test_other_keys_untouched(self):
        event = {"event": "place_created", "place_id": "abc"}
        assert redact_secrets(None, "info", dict(event)) == event


class TestErrorBodies:
    async def test_unknown_route(self, client: AsyncClient):
        response = await client.get("/api/nothing-here")
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    async def test_validation_error_shape(self, client: AsyncClient):
        response = await client.post("/api/auth/login", json={"email": "x"})
        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "validation_error"
        assert data["code"] == 400
        fields = {tuple(err["loc"]) for err in data["errors"]}
        assert ("body", "password") in fields

    async def test_api_error_shape(self):
        app = FastAPI()
        setup_error_handlers(app)

        @app.get("/missing")
        async def missing() -> None:
            raise NotFoundError("thing not found")

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            response = await ac.get("/missing")
        assert response.status_code == 404
        assert response.json() == {
            "error": "thing not found",
            "message": "The requested resource was not found",
            "code": 404,
        }

    async def test_unhandled_error_is_json_500(self):
        app = FastAPI()
        setup_error_handlers(app)

        @app.get("/boom")
        async def boom() -> None:
            msg = "kaboom"
            raise RuntimeError(msg)

        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            response = await ac.get("/boom")
        assert response.status_code == 500
        assert response.json() == {"error": "internal server error"}


class TestRequestDeadline:
    async def test_slow_request_times_out(self):
        app = FastAPI()
        app.add_middleware(RequestDeadlineMiddleware, timeout_seconds=0.05)

        @app.get("/slow")
        async def slow() -> dict[str, str]:
            await asyncio.sleep(0.5)
            return {"status": "done"}

        @app.get("/fast")
        async def fast() -> dict[str, str]:
            return {"status": "done"}

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            slow_response = await ac.get("/slow")
            fast_response = await ac.get("/fast")
        assert slow_response.status_code == 504
        assert slow_response.json() == {"error": "request timed out"}
        assert fast_response.status_code == 200

    async def test_timed_out_handler_does_not_finish(self):
        side_effects: list[str] = []
        app = FastAPI()
        app.add_middleware(RequestDeadlineMiddleware, timeout_seconds=0.05)

        @app.post("/slow")
        async def slow() -> dict[str, str]:
            await asyncio.sleep(0.3)
            side_effects.append("committed")
            return {"status": "done"}

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            response = await ac.post("/slow")
        await asyncio.sleep(0.4)
        assert response.status_code == 504
        assert side_effects == []

    async def test_timed_out_write_is_rolled_back(self, app: FastAPI):
        slow_app = FastAPI()
        slow_app.state.db = app.state.db
        slow_app.add_middleware(RequestDeadlineMiddleware, timeout_seconds=0.05)

        @slow_app.post("/locations")
        async def add_location(db: AsyncSession = Depends(get_session)) -> dict[str, str]:
            db.add(Location(location_id="99", name="Nowhere"))
            await db.flush()
            await asyncio.sleep(0.3)
            await db.commit()
            return {"status": "saved"}

        async with AsyncClient(transport=ASGITransport(app=slow_app), base_url="http://test") as ac:
            response = await ac.post("/locations")
        await asyncio.sleep(0.4)
        assert response.status_code == 504
        async with app.state.db.session_factory() as session:
            assert await session.get(Location, "99") is None

