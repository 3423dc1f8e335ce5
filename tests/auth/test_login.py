"""Tests for login, logout and token refresh."""

from httpx import AsyncClient

from gosmooth.auth.jwt import validate_token


class TestLogin:
    async def test_login_success(self, client: AsyncClient, registered_user: dict):
        response = await client.post("/api/auth/login", json={
            "email": registered_user["email"],
            "password": registered_user["password"],
        })
        assert response.status_code == 200
        data = response.json()
        assert validate_token(data["token"])["sub"] == registered_user["user"]["id"]
        assert data["user"]["email"] == registered_user["email"]

    async def test_remember_me_extends_token(self, client: AsyncClient, registered_user: dict):
        response = await client.post("/api/auth/login", json={
            "email": registered_user["email"],
            "password": registered_user["password"],
            "rememberMe": True,
        })
        assert response.status_code == 200
        payload = validate_token(response.json()["token"])
        assert payload["exp"] - payload["iat"] == 7 * 24 * 3600

    async def test_wrong_password(self, client: AsyncClient, registered_user: dict):
        response = await client.post("/api/auth/login", json={
            "email": registered_user["email"],
            "password": "wrong-password1",
        })
        assert response.status_code == 401
        assert response.json()["error"] == "invalid credentials"

    async def test_unknown_email(self, client: AsyncClient):
        response = await client.post("/api/auth/login", json={
            "email": "ghost@example.com",
            "password": "secret123",
        })
        assert response.status_code == 401
        assert response.json()["error"] == "invalid credentials"

    async def test_admin_account_exists(self, client: AsyncClient):
        response = await client.post("/api/auth/login", json={
            "email": "Admin001@go-smooth.co.th",
            "password": "goadmin7",
        })
        assert response.status_code == 200
        assert response.json()["user"]["role"] == "admin"


class TestBannedLogin:
    async def test_banned_user_gets_reason(
        self, client: AsyncClient, registered_user: dict, admin_headers: dict
    ):
        user_id = registered_user["user"]["id"]
        ban = await client.post(
            f"/api/admin/users/{user_id}/ban", json={"reason": "spam reviews"}, headers=admin_headers
        )
        assert ban.status_code == 200

        response = await client.post("/api/auth/login", json={
            "email": registered_user["email"],
            "password": registered_user["password"],
        })
        assert response.status_code == 403
        data = response.json()
        assert data["error"] == "Your account has been banned"
        assert data["banReason"] == "spam reviews"
        assert "token" not in data
        assert "user" not in data

    async def test_banned_user_wrong_password_is_401(
        self, client: AsyncClient, registered_user: dict, admin_headers: dict
    ):
        user_id = registered_user["user"]["id"]
        await client.post(f"/api/admin/users/{user_id}/ban", json={"reason": "x"}, headers=admin_headers)

        response = await client.post("/api/auth/login", json={
            "email": registered_user["email"],
            "password": "wrong-password1",
        })
        assert response.status_code == 401

    async def test_unbanned_user_can_login(
        self, client: AsyncClient, registered_user: dict, admin_headers: dict
    ):
        user_id = registered_user["user"]["id"]
        await client.post(f"/api/admin/users/{user_id}/ban", json={"reason": "x"}, headers=admin_headers)
        unban = await client.post(f"/api/admin/users/{user_id}/unban", headers=admin_headers)
        assert unban.status_code == 200

        response = await client.post("/api/auth/login", json={
            "email": registered_user["email"],
            "password": registered_user["password"],
        })
        assert response.status_code == 200
        assert response.json()["user"]["ban_reason"] is None


class TestLogoutAndRefresh:
    async def test_logout(self, client: AsyncClient, registered_user: dict):
        response = await client.post("/api/auth/logout", headers=registered_user["headers"])
        assert response.status_code == 200
        assert response.json()["message"] == "logged out successfully"

    async def test_token_still_valid_after_logout(self, client: AsyncClient, registered_user: dict):
        await client.post("/api/auth/logout", headers=registered_user["headers"])
        response = await client.get("/api/profile", headers=registered_user["headers"])
        assert response.status_code == 200

    async def test_refresh_issues_long_lived_token(self, client: AsyncClient, registered_user: dict):
        response = await client.post("/api/auth/refresh", headers=registered_user["headers"])
        assert response.status_code == 200
        payload = validate_token(response.json()["token"])
        assert payload["sub"] == registered_user["user"]["id"]
        assert payload["exp"] - payload["iat"] == 7 * 24 * 3600

    async def test_logout_requires_token(self, client: AsyncClient):
        response = await client.post("/api/auth/logout")
        assert response.status_code == 401
