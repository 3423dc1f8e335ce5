"""Tests for password change."""

from httpx import AsyncClient


class TestChangePassword:
    async def test_change_password_success(self, client: AsyncClient, registered_user: dict):
        response = await client.post(
            "/api/auth/change-password",
            json={"currentPassword": registered_user["password"], "newPassword": "fresh-pass9"},
            headers=registered_user["headers"],
        )
        assert response.status_code == 200
        assert response.json()["message"] == "Password changed successfully"

        old = await client.post("/api/auth/login", json={
            "email": registered_user["email"], "password": registered_user["password"],
        })
        assert old.status_code == 401
        new = await client.post("/api/auth/login", json={
            "email": registered_user["email"], "password": "fresh-pass9",
        })
        assert new.status_code == 200

    async def test_snake_case_body_accepted(self, client: AsyncClient, registered_user: dict):
        response = await client.post(
            "/api/auth/change-password",
            json={"current_password": registered_user["password"], "new_password": "fresh-pass9"},
            headers=registered_user["headers"],
        )
        assert response.status_code == 200

    async def test_wrong_current_password(self, client: AsyncClient, registered_user: dict):
        response = await client.post(
            "/api/auth/change-password",
            json={"currentPassword": "not-my-password1", "newPassword": "fresh-pass9"},
            headers=registered_user["headers"],
        )
        assert response.status_code == 400
        assert response.json()["error"] == "current password is incorrect"

    async def test_weak_new_password(self, client: AsyncClient, registered_user: dict):
        response = await client.post(
            "/api/auth/change-password",
            json={"currentPassword": registered_user["password"], "newPassword": "short"},
            headers=registered_user["headers"],
        )
        assert response.status_code == 400

    async def test_requires_auth(self, client: AsyncClient):
        response = await client.post(
            "/api/auth/change-password",
            json={"currentPassword": "secret123", "newPassword": "fresh-pass9"},
        )
        assert response.status_code == 401
