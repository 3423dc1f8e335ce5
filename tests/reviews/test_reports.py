"""Tests for review reports and their moderation."""

from httpx import AsyncClient


async def _review(client: AsyncClient, headers: dict) -> str:
    response = await client.post(
        "/api/reviews", json={"placeId": "1", "rating": 1, "comment": "spammy"}, headers=headers
    )
    return response.json()["id"]


class TestReportReview:
    async def test_report(self, client: AsyncClient, registered_user: dict, other_user: dict):
        review_id = await _review(client, registered_user["headers"])
        response = await client.post(
            f"/api/reviews/{review_id}/report",
            json={"type": "spam", "detail": "advertising"},
            headers=other_user["headers"],
        )
        assert response.status_code == 201
        report = response.json()["report"]
        assert report["review_id"] == review_id
        assert report["reporter_id"] == other_user["user"]["id"]
        assert report["type"] == "spam"
        assert report["status"] == "pending"
        assert report["resolved_at"] is None

    async def test_report_missing_type(self, client: AsyncClient, registered_user: dict):
        review_id = await _review(client, registered_user["headers"])
        response = await client.post(
            f"/api/reviews/{review_id}/report", json={"detail": "?"}, headers=registered_user["headers"]
        )
        assert response.status_code == 400

    async def test_report_missing_review(self, client: AsyncClient, registered_user: dict):
        response = await client.post(
            f"/api/reviews/{'e' * 32}/report", json={"type": "spam"}, headers=registered_user["headers"]
        )
        assert response.status_code == 404


class TestModerateReports:
    async def test_list_and_resolve(
        self, client: AsyncClient, registered_user: dict, other_user: dict, admin_headers: dict
    ):
        review_id = await _review(client, registered_user["headers"])
        created = await client.post(
            f"/api/reviews/{review_id}/report", json={"type": "offensive"}, headers=other_user["headers"]
        )
        report_id = created.json()["report"]["id"]

        pending = await client.get("/api/admin/review-reports", params={"status": "pending"}, headers=admin_headers)
        assert [r["id"] for r in pending.json()["reports"]] == [report_id]

        patched = await client.patch(
            f"/api/admin/review-reports/{report_id}/status", json={"status": "resolved"}, headers=admin_headers
        )
        assert patched.status_code == 200
        assert patched.json()["message"] == "report status updated"

        resolved = await client.get(
            "/api/admin/review-reports", params={"status": "resolved"}, headers=admin_headers
        )
        reports = resolved.json()["reports"]
        assert len(reports) == 1
        assert reports[0]["resolved_at"] is not None

        still_pending = await client.get(
            "/api/admin/review-reports", params={"status": "pending"}, headers=admin_headers
        )
        assert still_pending.json()["reports"] == []

    async def test_status_required(self, client: AsyncClient, admin_headers: dict):
        response = await client.patch(
            f"/api/admin/review-reports/{'f' * 32}/status", json={}, headers=admin_headers
        )
        assert response.status_code == 400

    async def test_non_admin_cannot_moderate(self, client: AsyncClient, registered_user: dict):
        response = await client.get("/api/admin/review-reports", headers=registered_user["headers"])
        assert response.status_code == 403
