"""Tests for review CRUD, denormalized names and rating bounds."""

import pytest
from httpx import AsyncClient

from gosmooth.config import get_settings


async def _create(client: AsyncClient, headers: dict, **overrides) -> dict:
    body = {"placeId": "1", "rating": 5, "comment": "Lovely cafe"}
    body.update(overrides)
    response = await client.post("/api/reviews", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateReview:
    async def test_create(self, client: AsyncClient, registered_user: dict):
        data = await _create(client, registered_user["headers"])
        assert data["message"] == "review created successfully"
        review = data["review"]
        assert review["id"] == data["id"]
        assert review["user_id"] == registered_user["user"]["id"]
        assert review["username"] == "Traveller"
        assert review["placeId"] == "1"
        assert review["rating"] == 5
        assert review["likes"] == 0
        assert review["liked_by"] == []
        assert review["comments"] == []

    async def test_place_name_filled_from_place(self, client: AsyncClient, registered_user: dict):
        data = await _create(client, registered_user["headers"], placeId="32")
        assert data["placeName"] == "Yaowarat Road"
        assert data["review"]["placeName"] == "Yaowarat Road"

    async def test_place_name_from_body_kept(self, client: AsyncClient, registered_user: dict):
        data = await _create(client, registered_user["headers"], placeName="My Favourite Spot")
        assert data["placeName"] == "My Favourite Spot"

    async def test_unknown_place_leaves_name_empty(self, client: AsyncClient, registered_user: dict):
        data = await _create(client, registered_user["headers"], placeId="no-such-place")
        assert data["placeName"] == ""

    @pytest.mark.parametrize("rating", [0, 6, -1])
    async def test_rating_out_of_range(self, client: AsyncClient, registered_user: dict, rating: int):
        response = await client.post(
            "/api/reviews",
            json={"placeId": "1", "rating": rating, "comment": "hmm"},
            headers=registered_user["headers"],
        )
        assert response.status_code == 400

    async def test_requires_auth(self, client: AsyncClient):
        response = await client.post("/api/reviews", json={"placeId": "1", "rating": 5, "comment": "x"})
        assert response.status_code == 401


class TestReadReviews:
    async def test_list_and_filter(self, client: AsyncClient, registered_user: dict):
        await _create(client, registered_user["headers"], placeId="1")
        await _create(client, registered_user["headers"], placeId="2")

        everything = await client.get("/api/reviews")
        assert everything.status_code == 200
        assert len(everything.json()["reviews"]) == 2

        filtered = await client.get("/api/reviews", params={"placeId": "2"})
        reviews = filtered.json()["reviews"]
        assert len(reviews) == 1
        assert reviews[0]["placeId"] == "2"

    async def test_get_single(self, client: AsyncClient, registered_user: dict):
        created = await _create(client, registered_user["headers"])
        response = await client.get(f"/api/reviews/{created['id']}", headers=registered_user["headers"])
        assert response.status_code == 200
        assert response.json()["review"]["comment"] == "Lovely cafe"

    async def test_invalid_id(self, client: AsyncClient, registered_user: dict):
        response = await client.get("/api/reviews/not-an-id", headers=registered_user["headers"])
        assert response.status_code == 400
        assert response.json()["error"] == "invalid review ID"

    async def test_missing_review(self, client: AsyncClient, registered_user: dict):
        response = await client.get(f"/api/reviews/{'a' * 32}", headers=registered_user["headers"])
        assert response.status_code == 404
        assert response.json()["error"] == "review not found"


class TestDenormalizedNames:
    async def test_username_not_refreshed_after_rename(self, client: AsyncClient, registered_user: dict):
        created = await _create(client, registered_user["headers"])
        await client.put("/api/profile", json={"name": "New Name"}, headers=registered_user["headers"])

        response = await client.get(f"/api/reviews/{created['id']}", headers=registered_user["headers"])
        assert response.json()["review"]["username"] == "Traveller"

    async def test_place_name_not_refreshed_after_rename(
        self, client: AsyncClient, registered_user: dict, admin_headers: dict
    ):
        created = await _create(client, registered_user["headers"], placeId="32")
        listing = (await client.get("/api/places")).json()["places"]
        storage_id = next(p["_id"] for p in listing if p["PlaceID"] == "32")
        await client.put(f"/api/admin/places/{storage_id}", json={"Name": "Chinatown"}, headers=admin_headers)

        response = await client.get(f"/api/reviews/{created['id']}", headers=registered_user["headers"])
        assert response.json()["review"]["placeName"] == "Yaowarat Road"


class TestUpdateDelete:
    async def test_update(self, client: AsyncClient, registered_user: dict):
        created = await _create(client, registered_user["headers"])
        response = await client.put(
            f"/api/reviews/{created['id']}",
            json={"rating": 3, "comment": "Crowded today"},
            headers=registered_user["headers"],
        )
        assert response.status_code == 200
        review = response.json()["review"]
        assert review["rating"] == 3
        assert review["comment"] == "Crowded today"

    async def test_update_rating_out_of_range(self, client: AsyncClient, registered_user: dict):
        created = await _create(client, registered_user["headers"])
        response = await client.put(
            f"/api/reviews/{created['id']}",
            json={"rating": 9, "comment": "!!!"},
            headers=registered_user["headers"],
        )
        assert response.status_code == 400

    async def test_delete(self, client: AsyncClient, registered_user: dict):
        created = await _create(client, registered_user["headers"])
        response = await client.delete(f"/api/reviews/{created['id']}", headers=registered_user["headers"])
        assert response.status_code == 200
        assert response.json()["message"] == "review deleted successfully"

        gone = await client.get(f"/api/reviews/{created['id']}", headers=registered_user["headers"])
        assert gone.status_code == 404


class TestOwnership:
    async def test_other_user_can_edit_by_default(
        self, client: AsyncClient, registered_user: dict, other_user: dict
    ):
        """Without ownership enforcement any authenticated user may edit any review."""
        created = await _create(client, registered_user["headers"], rating=5)
        response = await client.put(
            f"/api/reviews/{created['id']}",
            json={"rating": 1, "comment": "overwritten"},
            headers=other_user["headers"],
        )
        assert response.status_code == 200
        assert response.json()["review"]["rating"] == 1

    async def test_other_user_can_delete_by_default(
        self, client: AsyncClient, registered_user: dict, other_user: dict
    ):
        created = await _create(client, registered_user["headers"])
        response = await client.delete(f"/api/reviews/{created['id']}", headers=other_user["headers"])
        assert response.status_code == 200

    async def test_enforced_ownership_blocks_others(
        self, client: AsyncClient, registered_user: dict, other_user: dict, admin_headers: dict
    ):
        created = await _create(client, registered_user["headers"])
        get_settings().enforce_ownership = True

        blocked = await client.put(
            f"/api/reviews/{created['id']}",
            json={"rating": 1, "comment": "overwritten"},
            headers=other_user["headers"],
        )
        assert blocked.status_code == 403

        own = await client.put(
            f"/api/reviews/{created['id']}",
            json={"rating": 4, "comment": "edited by me"},
            headers=registered_user["headers"],
        )
        assert own.status_code == 200

        moderated = await client.delete(f"/api/reviews/{created['id']}", headers=admin_headers)
        assert moderated.status_code == 200
