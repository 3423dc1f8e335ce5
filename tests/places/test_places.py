"""Tests for place and location listings, lookup and derived ratings."""

from httpx import AsyncClient


async def _review(client: AsyncClient, headers: dict, place_id: str, rating: int) -> dict:
    response = await client.post(
        "/api/reviews",
        json={"placeId": place_id, "rating": rating, "comment": f"rated {rating}"},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestListings:
    async def test_list_places(self, client: AsyncClient):
        response = await client.get("/api/places")
        assert response.status_code == 200
        places = response.json()["places"]
        assert len(places) == 32
        first = next(p for p in places if p["PlaceID"] == "1")
        assert first["Name"] == "คาเฟ่จิม ทอมป์สัน"
        assert first["LocationID"] == "1"
        assert first["Category"] == "Cafe"
        assert first["Coordinates"] == {"lat": 13.7491, "lng": 100.5282}
        assert len(first["HighlightImages"]) == 6

    async def test_list_locations(self, client: AsyncClient):
        response = await client.get("/api/locations")
        assert response.status_code == 200
        locations = response.json()["locations"]
        assert len(locations) == 11
        by_id = {loc["LocationID"]: loc for loc in locations}
        assert by_id["2"]["Name"] == "เชียงใหม่"
        assert by_id["9"]["Name"] == "กระบี่"


class TestLookup:
    async def test_by_external_id(self, client: AsyncClient):
        response = await client.get("/api/places/32")
        assert response.status_code == 200
        place = response.json()["place"]
        assert place["Name"] == "Yaowarat Road"
        assert place["Category"] == "Street Food"

    async def test_by_storage_id(self, client: AsyncClient):
        listing = (await client.get("/api/places")).json()["places"]
        storage_id = next(p["_id"] for p in listing if p["PlaceID"] == "5")
        response = await client.get(f"/api/places/{storage_id}")
        assert response.status_code == 200
        assert response.json()["place"]["PlaceID"] == "5"

    async def test_unknown_id(self, client: AsyncClient):
        response = await client.get("/api/places/does-not-exist")
        assert response.status_code == 404
        assert response.json()["error"] == "Place not found"

    async def test_unknown_storage_id(self, client: AsyncClient):
        response = await client.get(f"/api/places/{'f' * 32}")
        assert response.status_code == 404


class TestDerivedRating:
    async def test_no_reviews_rates_zero(self, client: AsyncClient):
        # Seed data carries 4.0 for place 2; with no reviews the derived value wins.
        response = await client.get("/api/places/2")
        assert response.json()["place"]["Rating"] == 0.0

    async def test_mean_of_reviews(self, client: AsyncClient, registered_user: dict, other_user: dict):
        await _review(client, registered_user["headers"], "1", 4)
        await _review(client, other_user["headers"], "1", 5)
        await _review(client, other_user["headers"], "1", 3)

        single = (await client.get("/api/places/1")).json()["place"]
        assert single["Rating"] == 4.0

        listing = (await client.get("/api/places")).json()["places"]
        assert next(p for p in listing if p["PlaceID"] == "1")["Rating"] == 4.0
        assert next(p for p in listing if p["PlaceID"] == "3")["Rating"] == 0.0

    async def test_fractional_mean(self, client: AsyncClient, registered_user: dict):
        await _review(client, registered_user["headers"], "7", 4)
        await _review(client, registered_user["headers"], "7", 5)
        response = await client.get("/api/places/7")
        assert response.json()["place"]["Rating"] == 4.5

    async def test_rating_follows_review_changes(self, client: AsyncClient, registered_user: dict):
        created = await _review(client, registered_user["headers"], "8", 2)
        await _review(client, registered_user["headers"], "8", 4)

        await client.put(
            f"/api/reviews/{created['id']}",
            json={"rating": 5, "comment": "changed my mind"},
            headers=registered_user["headers"],
        )
        assert (await client.get("/api/places/8")).json()["place"]["Rating"] == 4.5

        await client.delete(f"/api/reviews/{created['id']}", headers=registered_user["headers"])
        assert (await client.get("/api/places/8")).json()["place"]["Rating"] == 4.0

    async def test_admin_listing_uses_derived_rating(
        self, client: AsyncClient, registered_user: dict, admin_headers: dict
    ):
        await _review(client, registered_user["headers"], "9", 1)
        listing = (await client.get("/api/admin/places", headers=admin_headers)).json()["places"]
        assert next(p for p in listing if p["PlaceID"] == "9")["Rating"] == 1.0
