"""Tests for review and favorite endpoints."""

import pytest
from httpx import AsyncClient

from staynest.models.property import Property

pytestmark = pytest.mark.asyncio


def _review(property_id, rating: int = 5) -> dict:
    return {"property_id": str(property_id), "rating": rating, "comment": "Lovely stay, would come back."}


class TestReviews:
    async def test_create_and_rating(self, client: AsyncClient, auth_headers: dict, test_property: Property):
        response = await client.post("/api/v1/reviews", json=_review(test_property.id, 4), headers=auth_headers)
        assert response.status_code == 201
        assert response.json()["rating"] == 4

        rating = await client.get(f"/api/v1/properties/{test_property.id}/rating")
        assert rating.json() == {"rating": "4.0", "count": 1}

    async def test_rating_without_reviews(self, client: AsyncClient, test_property: Property):
        rating = await client.get(f"/api/v1/properties/{test_property.id}/rating")
        assert rating.json()["count"] == 0

    async def test_one_review_per_property(self, client: AsyncClient, auth_headers: dict, test_property: Property):
        await client.post("/api/v1/reviews", json=_review(test_property.id), headers=auth_headers)
        response = await client.post("/api/v1/reviews", json=_review(test_property.id), headers=auth_headers)
        assert response.status_code == 409

    async def test_owner_cannot_review_own_property(
        self, client: AsyncClient, owner_headers: dict, test_property: Property
    ):
        response = await client.post("/api/v1/reviews", json=_review(test_property.id), headers=owner_headers)
        assert response.status_code == 403

    @pytest.mark.parametrize("rating", [0, 6])
    async def test_rating_bounds(self, client: AsyncClient, auth_headers: dict, test_property: Property, rating: int):
        response = await client.post("/api/v1/reviews", json=_review(test_property.id, rating), headers=auth_headers)
        assert response.status_code == 422

    async def test_list_and_delete_mine(self, client: AsyncClient, auth_headers: dict, test_property: Property):
        review_id = (await client.post("/api/v1/reviews", json=_review(test_property.id), headers=auth_headers)).json()[
            "id"
        ]
        mine = await client.get("/api/v1/reviews/me", headers=auth_headers)
        assert [r["id"] for r in mine.json()] == [review_id]

        response = await client.delete(f"/api/v1/reviews/{review_id}", headers=auth_headers)
        assert response.status_code == 200
        listing = await client.get(f"/api/v1/reviews/property/{test_property.id}")
        assert listing.json() == []


class TestFavorites:
    async def test_toggle(self, client: AsyncClient, auth_headers: dict, test_property: Property):
        url = f"/api/v1/favorites/{test_property.id}/toggle"

        added = await client.post(url, headers=auth_headers)
        assert added.json()["favorite"] is True
        favorites = await client.get("/api/v1/favorites", headers=auth_headers)
        assert [p["id"] for p in favorites.json()] == [str(test_property.id)]

        removed = await client.post(url, headers=auth_headers)
        assert removed.json()["favorite"] is False
        favorites = await client.get("/api/v1/favorites", headers=auth_headers)
        assert favorites.json() == []
