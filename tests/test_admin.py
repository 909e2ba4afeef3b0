"""Admin deletion and dashboard statistics."""

import asyncio
from datetime import timedelta

import pytest

from home_hub_api.app.services.statistics_service import StatisticsService

CREATE = {
    "contacts": ("/api/contact", {"name": "Ann", "email": "a@x.com", "subject": "Quote", "message": "Hi"}),
    "newsletters": ("/api/newsletter", {"email": "a@x.com"}),
    "users": ("/api/register", {"username": "ann", "email": "a@x.com", "password": "secret1"}),
    "estimates": ("/api/cost-estimate", {"selectedProducts": ["hub"], "totalCost": 99}),
}

DELETE = [
    ("contacts", "/api/admin/contacts", "Contact"),
    ("newsletters", "/api/admin/newsletters", "Subscriber"),
    ("users", "/api/admin/users", "User"),
    ("estimates", "/api/admin/estimates", "Estimate"),
]


@pytest.mark.parametrize("kind, prefix, label", DELETE)
class TestDelete:
    def _create(self, client, kind):
        path, payload = CREATE[kind]
        assert client.post(path, json=payload).status_code == 200

    def test_delete_existing(self, client, store, kind, prefix, label):
        self._create(client, kind)
        response = client.delete(f"{prefix}/1")
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": f"{label} deleted successfully"}
        assert store.collection(kind).count() == 0

    def test_second_delete_is_not_found(self, client, store, kind, prefix, label):
        self._create(client, kind)
        client.delete(f"{prefix}/1")
        response = client.delete(f"{prefix}/1")
        assert response.status_code == 404
        assert response.json() == {"success": False, "message": f"{label} not found"}

    def test_missing_id_leaves_count_unchanged(self, client, store, kind, prefix, label):
        self._create(client, kind)
        response = client.delete(f"{prefix}/99")
        assert response.status_code == 404
        assert store.collection(kind).count() == 1

    @pytest.mark.parametrize("raw_id", ["abc", "0_1", "+1", "1.0", "١"])
    def test_non_integer_id_is_not_found(self, client, store, kind, prefix, label, raw_id):
        self._create(client, kind)
        response = client.delete(f"{prefix}/{raw_id}")
        assert response.status_code == 404
        assert response.json()["message"] == f"{label} not found"
        assert store.collection(kind).count() == 1


class TestStats:
    def test_totals(self, client):
        for kind in ("contacts", "newsletters", "users", "estimates"):
            path, payload = CREATE[kind]
            client.post(path, json=payload)
        client.post("/api/newsletter", json={"email": "b@x.com"})
        response = client.get("/api/admin/stats")
        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "stats": {
                "totalUsers": 1,
                "totalContacts": 1,
                "totalNewsletters": 2,
                "totalEstimates": 1,
                "recentUsers": 1,
            },
        }

    def test_recent_users_window(self, client, clock, register):
        register(username="old", email="old@x.com")
        clock.advance(days=1)
        register(username="edge", email="edge@x.com")
        clock.advance(days=7)
        stats = client.get("/api/admin/stats").json()["stats"]
        assert stats["totalUsers"] == 2
        # "edge" was created exactly seven days ago; the cutoff is inclusive.
        assert stats["recentUsers"] == 1

    def test_overview_just_outside_window(self, store, clock):
        store.users.create(username="ann", email="a@x.com", password="x")
        now = clock.now + timedelta(days=7, seconds=1)
        stats = asyncio.run(StatisticsService.overview(store, recent_days=7, now=now))
        assert stats.recent_users == 0
        assert stats.total_users == 1
