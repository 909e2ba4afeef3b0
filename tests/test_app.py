"""Application wiring: health check, CORS, pages and error envelopes."""

import logging

from fastapi.testclient import TestClient

from home_hub_api.app.core.config import Settings
from home_hub_api.app.main import create_app
from home_hub_api.app.services.contact_service import ContactService
from home_hub_api.app.services.user_service import UserService


class TestHealth:
    def test_reports_counts_and_files(self, client, register):
        register()
        client.post("/api/newsletter", json={"email": "a@x.com"})
        response = client.get("/api/health")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["port"] == 3000
        assert body["timestamp"].startswith("2026-10-01T12:00:00")
        assert body["data"] == {"users": 1, "contacts": 0, "newsletters": 1, "estimates": 0}
        assert body["files"] == {"cg": True, "admin": True, "adminUsers": False}

    def test_does_not_mutate(self, client, store):
        client.get("/api/health")
        assert store.counts() == {"users": 0, "contacts": 0, "newsletters": 0, "estimates": 0}


class TestCors:
    def test_preflight(self, client):
        response = client.options(
            "/api/register",
            headers={
                "Origin": "http://shop.example",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        assert "DELETE" in response.headers["access-control-allow-methods"]

    def test_bare_options_is_answered(self, client):
        response = client.options("/api/register")
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        assert "POST" in response.headers["access-control-allow-methods"]
        assert "Content-Type" in response.headers["access-control-allow-headers"]

    def test_preflight_with_unlisted_header(self, client):
        response = client.options(
            "/api/admin/users/1",
            headers={
                "Origin": "http://shop.example",
                "Access-Control-Request-Method": "DELETE",
                "Access-Control-Request-Headers": "X-Custom-Token",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"

    def test_options_does_not_touch_store(self, client, store, register):
        register()
        client.options("/api/admin/users/1")
        assert store.users.count() == 1

    def test_simple_request_allows_any_origin(self, client):
        response = client.get("/api/health", headers={"Origin": "http://anywhere.example"})
        assert response.headers["access-control-allow-origin"] == "*"


class TestPages:
    def test_index(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "Smart Home Hub" in response.text
        assert response.headers["content-type"].startswith("text/html")

    def test_admin(self, client):
        assert "Admin" in client.get("/admin").text

    def test_missing_page(self, client):
        response = client.get("/admin-users")
        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Page not found"}

    def test_static_asset(self, client):
        response = client.get("/styles.css")
        assert response.status_code == 200
        assert "margin" in response.text

    def test_without_static_root(self, tmp_path):
        app = create_app(app_settings=Settings(static_root=tmp_path / "missing"))
        with TestClient(app) as client:
            assert client.get("/").status_code == 404
            assert client.get("/api/health").json()["files"] == {
                "cg": False,
                "admin": False,
                "adminUsers": False,
            }


class TestInternalErrors:
    def test_unexpected_failure_is_generic_500(self, client, monkeypatch):
        async def boom(*args, **kwargs):
            raise RuntimeError("connection pool exhausted at 10.0.0.5")

        monkeypatch.setattr(UserService, "register", boom)
        response = client.post(
            "/api/register",
            json={"username": "ann", "email": "a@x.com", "password": "secret1"},
        )
        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "message": "Internal server error during registration",
        }
        assert "pool" not in response.text
        assert "10.0.0.5" not in response.text

    def test_cause_is_logged(self, client, monkeypatch, caplog):
        async def boom(*args, **kwargs):
            raise RuntimeError("listing backend unavailable")

        monkeypatch.setattr(ContactService, "list_contacts", boom)
        with caplog.at_level(logging.ERROR):
            response = client.get("/api/admin/contacts")
        assert response.status_code == 500
        assert response.json()["message"] == "Failed to fetch contacts"
        logged = [r for r in caplog.records if r.exc_info]
        assert any("listing backend unavailable" in str(r.exc_info[1]) for r in logged)

    def test_service_errors_pass_through(self, client):
        response = client.post("/api/login", json={})
        assert response.status_code == 400


def test_unknown_route_uses_envelope(client):
    response = client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert response.json()["success"] is False


def test_each_app_gets_its_own_store(tmp_path):
    settings = Settings(static_root=tmp_path)
    first = TestClient(create_app(app_settings=settings))
    second = TestClient(create_app(app_settings=settings))
    first.post("/api/newsletter", json={"email": "a@x.com"})
    assert second.get("/api/newsletters").json()["newsletters"] == []
