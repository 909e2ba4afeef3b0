from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from home_hub_api.app.core.config import Settings
from home_hub_api.app.core.store import RecordStore
from home_hub_api.app.main import create_app


class FakeClock:
    """Controllable replacement for the store clock."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2026, 10, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def store(clock: FakeClock) -> RecordStore:
    return RecordStore(clock=clock)


@pytest.fixture
def static_root(tmp_path: Path) -> Path:
    (tmp_path / "cg.html").write_text("<h1>Smart Home Hub</h1>", encoding="utf-8")
    (tmp_path / "admin.html").write_text("<h1>Admin</h1>", encoding="utf-8")
    (tmp_path / "styles.css").write_text("body { margin: 0; }", encoding="utf-8")
    return tmp_path


@pytest.fixture
def app_settings(static_root: Path) -> Settings:
    return Settings(static_root=static_root, port=3000)


@pytest.fixture
def client(store: RecordStore, app_settings: Settings) -> TestClient:
    app = create_app(store=store, app_settings=app_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register(client: TestClient):
    """Factory registering a user through the API."""

    def _register(username: str = "ann", email: str = "a@x.com", password: str = "secret1"):
        return client.post(
            "/api/register",
            json={"username": username, "email": email, "password": password},
        )

    return _register
