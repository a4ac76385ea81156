from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from src.attendance_tracker.attendance_tracker.container import build_container
from src.attendance_tracker.attendance_tracker.main import create_app

ADMIN = {
    "email": "admin@company.com",
    "password": "admin123",
    "name": "System Administrator",
    "employee_id": "EMP001",
    "department": "IT",
}


class FixedClock:
    """Callable clock that tests move by hand."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def set(self, now: datetime) -> None:
        self.now = now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 9, 0, 0)


@pytest.fixture
def clock(fixed_now) -> FixedClock:
    return FixedClock(fixed_now)


@pytest.fixture
def token_clock() -> FixedClock:
    return FixedClock(datetime(2026, 2, 2, 2, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def container(clock, token_clock):
    return build_container(
        backend="memory",
        jwt_secret="test-jwt-secret",
        bootstrap_admin=ADMIN,
        clock=clock,
        token_clock=token_clock,
    )


@pytest.fixture
def app(container):
    return create_app("config.testing", container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login(client):
    def _login(email: str = ADMIN["email"], password: str = ADMIN["password"]) -> dict:
        resp = client.post("/api/login", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.get_json()
        token = resp.get_json()["token"]
        return {"Authorization": f"Bearer {token}"}

    return _login


@pytest.fixture
def admin_headers(login) -> dict:
    return login()
