from __future__ import annotations

from datetime import datetime

import pytest

from timeclock_kiosk.container import build_memory_container
from timeclock_kiosk.database.memory_store import MemoryStore
from timeclock_kiosk.employees.model import Employee


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 5, 10, 0, 0)


@pytest.fixture
def store() -> MemoryStore:
    s = MemoryStore(id_prefix="test")
    for emp in (
        Employee(id="e1", name="Anna Ivanova", rate=300.0),
        Employee(id="e2", name="Boris Orlov", rate=200.0),
    ):
        s.employees[emp.id] = emp
    return s


@pytest.fixture
def container(store):
    return build_memory_container(store, demo_mode=False)


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from timeclock_kiosk.main import create_app

    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    resp = client.post("/api/admin/login", json={"password": "admin123"})
    assert resp.status_code == 200
    return client
