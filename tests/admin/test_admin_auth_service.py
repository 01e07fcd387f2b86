from dataclasses import replace

import pytest

from timeclock_kiosk.admin.service import AdminAuthService
from timeclock_kiosk.core.exceptions import AuthenticationError, ValidationError


def test_default_password_until_changed(container):
    auth = container.admin_auth_service

    auth.verify("admin123")
    with pytest.raises(AuthenticationError):
        auth.verify("wrong")


def test_change_password_stores_hash(container, store):
    auth = container.admin_auth_service

    auth.change_password(new_password="s3cret", confirm_password="s3cret")

    assert store.settings["admin"] != "s3cret"
    auth.verify("s3cret")
    with pytest.raises(AuthenticationError):
        auth.verify("admin123")


@pytest.mark.parametrize("new, confirm", [("", ""), ("a", "b")])
def test_change_password_validation(container, new, confirm):
    with pytest.raises(ValidationError):
        container.admin_auth_service.change_password(new_password=new, confirm_password=confirm)


def test_corrupted_hash_is_wrong_password(container, store):
    store.settings["admin"] = "garbage"

    with pytest.raises(AuthenticationError):
        container.admin_auth_service.verify("garbage")


class BrokenSettings:
    def get_password_hash(self, key):
        raise RuntimeError("settings table missing")

    def set_password_hash(self, key, password_hash):
        raise RuntimeError("settings table missing")


def test_settings_failure_does_not_fall_back_to_default():
    auth = AdminAuthService(BrokenSettings(), default_password="admin123")

    with pytest.raises(RuntimeError):
        auth.verify("admin123")


def test_login_returns_500_when_settings_unreadable(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from timeclock_kiosk.container import build_memory_container
    from timeclock_kiosk.main import create_app

    container = build_memory_container(demo_mode=False)
    container = replace(container, admin_auth_service=AdminAuthService(BrokenSettings()))
    client = create_app(container).test_client()

    assert client.post("/api/admin/login", json={"password": "admin123"}).status_code == 500
