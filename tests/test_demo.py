from timeclock_kiosk.container import build_memory_container
from timeclock_kiosk.core.enums import KioskState
from timeclock_kiosk.database.demo import seed_demo
from timeclock_kiosk.database.memory_store import MemoryStore


def test_demo_seed_states(fixed_now):
    container = build_memory_container(seed_demo(MemoryStore(id_prefix="demo"), now=fixed_now))

    tiles = {t.employee.id: t.state for t in container.kiosk_service.tiles(now=fixed_now)}

    assert tiles == {"demo1": KioskState.ACTIVE, "demo2": KioskState.IDLE, "demo3": KioskState.SCHEDULED}
    assert container.demo_mode is True


def test_demo_login_needs_no_password(fixed_now, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from timeclock_kiosk.main import create_app

    client = create_app(build_memory_container(seed_demo(MemoryStore(), now=fixed_now))).test_client()

    assert client.post("/api/admin/login", json={}).status_code == 200
    assert client.get("/api/admin/employees").status_code == 200
