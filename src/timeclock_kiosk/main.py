from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .admin.controller import register as register_admin
from .config import get_settings_module
from .container import Container, build_container, build_memory_container
from .database.bootstrap import apply_schema, ensure_default_employees, list_tables
from .database.demo import seed_demo
from .database.memory_store import MemoryStore
from .kiosk.controller import register as register_kiosk
from .schedules.controller import register as register_schedules

logger = logging.getLogger(__name__)


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, str(level_name).upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _build_container(settings, *, demo_mode: bool) -> Container:
    default_password = getattr(settings, "DEFAULT_ADMIN_PASSWORD", "admin123")

    if demo_mode:
        logger.warning("Demo mode: data lives in memory and is not saved")
        return build_memory_container(seed_demo(MemoryStore(id_prefix="demo")), default_admin_password=default_password)

    container = build_container(db_config=getattr(settings, "DB_CONFIG"), default_admin_password=default_password)
    logger.info("Database: %s", container.conn.config.describe())

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(container.conn)
        logger.debug("Tables: %s", ", ".join(list_tables(container.conn)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        ensure_default_employees(container.employees_repo)
    return container


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logger.info("Settings: %s", settings_module)

    if container is None:
        container = _build_container(settings, demo_mode=bool(getattr(settings, "DEMO_MODE", False)))
    app.extensions["timeclock_container"] = container

    register_kiosk(app, container)
    register_schedules(app, container)
    register_admin(app, container)

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"success": True, "demo_mode": container.demo_mode})

    return app
