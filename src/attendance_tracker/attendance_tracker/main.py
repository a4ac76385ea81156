from __future__ import annotations

import importlib
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .core.enums import StorageBackend
from .core.exceptions import DomainError
from .dashboard.controller import register as register_dashboard
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DatabaseConnection, DBConfig
from .users.controller import register as register_users

SCHEMA_PATH = Path(__file__).resolve().parent / "database" / "schema.sql"


def container_from_settings(settings) -> Container:
    backend = StorageBackend(getattr(settings, "STORAGE_BACKEND", StorageBackend.JSON.value))
    db_config = dict(getattr(settings, "DB_CONFIG", None) or {})

    if backend == StorageBackend.MYSQL and bool(getattr(settings, "AUTO_INIT_DB", False)):
        conn = DatabaseConnection(DBConfig.from_dict(db_config))
        apply_schema(conn, schema_path=SCHEMA_PATH)
        if getattr(settings, "DEBUG", False):
            print(f"[attendance-tracker] schema ready (tables={len(list_tables(conn))})")

    return build_container(
        backend=backend,
        jwt_secret=getattr(settings, "JWT_SECRET"),
        data_dir=getattr(settings, "DATA_DIR", None),
        db_config=db_config,
        bootstrap_admin=getattr(settings, "BOOTSTRAP_ADMIN", None),
        token_ttl_hours=int(getattr(settings, "TOKEN_TTL_HOURS", 24)),
        dashboard_admin_only=bool(getattr(settings, "DASHBOARD_ADMIN_ONLY", False)),
    )


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return jsonify({"error": str(e)}), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"error": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        app.logger.exception("Unhandled error")
        message = f"Internal server error: {e}" if app.config.get("DEBUG") else "Internal server error"
        return jsonify({"error": message}), 500


def create_app(settings_module: Optional[str] = None, *, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["HOST"] = getattr(settings, "HOST", "127.0.0.1")
    app.config["PORT"] = int(getattr(settings, "PORT", 3001))

    if container is None:
        container = container_from_settings(settings)
    app.extensions["attendance_container"] = container

    register_error_handlers(app)

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    register_users(app, container)
    register_attendance(app, container)
    register_dashboard(app, container)

    if not app.config["TESTING"]:
        admin = getattr(settings, "BOOTSTRAP_ADMIN", None) or {}
        print(f"[attendance-tracker] settings={settings_module} backend={container.backend.value}")
        if admin:
            print(f"[attendance-tracker] default admin login: {admin.get('email')} / {admin.get('password')}")

    return app
