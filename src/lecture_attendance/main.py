from __future__ import annotations

import importlib
import logging
import os
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.responses import message
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .lectures.controller import register as register_lectures
from .students.controller import register as register_students
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

_SETTINGS_DEFAULTS = {
    "JWT_SECRET": None,
    "TOKEN_TTL_HOURS": 8,
    "DB_CONFIG": {},
    "DB_CONNECT_TIMEOUT": 10,
    "UPLOAD_FOLDER": "uploads",
    "MAX_CONTENT_LENGTH": 16 * 1024 * 1024,
    "API_PREFIX": "",
    "CORS_ORIGINS": "*",
    "DEBUG": False,
    "TESTING": False,
    "LOG_LEVEL": "INFO",
    "AUTO_INIT_DB": False,
    "SEED_DEMO_USER": True,
}


def _cors_origins(value: Any):
    """A literal "*" or a comma separated string of origins; lists pass through."""
    if isinstance(value, str):
        value = value.strip()
        if value == "*":
            return value
        return [o.strip() for o in value.split(",") if o.strip()]
    return list(value or [])


def create_app(container: Optional[Container] = None, overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    """Application factory.

    Settings come from the module chosen by APP_ENV; `overrides` is applied on
    top. Pass a prebuilt `container` to run against other repositories
    (tests use in-memory ones); otherwise the MySQL-backed one is built.
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    for key, default in _SETTINGS_DEFAULTS.items():
        app.config[key] = getattr(settings, key, default)
    if overrides:
        app.config.update(overrides)
    app.config["UPLOAD_FOLDER"] = os.path.abspath(str(app.config["UPLOAD_FOLDER"]))

    CORS(app, origins=_cors_origins(app.config["CORS_ORIGINS"]))

    @app.errorhandler(HTTPException)
    def http_error(e: HTTPException):
        return message(e.name, e.code)

    logging.basicConfig(
        level=str(app.config["LOG_LEVEL"]).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        db_config = app.config["DB_CONFIG"]
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        container = build_container(
            db_config=db_config,
            jwt_secret=app.config["JWT_SECRET"],
            upload_folder=app.config["UPLOAD_FOLDER"],
            token_ttl_hours=app.config["TOKEN_TTL_HOURS"],
            connect_timeout=app.config["DB_CONNECT_TIMEOUT"],
        )
        if app.config["AUTO_INIT_DB"]:
            apply_schema(container.conn)
            logger.info("Schema ready (tables=%d)", len(list_tables(container.conn)))

    if app.config["SEED_DEMO_USER"]:
        container.identity_service.ensure_demo_identity()

    prefix = str(app.config["API_PREFIX"] or "").rstrip("/")
    register_users(app, container, prefix=prefix)
    register_students(app, container, prefix=prefix, upload_folder=app.config["UPLOAD_FOLDER"])
    register_lectures(app, container, prefix=prefix)
    register_attendance(app, container, prefix=prefix)

    app.extensions["lecture_attendance"] = container
    return app
