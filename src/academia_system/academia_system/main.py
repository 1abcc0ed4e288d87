from __future__ import annotations

import asyncio
import importlib
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.web import register_error_handlers
from .container import build_container
from .database.bootstrap import ensure_store, seed_demo
from .database.connection import KeyValueStorage
from .reports.controller import register as register_reports
from .students.controller import register as register_students
from .users.controller import register as register_users


def _load_settings(overrides: Optional[dict[str, Any]]) -> dict[str, Any]:
    settings = importlib.import_module(get_settings_module())
    values = {k: getattr(settings, k) for k in dir(settings) if k.isupper()}
    values.update(overrides or {})
    return values


def create_app(settings_overrides: Optional[dict[str, Any]] = None, *, storage: Optional[KeyValueStorage] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings = _load_settings(settings_overrides)
    app.secret_key = settings["SECRET_KEY"]
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    app.config["TESTING"] = bool(settings.get("TESTING", False))

    container = build_container(
        storage_config={"data_dir": settings["DATA_DIR"], "store_key": settings.get("STORE_KEY")},
        storage=storage,
        latency_seconds=float(settings.get("API_LATENCY_SECONDS", 0)),
    )
    app.extensions["academia_container"] = container

    if app.config["DEBUG"]:
        print("[academia-system] settings=", get_settings_module(), " data_dir=", settings["DATA_DIR"])

    if bool(settings.get("AUTO_INIT_DB", False)):
        state = ensure_store(container.store)
        if app.config["DEBUG"]:
            print(f"[academia-system] store ready (found={state.value})")
    if bool(settings.get("AUTO_SEED_DB", False)):
        created = asyncio.run(seed_demo(container.directory))
        if app.config["DEBUG"]:
            print(f"[academia-system] demo seed ready (created={created})")

    register_error_handlers(app)
    register_users(app, container)
    register_students(app, container)
    register_reports(app, container)

    return app
