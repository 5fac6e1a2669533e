from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container
from .reports.controller import register as register_reports
from .students.repository import RosterRepository

SETTING_NAMES = ("SECRET_KEY", "DEBUG", "ROSTER_PATH", "COMMENT_POLICY", "PERCENTAGE_BASIS", "LOG_LEVEL")


def load_settings(settings_module: str) -> dict:
    settings = importlib.import_module(settings_module)
    return {name: getattr(settings, name) for name in SETTING_NAMES if hasattr(settings, name)}


def create_app(*, overrides: dict | None = None, roster_repo: RosterRepository | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = load_settings(settings_module)
    settings.update(overrides or {})

    logging.basicConfig(
        level=str(settings.get("LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app.secret_key = settings.get("SECRET_KEY")
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))

    logging.getLogger(__name__).info(
        "settings=%s roster=%s comment_policy=%s percentage_basis=%s",
        settings_module,
        settings.get("ROSTER_PATH"),
        settings.get("COMMENT_POLICY"),
        settings.get("PERCENTAGE_BASIS"),
    )

    container = build_container(settings=settings, roster_repo=roster_repo)
    app.extensions["class_attendance"] = container

    register_attendance(app, container)
    register_reports(app, container)

    return app
