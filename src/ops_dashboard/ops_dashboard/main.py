from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .attendance.controller import register as register_attendance
from .dashboard.controller import register as register_dashboard
from .employees.controller import register as register_employees
from .expenses.controller import register as register_expenses
from .live.controller import register as register_live
from .members.controller import register as register_members
from .users.controller import register as register_users
from .works.controller import register as register_works

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.permanent_session_lifetime = timedelta(hours=float(getattr(settings, "SESSION_MAX_AGE_HOURS", 12)))

    logging.basicConfig(level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(), format=LOG_FORMAT)
    logger.info("settings=%s store=%s", settings_module, getattr(settings, "STORE_BACKEND", "mongo"))

    container = container or build_container(settings=settings)
    app.extensions["ops_dashboard"] = container

    register_users(app, container)
    register_dashboard(app, container)
    register_works(app, container)
    register_members(app, container)
    register_employees(app, container)
    register_attendance(app, container)
    register_expenses(app, container)
    register_live(app, container)

    return app
