from __future__ import annotations

import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import load_settings
from config.config import Config

from .common.logging_setup import configure_logging
from .container import Container, build_container
from .dashboard.controller import register as register_dashboard
from .employees.controller import register as register_employees

logger = logging.getLogger(__name__)


def _setting(settings, name: str):
    return getattr(settings, name, getattr(Config, name))


def create_app(*, env: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    settings = load_settings(env)

    configure_logging(_setting(settings, "LOG_LEVEL"))

    app = Flask(__name__)
    app.secret_key = _setting(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(_setting(settings, "DEBUG"))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False
    app.json.ensure_ascii = False

    if container is None:
        container = build_container(seed_demo_data=bool(_setting(settings, "SEED_DEMO_DATA")))
    app.extensions["personnel_container"] = container

    logger.info(
        "[personnel-system] settings=%s records=%d",
        settings.__name__,
        len(container.employees_repo.snapshot()),
    )

    register_dashboard(app, container)
    register_employees(app, container)

    return app
