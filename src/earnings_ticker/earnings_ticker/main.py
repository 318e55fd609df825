from __future__ import annotations

import atexit
import importlib
from types import ModuleType
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging_config import configure_logging, get_logger
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .web.controller import register as register_ticker

logger = get_logger("main")


def create_app(*, settings: Optional[ModuleType] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    if settings is None:
        settings_module = get_settings_module()
        settings = importlib.import_module(settings_module)

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"), json_output=bool(getattr(settings, "LOG_JSON", False)))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    backend = str(getattr(settings, "STATE_BACKEND", "mysql")).lower()
    if backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
        db_config = getattr(settings, "DB_CONFIG")
        apply_schema(db_config)
        logger.info("schema ready (tables=%s)", len(list_tables(db_config)))

    container = container or build_container(settings=settings)
    app.extensions["earnings_ticker"] = container

    register_ticker(app, container)

    container.controller.activate()
    atexit.register(container.controller.shutdown)

    logger.info("earnings ticker ready (backend=%s)", backend)
    return app
