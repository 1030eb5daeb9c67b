from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .container import build_container
from .common.http import error_response
from .database.bootstrap import create_schema, seed_demo_data
from .database.extensions import db
from .logging_config import setup_logging
from .settings import get_settings_module
from .shifts.controller import register as register_shifts
from .workers.controller import register as register_workers

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config.from_object(settings)

    setup_logging(
        log_level=getattr(settings, "LOG_LEVEL", "INFO"),
        log_file=getattr(settings, "LOG_FILE", None),
    )
    logger.info("Starting shift-logger API (settings=%s)", settings_module)

    db.init_app(app)

    with app.app_context():
        if getattr(settings, "AUTO_INIT_DB", False):
            create_schema()
        if getattr(settings, "AUTO_SEED_DB", False):
            seed_demo_data(db.session)

    container = build_container(session=db.session)
    app.extensions["shift_logger.container"] = container

    register_workers(app, container)
    register_shifts(app, container)

    @app.errorhandler(404)
    def not_found(_error):
        return error_response("Resource not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(_error):
        return error_response("Method not allowed", 405)

    @app.errorhandler(500)
    def internal_error(_error):
        return error_response("An unexpected error occurred", 500)

    return app


def run() -> None:
    app = create_app()
    app.run(debug=bool(app.config.get("DEBUG", False)))


if __name__ == "__main__":
    run()
