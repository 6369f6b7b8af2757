from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container
from .core.exceptions import ConfigurationError, DomainError
from .offboarding.controller import register as register_offboarding
from .payroll.controller import register as register_payroll

logger = logging.getLogger(__name__)


def create_app(settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    container = build_container(attendance_rules=getattr(settings, "ATTENDANCE_RULES", None))
    logger.info("[payroll-system] settings=%s rules=%s", settings_module, container.attendance_rules)

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        if isinstance(e, ConfigurationError):
            logger.warning("[payroll-system] %s", e)
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(ValueError)
    def handle_value_error(e: ValueError):
        # Unparseable dates/times from the request body
        return jsonify({"success": False, "message": str(e)}), 400

    register_payroll(app, container)
    register_attendance(app, container)
    register_offboarding(app, container)

    return app
