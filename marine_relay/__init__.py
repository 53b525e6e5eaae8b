"""Flask application factory for the marine map relay."""

from __future__ import annotations

import logging
import os

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from .config import Config
from .extensions import init_extensions

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _configure_logging(app: Flask) -> None:
    """Настроить корневой логгер по LOG_LEVEL / LOG_FILE."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    log_file = app.config.get("LOG_FILE")
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    level = str(app.config.get("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(format=LOG_FORMAT, level=level, handlers=handlers)


def _register_blueprints(app: Flask) -> None:
    """Register API and front-end blueprints."""
    from .frontend import bp as frontend_bp
    from .layers import bp as layers_bp

    app.register_blueprint(layers_bp, url_prefix="/api")
    app.register_blueprint(frontend_bp)


def _register_common_routes(app: Flask) -> None:
    @app.get("/health")
    def health():
        return ("", 204)

    @app.get("/ready")
    def ready():
        return jsonify(status="ok"), 200


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(404)
    @app.errorhandler(405)
    def _api_http_error(err: HTTPException):
        # Для API отдаём JSON, для остального стандартную страницу
        if request.path.startswith("/api/"):
            return jsonify(error=err.description), err.code
        return err


def _apply_security_headers(app: Flask) -> None:
    @app.after_request
    def _set_headers(resp):
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "same-origin")
        return resp


def create_app(config_class: type[Config] = Config) -> Flask:
    app = Flask(
        __name__,
        static_folder=os.path.join(os.path.dirname(__file__), "..", "static"),
        static_url_path="",
    )
    app.config.from_object(config_class)
    # Слои отдаём с тем же порядком ключей, что пришёл от SLIP
    app.json.sort_keys = False

    _configure_logging(app)
    init_extensions(app)

    _register_blueprints(app)
    _register_common_routes(app)
    _register_error_handlers(app)
    _apply_security_headers(app)
    return app
