import logging
import time

from flask import Flask, g, jsonify, request
from sqlalchemy.engine import make_url
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound

from postboard.config import Config
from postboard.db import db
from postboard.errors import ApiError
from postboard.extensions.extensions import cors, jwt, ma
from postboard.logging_config import configure_logging
from postboard.routes.auth_routes import auth_bp
from postboard.routes.main_routes import main_bp
from postboard.routes.post_routes import post_bp
from postboard.routes.user_routes import user_bp
from postboard.security import register_jwt_callbacks
from postboard.services.storage_service import init_storage


logger = logging.getLogger(__name__)


def _masked_database_url(url: str) -> str:
    try:
        return make_url(url).render_as_string(hide_password=True)
    except Exception:
        return "<unparseable>"


def _engine_options(config):
    """Engine options with a connect timeout in the driver's own terms."""
    options = dict(config.get("SQLALCHEMY_ENGINE_OPTIONS") or {})
    timeout = config.get("DATABASE_CONNECT_TIMEOUT", 10)
    backend = make_url(config["SQLALCHEMY_DATABASE_URI"]).get_backend_name()

    connect_args = dict(options.get("connect_args") or {})
    if backend == "sqlite":
        connect_args.setdefault("timeout", timeout)
    elif backend in {"postgresql", "mysql", "mariadb"}:
        connect_args.setdefault("connect_timeout", int(timeout))
    if backend == "postgresql":
        statement_timeout_ms = int(config.get("DATABASE_STATEMENT_TIMEOUT", 30) * 1000)
        connect_args.setdefault("options", f"-c statement_timeout={statement_timeout_ms}")
    options["connect_args"] = connect_args
    return options


def _register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(e):
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        if isinstance(e, (NotFound, MethodNotAllowed)):
            return jsonify({"error": "Not found"}), 404
        return jsonify({"error": e.description or e.name}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        db.session.rollback()
        logger.exception(
            "request_failed method=%s path=%s", request.method, request.path
        )
        return jsonify({"error": "Internal server error"}), 500


def _register_request_logging(app):
    @app.before_request
    def start_timer():
        g.request_started_at = time.perf_counter()

    @app.after_request
    def log_request(response):
        started_at = g.pop("request_started_at", None)
        duration_ms = None
        if started_at is not None:
            duration_ms = round((time.perf_counter() - started_at) * 1000, 2)
        logger.info(
            "request_completed method=%s path=%s status=%s duration_ms=%s",
            request.method,
            request.path,
            response.status_code,
            duration_ms,
        )
        return response


def create_app(overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    configure_logging(app.config["LOG_LEVEL"])

    app.config["SQLALCHEMY_ENGINE_OPTIONS"] = _engine_options(app.config)
    db.init_app(app)
    ma.init_app(app)
    jwt.init_app(app)
    register_jwt_callbacks(jwt)
    cors.init_app(app, origins=app.config["CORS_ALLOWED_ORIGINS"])
    init_storage(app)

    app.register_blueprint(main_bp)
    app.register_blueprint(user_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(post_bp)

    _register_error_handlers(app)
    _register_request_logging(app)

    with app.app_context():
        db.create_all()

    logger.info(
        "app_configured database=%s storage_endpoint=%s bucket=%s",
        _masked_database_url(app.config["SQLALCHEMY_DATABASE_URI"]),
        app.config["MINIO_ENDPOINT"],
        app.config["MINIO_BUCKET"],
    )
    return app
