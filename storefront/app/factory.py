from __future__ import annotations

import logging
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from storefront.app.config import Config, store_engine_options
from storefront.app.extensions import db, migrate, cors
from storefront.app.common.errors import ApiError, StoreUnavailableError
from storefront.app.common.request_id import REQUEST_ID_HEADER, current_request_id, init_request_id
from storefront.app.container import EXTENSION_KEY, Container
from storefront.app.api.register import register_blueprints
from storefront.app.cli import cli_bp


def create_app(config_object: type[Config] = Config) -> Flask:
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_object)
    if not app.config["SQLALCHEMY_ENGINE_OPTIONS"]:
        app.config["SQLALCHEMY_ENGINE_OPTIONS"] = store_engine_options(
            app.config["SQLALCHEMY_DATABASE_URI"], app.config["STORE_TIMEOUT_SECONDS"]
        )
    if app.config["AUTH_COOKIE_SECURE"] is None:
        app.config["AUTH_COOKIE_SECURE"] = app.config["APP_ENV"] == "production"

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")

    # Extensions
    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(app, resources={r"/api/*": {"origins": app.config.get("CORS_ORIGINS") or "*"}})

    app.extensions[EXTENSION_KEY] = Container(app.config)

    # Request id
    @app.before_request
    def _before_request():
        init_request_id()

    @app.after_request
    def _after_request(response):
        rid = current_request_id()
        if rid:
            response.headers[REQUEST_ID_HEADER] = rid
        return response

    # Health endpoint
    @app.get("/health")
    def health():
        return {"status": "ok"}, 200

    register_blueprints(app)

    # CLI (flask init-db / seed / purge-sessions)
    app.register_blueprint(cli_bp)

    # Error handlers
    @app.errorhandler(StoreUnavailableError)
    def handle_store_unavailable(err: StoreUnavailableError):
        app.logger.error("Store unavailable: %r", err.__cause__, exc_info=err.__cause__)
        return jsonify(err.to_dict(current_request_id())), err.status_code

    @app.errorhandler(ApiError)
    def handle_api_error(err: ApiError):
        return jsonify(err.to_dict(current_request_id())), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        # Normalize Werkzeug errors into our JSON shape
        payload = {
            "error": {
                "code": "http_error",
                "message": err.description,
                "details": {"name": err.name},
                "request_id": current_request_id(),
            }
        }
        return jsonify(payload), err.code or 500

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        app.logger.exception("Unhandled exception")
        payload = {
            "error": {
                "code": "internal_error",
                "message": "Internal server error",
                "details": {},
                "request_id": current_request_id(),
            }
        }
        return jsonify(payload), 500

    return app
