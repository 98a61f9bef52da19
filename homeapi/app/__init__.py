import logging
import os
import time

from flask import Flask, g, jsonify, request
from flask_cors import CORS
from flask_login import LoginManager
from flask_migrate import Migrate
from werkzeug.exceptions import HTTPException

from config import Config
from homeapi.db import db
from homeapi.utils.log.log import setup_logger

login_manager = LoginManager()
migrate = Migrate()

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    setup_logger(app.config.get("LOG_LEVEL", "INFO"))

    uri = app.config["SQLALCHEMY_DATABASE_URI"]
    if uri.startswith("sqlite:///") and ":memory:" not in uri:
        os.makedirs(os.path.dirname(uri[len("sqlite:///"):]) or ".", exist_ok=True)

    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    CORS(app, origins=app.config["CORS_ORIGINS"], supports_credentials=True)

    from homeapi.services.auth_service import AuthService

    @login_manager.user_loader
    def load_user(user_id: str):
        return AuthService.load_user(int(user_id))

    # API sem páginas de login: responde 401 em vez de redirecionar
    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({'error': 'Not authorized'}), 401

    with app.app_context():
        from homeapi.models import User, Temperature, Switch, Light
        db.create_all()

    # Blueprints
    from homeapi.services.resource_service import RESOURCE_SERVICES
    from homeapi.views.routes.blueprints.resource_routes import create_resource_blueprint
    from homeapi.views.routes.blueprints.session_routes import session_bp

    app.register_blueprint(session_bp)
    for service in RESOURCE_SERVICES:
        app.register_blueprint(create_resource_blueprint(service))

    from homeapi.app.cli import register_commands
    register_commands(app)

    _register_request_logging(app)
    _register_error_handlers(app)

    return app


def _register_request_logging(app):

    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def log_request(response):
        started = g.pop("request_started", None)
        elapsed_ms = (time.perf_counter() - started) * 1000 if started else 0.0
        logger.info("%s %s %s %.1f ms", request.method, request.path,
                    response.status_code, elapsed_ms)
        return response


def _register_error_handlers(app):

    @app.errorhandler(404)
    @app.errorhandler(405)
    def http_error(error: HTTPException):
        return jsonify({'error': error.description}), error.code
