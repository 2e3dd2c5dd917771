from __future__ import annotations

from typing import Any, Mapping

from apispec import APISpec
from apispec.ext.marshmallow import MarshmallowPlugin
from flask import Flask
from flask_apispec import FlaskApiSpec
from flask_jwt_extended import JWTManager
from flask_migrate import Migrate

from finance_control.controllers import (
    API_BLUEPRINTS,
    DOCUMENTED_RESOURCES,
    health_bp,
    register_finance_dependencies,
)
from finance_control.docs.api_documentation import API_INFO, TAGS
from finance_control.extensions.database import db
from finance_control.extensions.error_handlers import register_error_handlers
from finance_control.extensions.jwt_callbacks import register_jwt_callbacks
from finance_control.extensions.request_logging import (
    configure_logging,
    register_request_context,
)
from finance_control.models import (  # noqa: F401
    FinancialGoal,
    Transaction,
    TransactionCategory,
    TransactionResponsibility,
    TransactionResponsible,
    TransactionSubcategory,
)

jwt = JWTManager()
migrate = Migrate()


def _apply_overrides(app: Flask, overrides: object | Mapping[str, Any] | None) -> None:
    if overrides is None:
        return
    if isinstance(overrides, Mapping):
        app.config.update(overrides)
    else:
        app.config.from_object(overrides)


def create_app(config_object: object | Mapping[str, Any] | None = None) -> Flask:
    from config import Config, validate_security_configuration

    validate_security_configuration()

    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(Config())

    # FLASK_* environment variables override the defaults
    app.config.from_prefixed_env()
    _apply_overrides(app, config_object)

    configure_logging(app)

    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    if app.config.get("AUTO_CREATE_DB"):
        with app.app_context():
            db.create_all()

    app.config.update(
        {
            "APISPEC_SPEC": APISpec(
                title=API_INFO["title"],
                version=API_INFO["version"],
                openapi_version="3.0.2",
                plugins=[MarshmallowPlugin()],
                info={
                    "description": API_INFO["description"],
                    "contact": API_INFO["contact"],
                    "license": API_INFO["license"],
                },
                components={
                    "securitySchemes": {
                        "BearerAuth": {
                            "type": "http",
                            "scheme": "bearer",
                            "bearerFormat": "JWT",
                        }
                    }
                },
                tags=TAGS,
            ),
            "APISPEC_SWAGGER_URL": "/docs/swagger/",
            "APISPEC_SWAGGER_UI_URL": "/docs/",
        }
    )
    docs = FlaskApiSpec(app)

    register_error_handlers(app)
    register_request_context(app)
    register_jwt_callbacks(jwt)
    register_finance_dependencies(app)

    app.register_blueprint(health_bp)
    for blueprint in API_BLUEPRINTS:
        app.register_blueprint(blueprint)

    for documented in DOCUMENTED_RESOURCES:
        docs.register(
            documented.resource,
            blueprint=documented.blueprint,
            endpoint=documented.endpoint,
        )

    app.logger.info(
        "app_created blueprints=%s database=%s",
        len(API_BLUEPRINTS) + 1,
        app.config["SQLALCHEMY_DATABASE_URI"].split(":", 1)[0],
    )
    return app


__all__ = ["create_app", "db", "jwt"]
