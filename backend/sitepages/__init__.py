import os
from flask import Flask, abort, send_file
from flask_swagger_ui import get_swaggerui_blueprint
from .config import config_by_name
from .extensions import db, migrate, jwt
from .api.v1 import v1_bp
from .errors import register_error_handlers
from .cli import register_commands

OPENAPI_URL = "/openapi/pages.yaml"
SWAGGER_URL = "/swagger"
OPENAPI_FILE = os.path.join(os.path.dirname(__file__), "api", "v1", "pages_openapi.yaml")


def _register_api_docs(app: Flask) -> None:
    @app.get(OPENAPI_URL, endpoint="openapi_pages")
    def openapi_document():
        if not os.path.isfile(OPENAPI_FILE):
            abort(404, description="OpenAPI document is missing")
        return send_file(OPENAPI_FILE, mimetype="application/yaml")

    app.register_blueprint(
        get_swaggerui_blueprint(
            SWAGGER_URL,
            OPENAPI_URL,
            config={
                "app_name": "Site Pages API",
                "deepLinking": True,
                "persistAuthorization": True,
            },
        ),
        url_prefix=SWAGGER_URL,
    )


def create_app(config_name: str = "development") -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    # -------------------------------------------------
    # Routes, error envelope, CLI
    # -------------------------------------------------
    app.register_blueprint(v1_bp, url_prefix="/api/v1")
    register_error_handlers(app)
    register_commands(app)

    # -------------------------------------------------
    # OpenAPI document + Swagger UI
    # -------------------------------------------------
    _register_api_docs(app)

    app.logger.info("sitepages started with %s config", config_name)
    return app
