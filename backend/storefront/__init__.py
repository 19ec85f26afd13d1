from flask import Flask, send_file, current_app
from .config import config_by_name
from .extensions import db, migrate, jwt
from .logging_config import setup_logging
from .api.v1 import v1_bp
from .builder.registry import SessionRegistry
from .builder.session import BuilderSession
from .gateway import SqlAlchemyDesignGateway
from .errors import register_error_handlers
from flask_swagger_ui import get_swaggerui_blueprint
import os


def create_app(config_name: str = "development", *, gateway=None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])

    setup_logging(environment=app.config["LOG_ENVIRONMENT"])

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    # -------------------------------------------------
    # Builder sessions (one per seller, process local)
    # -------------------------------------------------
    design_gateway = gateway or SqlAlchemyDesignGateway(app)

    def open_session(seller_id):
        return BuilderSession(
            seller_id,
            design_gateway,
            history_limit=app.config["BUILDER_HISTORY_LIMIT"],
            autosave_delay=app.config["BUILDER_AUTOSAVE_DELAY"],
            autosave_enabled=app.config["BUILDER_AUTOSAVE_ENABLED"],
        )

    app.extensions["builder_sessions"] = SessionRegistry(
        open_session,
        idle_timeout=app.config["BUILDER_SESSION_IDLE_TIMEOUT"],
    )

    # -------------------------------------------------
    # API Blueprints
    # -------------------------------------------------
    app.register_blueprint(v1_bp, url_prefix="/api/v1")
    register_error_handlers(app)

    # -------------------------------------------------
    # Serve OpenAPI YAML (PUBLIC, NO SELLER)
    # -------------------------------------------------
    @app.route("/openapi/builder.yaml", methods=["GET"], endpoint="openapi_builder")
    def serve_openapi():
        spec_path = os.path.join(
            current_app.root_path,
            "api",
            "v1",
            "builder_openapi.yaml",
        )

        if not os.path.exists(spec_path):
            raise FileNotFoundError("builder_openapi.yaml not found")

        return send_file(
            spec_path,
            mimetype="application/yaml",
            as_attachment=False,
        )

    # -------------------------------------------------
    # Swagger UI
    # -------------------------------------------------
    SWAGGER_URL = "/swagger"
    API_URL = "/openapi/builder.yaml"

    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        API_URL,
        config={
            "app_name": "Storefront Builder API",
            "deepLinking": True,
            "persistAuthorization": True,
        },
    )

    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)

    return app
