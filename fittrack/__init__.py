import logging

from flask import Flask
from fittrack.extensions import db, cors, migrate
from fittrack.routes import register_routes
from fittrack.utils.errors import register_error_handlers


def configure_logging(app):
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app.logger.setLevel(level)


def create_app(config_object="fittrack.config.Config"):
    app = Flask(__name__)
    app.config.from_object(config_object)

    configure_logging(app)

    # Initialize database
    db.init_app(app)

    # Initialize Flask-Migrate
    migrate.init_app(app, db)

    # CORS Configuration
    cors.init_app(app,
                  origins=app.config.get("CORS_ORIGINS", []),
                  supports_credentials=True,
                  allow_headers=["Content-Type", "Authorization"],
                  methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
                  expose_headers=["Content-Type", "Authorization", "Content-Disposition"])

    register_routes(app)
    register_error_handlers(app)

    # Make sure every model is registered on the metadata
    from fittrack import models  # noqa: F401

    return app
