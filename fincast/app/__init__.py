"""Application factory and app-wide configuration."""

from typing import Optional

import structlog
from flask import Flask
from flask_cors import CORS

from fincast.app.api.routes import api_bp
from fincast.config import Settings, get_settings
from fincast.logging_config import configure_logging


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_json)

    app = Flask(__name__)
    app.config["SETTINGS"] = settings

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")

    structlog.get_logger(__name__).info(
        "app_created",
        cors_origins=settings.cors_origins,
        horizons=settings.projection_horizons,
    )
    return app
