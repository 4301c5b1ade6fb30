"""Application factory and app-wide configuration."""

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from growth_calculator.app.api.routes import api_bp
from growth_calculator.config import Settings, settings as default_settings
from growth_calculator.domain.series import SeriesStore

EXTENSION_KEY = "growth_calculator"

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(settings: Optional[Settings] = None, store: Optional[SeriesStore] = None) -> Flask:
    """Build the Flask app instance.

    Fund data is loaded once here and shared read-only by every request.
    Passing `store` skips loading from the configured paths.
    """
    settings = settings or default_settings
    configure_logging(settings.log_level)

    if store is None:
        store = SeriesStore.from_paths(settings.nav_data_path, settings.dividend_data_path)

    app = Flask(__name__)
    app.extensions[EXTENSION_KEY] = {"settings": settings, "store": store}

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info("%s %s ready", settings.app_name, settings.version)
    return app
