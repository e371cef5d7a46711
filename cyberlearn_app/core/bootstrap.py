"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

from flask import Flask

from .error_handlers import register_error_handlers
from .extensions import db
from .logging_config import setup_logging
from .module_registry import register_default_modules


def configure_logging(app: Flask) -> None:
    """Route ``app.logger`` through the package logging setup."""

    setup_logging(
        app,
        log_level=app.config.get("LOG_LEVEL", "INFO"),
        log_dir=None if app.testing else app.config.get("LOG_DIR"),
        json_format=app.config.get("LOG_JSON", False),
    )
    app.logger.propagate = False
    app.logger.info("Flask app logger configured successfully.")


def register_extensions(app: Flask) -> None:
    """Initialize shared extensions with the Flask app instance."""

    db.init_app(app)


def register_blueprints(app: Flask) -> None:
    """Register all default blueprints with the app."""

    register_default_modules(app)


def register_errors(app: Flask) -> None:
    """Attach JSON error handlers."""

    register_error_handlers(app)


def initialize_database(app: Flask) -> None:
    """Create database tables and seed the starter course when empty."""

    from ..models import Lesson, Question  # noqa: F401  (table metadata)

    db.create_all()
    app.logger.info("Database tables created/verified successfully")

    if app.config.get("SEED_CONTENT", True):
        from .content_seeds import seed_content

        seed_content()
    else:
        app.logger.debug("SEED_CONTENT disabled, skipping starter content.")
