"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

import logging
from typing import Callable

from flask import Flask

from .error_handlers import register_error_handlers
from .extensions import csrf_protect, db, login_manager
from .logging_config import setup_logging
from .module_registry import register_default_modules


def configure_logging(app: Flask) -> None:
    """Configure application logging; file logging is enabled by ``LOG_DIR``."""

    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    app.logger.setLevel(level)

    if not app.logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        app.logger.addHandler(handler)
        app.logger.propagate = False

    if app.config.get("LOG_DIR"):
        setup_logging(app)

    app.logger.info("Flask app logger configured successfully.")


def register_extensions(app: Flask) -> None:
    """Initialize shared extensions with the Flask app instance."""

    db.init_app(app)
    login_manager.init_app(app)
    csrf_protect.init_app(app)
    register_error_handlers(app)


def register_context_processors(app: Flask) -> None:
    """Register the learner loader and global template context."""

    @login_manager.user_loader
    def load_user(user_id: str):
        from ..modules.auth.models import Learner

        return Learner.load(user_id)

    @app.context_processor
    def inject_template_globals() -> dict[str, object]:
        return {"app_name": "PaperDrill", **make_template_helpers()}


def register_blueprints(app: Flask) -> None:
    """Register all default blueprints and the access gate with the app."""

    from ..modules.auth.gate import register_access_gate

    register_default_modules(app)
    register_access_gate(app)


def initialize_database(app: Flask) -> None:
    """Create local store tables when the SQL backend is active."""

    if app.config.get("STORE_BACKEND", "sql") != "sql":
        app.logger.info("Store backend is %s, skipping local table creation.", app.config["STORE_BACKEND"])
        return

    # Register model metadata before create_all
    from ..store import sql_store  # noqa: F401

    db.create_all()
    app.logger.info("Local record store tables ready.")


def make_template_helpers() -> dict[str, Callable[..., str]]:
    """Small helpers shared by the catalog and exercise templates."""

    def plural(count: int, word: str) -> str:
        return f"{count} {word}" if count == 1 else f"{count} {word}s"

    return {"plural": plural}
