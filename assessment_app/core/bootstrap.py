"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

from flask import Flask

from .error_handlers import register_error_handlers
from .logging_config import setup_logging
from .module_registry import register_default_modules

QUESTION_BANK_EXTENSION = "question_bank"


def configure_logging(app: Flask) -> None:
    """Configure application logging.

    ``app.logger`` is the ``assessment_app`` package logger, so module loggers
    created with ``logging.getLogger(__name__)`` share its handlers.
    """

    setup_logging(
        log_level=app.config.get("LOG_LEVEL", "INFO"),
        log_dir=app.config.get("LOG_DIR"),
        json_format=app.config.get("LOG_JSON", False),
    )
    app.logger.info("Flask app logger configured successfully.")


def register_blueprints(app: Flask) -> None:
    """Register all default blueprints with the app."""

    register_default_modules(app)
    register_error_handlers(app)


def register_event_handlers(app: Flask) -> None:
    """Import the modules whose handlers subscribe to application signals."""

    from ..modules.notification import events  # noqa: F401

    app.logger.debug("Notification handlers connected to submission_graded.")


def initialize_question_bank(app: Flask) -> None:
    """Load the canonical question bank once; abort startup when it is unusable."""

    from ..modules.assessment.logics.question_bank import load_question_bank

    path = app.config["QUESTIONS_PATH"]
    bank = load_question_bank(path)
    app.extensions[QUESTION_BANK_EXTENSION] = bank
    app.logger.info("Loaded %d questions from %s", len(bank), path)
