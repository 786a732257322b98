"""Application factory for the assessment app."""

from __future__ import annotations

from flask import Flask

from .config import Config
from .core.bootstrap import (
    configure_logging,
    initialize_question_bank,
    register_blueprints,
    register_event_handlers,
)

__all__ = ["create_app"]


def create_app(config_class: type[Config] = Config) -> Flask:
    """Create and configure a Flask application instance.

    Raises ``QuestionSourceLoadError`` when the question bank cannot be loaded,
    so a misconfigured server never starts serving.
    """

    app = Flask(__name__)
    app.config.from_object(config_class)

    configure_logging(app)
    initialize_question_bank(app)
    register_blueprints(app)
    register_event_handlers(app)

    return app
