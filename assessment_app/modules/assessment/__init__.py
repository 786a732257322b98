"""Assessment module: serves the sanitized question bank and grades submissions."""

from flask import Blueprint

assessment_bp = Blueprint('assessment', __name__)

from . import routes  # noqa: E402,F401
