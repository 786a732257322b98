"""
Error Handlers for the assessment app

Provides:
- Custom exception classes
- Consistent error response format
- Flask error handlers
"""

from flask import jsonify, request, current_app
from typing import Optional, Dict, Any


class AssessmentError(Exception):
    """Base exception class for the assessment server."""

    def __init__(
        self,
        message: str,
        code: str = 'UNKNOWN_ERROR',
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert error to dictionary for JSON response."""
        return {
            'success': False,
            'message': self.message,
            'code': self.code,
            'details': self.details
        }


class QuestionSourceLoadError(AssessmentError):
    """The canonical question bank is missing or malformed."""

    def __init__(self, message: str, source: str = None, position: int = None):
        details = {}
        if source:
            details['source'] = source
        if position is not None:
            details['position'] = position
        super().__init__(
            message=message,
            code='QUESTION_SOURCE_ERROR',
            status_code=500,
            details=details
        )
        self.source = source
        self.position = position


def error_response(
    message: str,
    code: str = 'ERROR',
    status_code: int = 400,
    details: Dict = None
) -> tuple:
    """Create a standardized error response."""
    response = {
        'success': False,
        'message': message,
        'code': code
    }
    if details:
        response['details'] = details

    return jsonify(response), status_code


def register_error_handlers(app):
    """Register error handlers with Flask app."""

    @app.errorhandler(AssessmentError)
    def handle_assessment_error(error):
        current_app.logger.error(f"{error.code}: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(404)
    def handle_not_found(error):
        if request.path.startswith('/api/'):
            return error_response('Endpoint not found', 'NOT_FOUND', 404)
        return error

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        if request.path.startswith('/api/'):
            return error_response('Method not allowed', 'METHOD_NOT_ALLOWED', 405)
        return error

    @app.errorhandler(413)
    def handle_payload_too_large(error):
        current_app.logger.warning(f"Rejected oversized request to {request.path}")
        if request.path.startswith('/api/'):
            return error_response('Request body too large', 'PAYLOAD_TOO_LARGE', 413)
        return error

    @app.errorhandler(500)
    def handle_internal_error(error):
        current_app.logger.exception('Internal server error')
        if request.path.startswith('/api/'):
            return error_response('Internal server error', 'SERVER_ERROR', 500)
        return error
