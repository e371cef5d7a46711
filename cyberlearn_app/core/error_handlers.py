"""
JSON error handling for the CyberLearn API.

Every failure leaves the server as
``{"success": false, "error": <label>, "message": <text>, "code": <CODE>}``
with the matching HTTP status. Services raise a ``CyberLearnError`` subclass
and the handlers below turn it into that body.
"""

from typing import Any, Dict, Optional

from flask import current_app, jsonify, request


class CyberLearnError(Exception):
    """Base class; subclasses only override the class attributes."""

    status_code = 500
    code = 'SERVER_ERROR'
    error_label = 'Internal server error'
    default_message = 'Something went wrong on the server'

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict:
        body = {
            'success': False,
            'error': self.error_label,
            'message': self.message,
            'code': self.code,
        }
        if self.details:
            body['details'] = self.details
        return body


class ValidationError(CyberLearnError):
    """Request body or path parameter rejected."""

    status_code = 400
    code = 'VALIDATION_ERROR'
    error_label = 'Bad request'
    default_message = 'Validation failed'


class AuthError(CyberLearnError):
    status_code = 401
    code = 'UNAUTHORIZED'
    error_label = 'Unauthorized'
    default_message = 'Invalid credentials'


class NotFoundError(CyberLearnError):
    status_code = 404
    code = 'NOT_FOUND'
    error_label = 'Not found'
    default_message = 'Resource not found'

    def __init__(self, message: Optional[str] = None, resource: Optional[str] = None):
        super().__init__(message, details={'resource': resource} if resource else None)


class StoreError(CyberLearnError):
    """A database statement failed; the session has already been rolled back."""

    code = 'STORE_ERROR'
    default_message = 'Database operation failed'


def error_response(
    message: str,
    error: str = 'Bad request',
    code: str = 'ERROR',
    status_code: int = 400,
    **extra
) -> tuple:
    """Build a JSON error body outside of the exception hierarchy."""
    body = {'success': False, 'error': error, 'message': message, 'code': code}
    body.update(extra)
    return jsonify(body), status_code


def register_error_handlers(app):
    """Attach the JSON handlers to ``app``."""

    @app.errorhandler(CyberLearnError)
    def handle_cyberlearn_error(error):
        log = current_app.logger.error if error.status_code >= 500 else current_app.logger.info
        log(f"{error.code} on {request.method} {request.path}: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(404)
    def handle_not_found(error):
        current_app.logger.info(f"404 - Route not found: {request.method} {request.path}")
        return error_response(
            'The requested resource was not found',
            error='Not found',
            code='NOT_FOUND',
            status_code=404,
            path=request.path,
        )

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        return error_response(
            f'Method {request.method} is not allowed for this resource',
            error='Method not allowed',
            code='METHOD_NOT_ALLOWED',
            status_code=405,
            path=request.path,
        )

    @app.errorhandler(500)
    def handle_internal_error(error):
        # Details stay in the log, never in the response
        current_app.logger.error('Unhandled server error', exc_info=getattr(error, 'original_exception', None))
        return error_response(
            CyberLearnError.default_message,
            error=CyberLearnError.error_label,
            code=CyberLearnError.code,
            status_code=500,
        )
