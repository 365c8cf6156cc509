"""
Domain errors and their JSON rendering.

Every error raised on purpose is a ``PaperDrillError`` subclass carrying a
machine-readable ``code`` and an HTTP status. API clients always receive
``{"success": false, "error": <message>, "code": <code>}`` plus optional
``details``.
"""

from typing import Any, Dict, Optional

from flask import current_app, jsonify, request


class PaperDrillError(Exception):
    code = 'UNKNOWN_ERROR'
    status_code = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = {k: v for k, v in (details or {}).items() if v is not None}

    def to_dict(self) -> dict:
        payload = {'success': False, 'error': self.message, 'code': self.code}
        if self.details:
            payload['details'] = self.details
        return payload


class ValidationError(PaperDrillError):
    """Request body or exercise input rejected."""
    code = 'VALIDATION_ERROR'
    status_code = 400

    def __init__(self, message: str = 'Validation failed', errors: Optional[Dict] = None):
        super().__init__(message, {'errors': errors} if errors else None)


class AuthenticationError(PaperDrillError):
    code = 'UNAUTHORIZED'
    status_code = 401

    def __init__(self, message: str = 'Invalid password'):
        super().__init__(message)


class NotFoundError(PaperDrillError):
    code = 'NOT_FOUND'
    status_code = 404

    def __init__(self, message: str = 'Not found', resource: Optional[str] = None):
        super().__init__(message, {'resource': resource})


class InvalidTransitionError(PaperDrillError):
    """Exercise operation not allowed in the session's current phase."""
    code = 'INVALID_TRANSITION'
    status_code = 409

    def __init__(self, message: str, phase: Optional[str] = None):
        super().__init__(message, {'phase': phase})


class MalformedPayloadError(PaperDrillError):
    """A stored JSON column (stats, game_data) could not be decoded."""
    code = 'MALFORMED_PAYLOAD'
    status_code = 500

    def __init__(self, message: str = 'Malformed stored payload',
                 column: Optional[str] = None, row_id: Optional[str] = None):
        super().__init__(message, {'column': column, 'id': row_id or None})


class StoreError(PaperDrillError):
    """The record store backend failed."""
    code = 'STORE_ERROR'
    status_code = 502

    def __init__(self, message: str = 'Record store failure'):
        super().__init__(message)


class RowNotFoundError(StoreError):
    """No row carries the requested key; services translate it to ``NotFoundError``."""

    def __init__(self, table: str, key_value: str):
        super().__init__(f"No row with key {key_value!r} in {table}")
        self.table = table
        self.key_value = key_value


def _api_error(message: str, code: str, status_code: int):
    return jsonify({'success': False, 'error': message, 'code': code}), status_code


def register_error_handlers(app):

    @app.errorhandler(PaperDrillError)
    def handle_domain_error(error: PaperDrillError):
        log = current_app.logger.error if error.status_code >= 500 else current_app.logger.info
        log(f"{error.code} on {request.method} {request.path}: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(404)
    def handle_not_found(error):
        if request.path.startswith('/api/'):
            return _api_error('Endpoint not found', 'NOT_FOUND', 404)
        return error

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        if request.path.startswith('/api/'):
            return _api_error('Method not allowed', 'METHOD_NOT_ALLOWED', 405)
        return error

    @app.errorhandler(500)
    def handle_internal_error(error):
        current_app.logger.exception('Internal server error')
        if request.path.startswith('/api/'):
            return _api_error('Internal server error', 'SERVER_ERROR', 500)
        return error
