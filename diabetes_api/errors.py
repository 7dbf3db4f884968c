"""
API Errors

Typed request failures and the single error boundary that renders every
failure, expected or not, as a JSON body.
"""

import logging
import traceback

from flask import jsonify, request
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Base class for failures reported to the client.

    ``field`` is the body key the message is reported under: resource
    handlers use ``error`` while the auth endpoints use ``message``.
    """
    status_code = 500
    field = 'error'

    def __init__(self, message, field=None):
        super().__init__(message)
        self.message = message
        if field is not None:
            self.field = field

    def to_dict(self):
        return {'success': False, self.field: self.message}


class InputValidationError(APIError):
    """Missing or malformed request fields."""
    status_code = 400


class AuthError(APIError):
    """Missing, invalid or expired token, or bad credentials."""
    status_code = 401
    field = 'message'


class NotFoundError(APIError):
    """No entity with the requested id."""
    status_code = 404


class StoreError(APIError):
    """The underlying database call failed."""
    status_code = 500

    def __init__(self, message, field=None, cause=None):
        super().__init__(message, field=field)
        self.cause = cause


def register_error_handlers(app):
    """Install the JSON error handlers on ``app``."""

    @app.errorhandler(APIError)
    def handle_api_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        if error.code == 404:
            message = 'Check available endpoints at /'
            label = 'Endpoint not found'
        else:
            message = error.description
            label = error.name
        return jsonify({
            'success': False,
            'error': label,
            'path': request.full_path.rstrip('?'),
            'method': request.method,
            'message': message,
        }), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.exception('Unhandled error on %s %s', request.method, request.path)
        body = {
            'success': False,
            'message': str(error) or 'Internal Server Error',
        }
        if app.config.get('EXPOSE_STACK') or app.debug:
            body['stack'] = traceback.format_exception(type(error), error, error.__traceback__)
        return jsonify(body), 500
