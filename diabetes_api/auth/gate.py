"""
Auth Gate

Flask-Login resolves ``current_user`` from the ``Authorization: Bearer``
header through ``load_admin_from_request``. Gated views either use the
``token_required`` decorator or live under one of ``PROTECTED_PREFIXES``,
which ``guard_protected_paths`` checks for every request.
"""

import logging
from functools import wraps

from flask import current_app, g, request
from flask_login import UserMixin, current_user

from diabetes_api.auth.tokens import decode_token
from diabetes_api.errors import AuthError
from diabetes_api.extensions import login_manager

logger = logging.getLogger(__name__)

TOKEN_NOT_FOUND = 'Token not found. Please log in again.'
TOKEN_INVALID = 'Token is invalid or has expired. Please log in again.'


class AdminSession(UserMixin):
    """Request-scoped view of a decoded session claim."""

    def __init__(self, claim):
        self.claim = claim

    def get_id(self):
        return str(self.claim.user_id)

    @property
    def username(self):
        return self.claim.username

    @property
    def role(self):
        return self.claim.role

    def to_dict(self):
        return self.claim.to_dict()


def bearer_token(header):
    """Token part of a ``Bearer <token>`` header, or None."""
    if not header or not header.startswith('Bearer '):
        return None
    return header[len('Bearer '):].strip() or None


def decode_request_token(token):
    config = current_app.config
    secret_key = config['SECRET_KEY'] if config.get('TOKEN_SIGNING') else None
    return decode_token(token, secret_key=secret_key, max_age_ms=config['TOKEN_MAX_AGE_MS'])


@login_manager.request_loader
def load_admin_from_request(req):
    token = bearer_token(req.headers.get('Authorization'))
    if token is None:
        g.auth_failure = TOKEN_NOT_FOUND
        return None

    claim = decode_request_token(token)
    if claim is None:
        logger.debug('Rejected bearer token on %s %s', req.method, req.path)
        g.auth_failure = TOKEN_INVALID
        return None
    return AdminSession(claim)


@login_manager.unauthorized_handler
def reject_request():
    raise AuthError(g.get('auth_failure', TOKEN_NOT_FOUND))


def require_token():
    """``before_request`` hook: stop the request unless the token is valid."""
    if not current_user.is_authenticated:
        return login_manager.unauthorized()
    return None


PROTECTED_PREFIXES = (
    '/api/users',
    '/api/symptoms',
    '/api/recommendations',
    '/api/diagnoses',
    '/api/user_symptoms',
)


def is_protected_path(path):
    """True for a resource prefix or anything below it."""
    return any(path == prefix or path.startswith(prefix + '/') for prefix in PROTECTED_PREFIXES)


def guard_protected_paths():
    """App-level ``before_request`` hook.

    Runs before routing errors are raised, so unknown ids and methods under a
    resource prefix still answer 401 to callers without a valid token.
    """
    if is_protected_path(request.path):
        return require_token()
    return None


def token_required(f):
    """Decorator to ensure the request carries a valid bearer token."""
    @wraps(f)
    def wrapper(*args, **kwargs):
        rejection = require_token()
        if rejection is not None:
            return rejection
        return f(*args, **kwargs)
    return wrapper
