"""
Admin Credential Validation

Usernames and six digit secrets are compared as plain text against the
``admin`` table. When no row matches, the configured demo credentials are
tried before the login is refused.
"""

import logging
import re
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError

from diabetes_api.errors import InputValidationError, StoreError
from diabetes_api.extensions import db
from diabetes_api.models import Admin
from diabetes_api.store import describe_store_error

logger = logging.getLogger(__name__)

SECRET_PATTERN = re.compile(r'[0-9]{6}')
INVALID_INPUT_MESSAGE = 'Username is required and password must be 6 digits'


@dataclass(frozen=True)
class AdminIdentity:
    id: int
    name: str
    simulated: bool = False


def _as_secret(password):
    # JSON clients sometimes send the secret as a number
    if isinstance(password, int) and not isinstance(password, bool):
        return str(password)
    return password


def validate_input(username, password):
    """True when the username is present and the password is six digits."""
    if not username or not isinstance(username, str):
        return False
    password = _as_secret(password)
    if not password or not isinstance(password, str):
        return False
    return SECRET_PATTERN.fullmatch(password) is not None


def _matches_demo(username, password, demo_credentials):
    return any(
        username == demo_user and password == demo_secret
        for demo_user, demo_secret in demo_credentials
    )


def _store_failure(error):
    detail = describe_store_error(error)
    lowered = detail.lower()
    if 'no such table' in lowered or "doesn't exist" in lowered:
        return StoreError('Admin table not found in database', field='message', cause=error)
    if 'access denied' in lowered:
        return StoreError('Database access denied', field='message', cause=error)
    return StoreError(f'Server error: {detail}', field='message', cause=error)


def find_admin(username, password):
    try:
        return Admin.query.filter_by(name=username, sandi=password).first()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Admin lookup failed')
        raise _store_failure(e) from e


def authenticate(username, password, demo_credentials=()):
    """Check a login attempt.

    Raises InputValidationError for a malformed attempt (before any store
    access) and StoreError when the lookup fails. Returns the matching
    AdminIdentity, or None for wrong credentials.
    """
    if not validate_input(username, password):
        raise InputValidationError(INVALID_INPUT_MESSAGE, field='message')
    password = _as_secret(password)

    admin = find_admin(username, password)
    if admin is not None:
        logger.info('Login successful for admin: %s', admin.name)
        return AdminIdentity(id=admin.id or 0, name=admin.name)

    logger.info('No admin record for %s, checking demo credentials', username)
    if _matches_demo(username, password, demo_credentials):
        logger.warning('Demo credentials accepted for %s', username)
        return AdminIdentity(id=0, name=username, simulated=True)

    logger.info('Invalid credentials for %s', username)
    return None
