"""
Auth Blueprint

Admin login issues a stateless bearer token; every other admin call presents
it in the Authorization header.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from diabetes_api.auth import routes  # noqa: E402, F401
