"""
Resource API Blueprint

Every URL under the resource prefixes sits behind the Auth Gate; the app
installs ``guard_protected_paths`` for that in ``create_app``.
"""

from flask import Blueprint

api_bp = Blueprint('api', __name__)

from diabetes_api.api import users, symptoms, recommendations, user_symptoms, diagnoses  # noqa: E402, F401
