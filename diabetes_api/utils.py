"""
Request helpers shared by the blueprints
"""

from flask import request

from diabetes_api.errors import InputValidationError


def request_payload():
    """JSON body of the request, falling back to form fields."""
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        return payload
    return request.form.to_dict()


def is_blank(value):
    return value is None or value == '' or value is False


def require_fields(payload, fields, message, allow_zero=()):
    """Raise InputValidationError unless every field in ``fields`` is set.

    Zero counts as missing, except for the names in ``allow_zero``.
    """
    for name in fields:
        value = payload.get(name)
        if is_blank(value):
            raise InputValidationError(message)
        if value == 0 and name not in allow_zero:
            raise InputValidationError(message)
    return payload
