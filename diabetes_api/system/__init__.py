"""
System Blueprint

Ungated endpoints: API index, health check and database probe.
"""

from flask import Blueprint

system_bp = Blueprint('system', __name__)

from diabetes_api.system import routes  # noqa: E402, F401
