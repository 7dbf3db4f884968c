"""
Flask Extensions

Admin sessions are stateless: Flask-Login resolves ``current_user`` from the
bearer token on every request (see auth.gate) and never from a cookie.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance shared by the models and the store helpers
db = SQLAlchemy()

# Token-only login manager: no login view to redirect to, no session
# fingerprinting, since nothing is ever written to the Flask session.
login_manager = LoginManager()
login_manager.login_view = None
login_manager.session_protection = None
