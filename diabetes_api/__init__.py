"""
Diabetes Risk Admin API - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask, request
from diabetes_api.extensions import db, login_manager
from diabetes_api.config import Config

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)

    # Register blueprints
    from diabetes_api.auth import auth_bp
    from diabetes_api.api import api_bp
    from diabetes_api.system import system_bp

    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(api_bp, url_prefix='/api')
    app.register_blueprint(system_bp)

    from diabetes_api.errors import register_error_handlers
    register_error_handlers(app)

    @app.before_request
    def log_request():
        logger.info('%s %s', request.method, request.path)

    from diabetes_api.auth.gate import guard_protected_paths
    app.before_request(guard_protected_paths)

    # Create database tables
    with app.app_context():
        uri = app.config['SQLALCHEMY_DATABASE_URI']
        if uri.startswith('sqlite:///') and ':memory:' not in uri:
            os.makedirs(os.path.dirname(uri[len('sqlite:///'):]) or '.', exist_ok=True)
        from diabetes_api import models  # noqa: F401
        db.create_all()

    return app
