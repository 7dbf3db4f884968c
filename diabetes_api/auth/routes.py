"""
Auth Routes

Token based admin login. Logout is acknowledged only: tokens live on the
client and expire on their own.
"""

import logging

from flask import current_app, jsonify
from flask_login import current_user

from diabetes_api.auth import auth_bp
from diabetes_api.auth.credentials import authenticate
from diabetes_api.auth.gate import token_required
from diabetes_api.auth.tokens import issue_token
from diabetes_api.errors import AuthError
from diabetes_api.utils import request_payload

logger = logging.getLogger(__name__)


def _demo_credentials():
    if not current_app.config.get('DEMO_LOGIN_ENABLED'):
        return ()
    return current_app.config.get('DEMO_CREDENTIALS', ())


def _signing_key():
    if current_app.config.get('TOKEN_SIGNING'):
        return current_app.config['SECRET_KEY']
    return None


@auth_bp.route('/login', methods=['GET'])
def login_help():
    """Usage hint for clients that GET the login URL."""
    return jsonify({
        'message': 'Login endpoint',
        'note': 'Use POST method to login',
        'example': {
            'method': 'POST',
            'url': '/api/auth/login',
            'headers': {'Content-Type': 'application/json'},
            'body': {'username': 'admin', 'password': 'your_password'},
        },
        'available_methods': ['POST'],
    })


@auth_bp.route('/login', methods=['POST'])
def login():
    """Admin login route"""
    payload = request_payload()
    username = payload.get('username')
    password = payload.get('password')

    admin = authenticate(username, password, demo_credentials=_demo_credentials())
    if admin is None:
        raise AuthError('Invalid username or password')

    token = issue_token(admin.id, admin.name, secret_key=_signing_key())
    message = 'Login successful (simulated)' if admin.simulated else 'Login successful'
    return jsonify({
        'success': True,
        'message': message,
        'user': {
            'id': admin.id,
            'name': admin.name,
            'role': 'admin',
        },
        'token': token,
    })


@auth_bp.route('/me', methods=['GET'])
@token_required
def me():
    """Current admin as decoded from the token"""
    return jsonify({
        'success': True,
        'user': current_user.to_dict(),
        'message': 'Session valid',
    })


@auth_bp.route('/logout', methods=['POST'])
@token_required
def logout():
    """Admin logout route"""
    logger.info('Logout requested by %s', current_user.username)
    return jsonify({
        'success': True,
        'message': 'Logout successful',
    })
