"""
System Routes
"""

import logging
from datetime import datetime, timezone

from flask import current_app, jsonify

from diabetes_api import store
from diabetes_api.errors import StoreError
from diabetes_api.system import system_bp

logger = logging.getLogger(__name__)


def _timestamp():
    return datetime.now(timezone.utc).isoformat()


@system_bp.route('/')
def index():
    """Endpoint map for API consumers"""
    return jsonify({
        'message': 'Diabetes Management System API',
        'version': current_app.config['API_VERSION'],
        'timestamp': _timestamp(),
        'endpoints': {
            'auth': {
                'login': 'POST /api/auth/login',
                'me': 'GET /api/auth/me (requires token)',
                'logout': 'POST /api/auth/logout (requires token)',
            },
            'public': {
                'health': 'GET /api/health',
                'testDb': 'GET /api/test-db',
            },
            'protected': {
                'users': 'GET /api/users (requires token)',
                'symptoms': 'GET /api/symptoms (requires token)',
                'recommendations': 'GET /api/recommendations (requires token)',
                'diagnoses': 'GET /api/diagnoses (requires token)',
                'userSymptoms': 'GET /api/user_symptoms (requires token)',
            },
        },
        'note': 'Use Authorization: Bearer <token> header for protected endpoints',
    })


@system_bp.route('/api/health')
def health():
    return jsonify({
        'status': 'OK',
        'message': 'Diabetes API is running',
        'timestamp': _timestamp(),
        'version': current_app.config['API_VERSION'],
    })


@system_bp.route('/api/test-db')
def test_db():
    """Database connectivity probe."""
    try:
        result = store.ping()
    except StoreError as e:
        return jsonify({
            'success': False,
            'message': 'Database connection failed',
            'error': e.message,
        }), 500
    return jsonify({
        'success': True,
        'message': 'Database connection successful',
        'test': result,
    })
