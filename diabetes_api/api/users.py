"""
User Routes
"""

import logging

from flask import jsonify
from flask_login import current_user

from diabetes_api.api import api_bp, crud
from diabetes_api.models import User
from diabetes_api.utils import request_payload, require_fields

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('nama_lengkap', 'usia', 'jenis_kelamin', 'riwayat_keluarga')


@api_bp.route('/users', methods=['GET'])
def list_users():
    """All users, newest first. Returned as a bare array."""
    logger.info('Fetching users by %s', current_user.username)
    users = crud.list_rows(User.query.order_by(User.created_at.desc(), User.id.desc()), 'users')
    return jsonify([u.to_dict() for u in users])


@api_bp.route('/users/<int:user_id>', methods=['GET'])
def get_user(user_id):
    user = crud.get_or_404(User, user_id, 'User')
    return jsonify({'success': True, 'data': user.to_dict()})


@api_bp.route('/users', methods=['POST'])
def create_user():
    payload = require_fields(request_payload(), REQUIRED_FIELDS, 'All fields are required')
    user = crud.create(User, payload, 'User')
    return jsonify({
        'success': True,
        'id': user.id,
        'message': 'User created successfully',
    })


@api_bp.route('/users/<int:user_id>', methods=['PUT'])
def update_user(user_id):
    crud.update(User, user_id, request_payload(), 'User')
    return jsonify({'success': True, 'message': 'User updated successfully'})


@api_bp.route('/users/<int:user_id>', methods=['DELETE'])
def delete_user(user_id):
    crud.delete(User, user_id, 'User')
    return jsonify({'success': True, 'message': 'User deleted successfully'})
