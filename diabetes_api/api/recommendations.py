"""
Recommendation Routes
"""

from flask import jsonify

from diabetes_api.api import api_bp, crud
from diabetes_api.models import Recommendation
from diabetes_api.utils import request_payload, require_fields


@api_bp.route('/recommendations', methods=['GET'])
def list_recommendations():
    recommendations = crud.list_rows(Recommendation.query.order_by(Recommendation.id), 'recommendations')
    return jsonify({'success': True, 'data': [r.to_dict() for r in recommendations]})


@api_bp.route('/recommendations/<int:recommendation_id>', methods=['GET'])
def get_recommendation(recommendation_id):
    recommendation = crud.get_or_404(Recommendation, recommendation_id, 'Recommendation')
    return jsonify({'success': True, 'data': recommendation.to_dict()})


@api_bp.route('/recommendations', methods=['POST'])
def create_recommendation():
    payload = require_fields(request_payload(), ('judul',), 'Recommendation title is required')
    recommendation = crud.create(Recommendation, payload, 'Recommendation')
    return jsonify({
        'success': True,
        'id': recommendation.id,
        'message': 'Recommendation created successfully',
    })


@api_bp.route('/recommendations/<int:recommendation_id>', methods=['PUT'])
def update_recommendation(recommendation_id):
    crud.update(Recommendation, recommendation_id, request_payload(), 'Recommendation')
    return jsonify({'success': True, 'message': 'Recommendation updated successfully'})


@api_bp.route('/recommendations/<int:recommendation_id>', methods=['DELETE'])
def delete_recommendation(recommendation_id):
    crud.delete(Recommendation, recommendation_id, 'Recommendation')
    return jsonify({'success': True, 'message': 'Recommendation deleted successfully'})
