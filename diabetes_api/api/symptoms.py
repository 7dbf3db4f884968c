"""
Symptom Routes
"""

from flask import jsonify

from diabetes_api.api import api_bp, crud
from diabetes_api.models import Symptom
from diabetes_api.utils import request_payload, require_fields


@api_bp.route('/symptoms', methods=['GET'])
def list_symptoms():
    symptoms = crud.list_rows(Symptom.query.order_by(Symptom.id), 'symptoms')
    return jsonify({'success': True, 'data': [s.to_dict() for s in symptoms]})


@api_bp.route('/symptoms/<int:symptom_id>', methods=['GET'])
def get_symptom(symptom_id):
    symptom = crud.get_or_404(Symptom, symptom_id, 'Symptom')
    return jsonify({'success': True, 'data': symptom.to_dict()})


@api_bp.route('/symptoms', methods=['POST'])
def create_symptom():
    payload = require_fields(request_payload(), ('kode_gejala', 'nama_gejala'),
                             'Symptom code and symptom name are required')
    symptom = crud.create(Symptom, payload, 'Symptom')
    return jsonify({
        'success': True,
        'id': symptom.id,
        'message': 'Symptom created successfully',
    })


@api_bp.route('/symptoms/<int:symptom_id>', methods=['PUT'])
def update_symptom(symptom_id):
    crud.update(Symptom, symptom_id, request_payload(), 'Symptom')
    return jsonify({'success': True, 'message': 'Symptom updated successfully'})


@api_bp.route('/symptoms/<int:symptom_id>', methods=['DELETE'])
def delete_symptom(symptom_id):
    crud.delete(Symptom, symptom_id, 'Symptom')
    return jsonify({'success': True, 'message': 'Symptom deleted successfully'})
