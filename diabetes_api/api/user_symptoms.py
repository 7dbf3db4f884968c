"""
User Symptom Routes

Links between users and the symptoms they reported.
"""

from flask import jsonify

from diabetes_api.api import api_bp, crud
from diabetes_api.extensions import db
from diabetes_api.models import Symptom, UserSymptom
from diabetes_api.utils import request_payload, require_fields

MISSING_IDS = 'User ID and Symptom ID are required'


@api_bp.route('/user_symptoms', methods=['GET'])
def list_user_symptoms():
    rows = crud.list_rows(UserSymptom.query.order_by(UserSymptom.id), 'user symptoms')
    return jsonify({'success': True, 'data': [r.to_dict() for r in rows]})


@api_bp.route('/user_symptoms/user/<int:user_id>', methods=['GET'])
def list_symptoms_for_user(user_id):
    """Symptoms of one user, joined with the symptom catalogue."""
    query = (
        db.session.query(
            UserSymptom,
            Symptom.nama_gejala,
            Symptom.kode_gejala,
            Symptom.tingkat_keparahan,
            Symptom.bobot,
        )
        .outerjoin(Symptom, UserSymptom.symptom_id == Symptom.id)
        .filter(UserSymptom.user_id == user_id)
        .order_by(UserSymptom.created_at.desc(), UserSymptom.id.desc())
    )
    data = []
    for link, nama_gejala, kode_gejala, tingkat_keparahan, bobot in crud.list_rows(query, 'user symptoms'):
        item = link.to_dict()
        item.update(
            nama_gejala=nama_gejala,
            kode_gejala=kode_gejala,
            tingkat_keparahan=tingkat_keparahan,
            bobot=bobot,
        )
        data.append(item)
    return jsonify({'success': True, 'data': data})


@api_bp.route('/user_symptoms/<int:link_id>', methods=['GET'])
def get_user_symptom(link_id):
    link = crud.get_or_404(UserSymptom, link_id, 'User symptom')
    return jsonify({'success': True, 'data': link.to_dict()})


@api_bp.route('/user_symptoms', methods=['POST'])
def create_user_symptom():
    payload = require_fields(request_payload(), ('user_id', 'symptom_id'), MISSING_IDS)
    link = crud.create(UserSymptom, payload, 'User symptom')
    return jsonify({
        'success': True,
        'id': link.id,
        'message': 'User symptom created successfully',
    })


@api_bp.route('/user_symptoms/<int:link_id>', methods=['PUT'])
def update_user_symptom(link_id):
    crud.update(UserSymptom, link_id, request_payload(), 'User symptom')
    return jsonify({'success': True, 'message': 'User symptom updated successfully'})


@api_bp.route('/user_symptoms/<int:link_id>', methods=['DELETE'])
def delete_user_symptom(link_id):
    crud.delete(UserSymptom, link_id, 'User symptom')
    return jsonify({'success': True, 'message': 'User symptom deleted successfully'})
