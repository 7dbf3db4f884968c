"""
Diagnosis Routes
"""

from flask import jsonify

from diabetes_api.api import api_bp, crud
from diabetes_api.errors import NotFoundError
from diabetes_api.extensions import db
from diabetes_api.models import Diagnosis, User
from diabetes_api.utils import request_payload, require_fields

REQUIRED_FIELDS = ('user_id', 'hasil_diagnosis', 'tingkat_risiko', 'skor')
MISSING_FIELDS = 'All fields are required: user_id, hasil_diagnosis, tingkat_risiko, skor'


def _with_patient_name():
    return (
        db.session.query(Diagnosis, User.nama_lengkap)
        .outerjoin(User, Diagnosis.user_id == User.id)
    )


def _render(diagnosis, nama_lengkap):
    item = diagnosis.to_dict()
    item['nama_lengkap'] = nama_lengkap
    return item


@api_bp.route('/diagnoses', methods=['GET'])
def list_diagnoses():
    """All diagnoses with the patient's name, newest first."""
    query = _with_patient_name().order_by(Diagnosis.created_at.desc(), Diagnosis.id.desc())
    rows = crud.list_rows(query, 'diagnoses')
    return jsonify({'success': True, 'data': [_render(d, name) for d, name in rows]})


@api_bp.route('/diagnoses/<int:diagnosis_id>', methods=['GET'])
def get_diagnosis(diagnosis_id):
    rows = crud.list_rows(_with_patient_name().filter(Diagnosis.id == diagnosis_id), 'diagnosis')
    if not rows:
        raise NotFoundError('Diagnosis not found')
    diagnosis, name = rows[0]
    return jsonify({'success': True, 'data': _render(diagnosis, name)})


@api_bp.route('/diagnoses/user/<int:user_id>', methods=['GET'])
def list_diagnoses_for_user(user_id):
    query = (
        Diagnosis.query
        .filter_by(user_id=user_id)
        .order_by(Diagnosis.created_at.desc(), Diagnosis.id.desc())
    )
    rows = crud.list_rows(query, 'user diagnoses')
    return jsonify({'success': True, 'data': [d.to_dict() for d in rows]})


@api_bp.route('/diagnoses', methods=['POST'])
def create_diagnosis():
    payload = require_fields(request_payload(), REQUIRED_FIELDS, MISSING_FIELDS, allow_zero=('skor',))
    diagnosis = crud.create(Diagnosis, payload, 'Diagnosis', user_id=payload['user_id'])
    return jsonify({
        'success': True,
        'id': diagnosis.id,
        'user_id': payload['user_id'],
        'hasil_diagnosis': payload['hasil_diagnosis'],
        'tingkat_risiko': payload['tingkat_risiko'],
        'skor': payload['skor'],
        'message': 'Diagnosis created successfully',
    })


@api_bp.route('/diagnoses/<int:diagnosis_id>', methods=['PUT'])
def update_diagnosis(diagnosis_id):
    crud.update(Diagnosis, diagnosis_id, request_payload(), 'Diagnosis')
    return jsonify({'success': True, 'message': 'Diagnosis updated successfully'})


@api_bp.route('/diagnoses/<int:diagnosis_id>', methods=['DELETE'])
def delete_diagnosis(diagnosis_id):
    crud.delete(Diagnosis, diagnosis_id, 'Diagnosis')
    return jsonify({'success': True, 'message': 'Diagnosis deleted successfully'})
