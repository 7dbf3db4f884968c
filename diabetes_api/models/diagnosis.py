"""
Diagnosis Model
"""

from diabetes_api.extensions import db
from diabetes_api.models.base import SerializerMixin


class Diagnosis(SerializerMixin, db.Model):
    """Risk assessment result for a user"""
    __tablename__ = 'diagnoses'

    # user_id is fixed once the diagnosis exists
    writable_fields = ('hasil_diagnosis', 'tingkat_risiko', 'skor')

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    hasil_diagnosis = db.Column(db.Text, nullable=False)
    tingkat_risiko = db.Column(db.String(50), nullable=False)
    skor = db.Column(db.Float, nullable=False)
    created_at = db.Column(db.DateTime, default=db.func.current_timestamp(), index=True)

    def __repr__(self):
        return f'<Diagnosis user:{self.user_id} risk:{self.tingkat_risiko}>'
