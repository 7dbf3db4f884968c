"""
Symptom Models
"""

from diabetes_api.extensions import db
from diabetes_api.models.base import SerializerMixin


class Symptom(SerializerMixin, db.Model):
    """Symptom in the screening catalogue"""
    __tablename__ = 'symptoms'

    writable_fields = ('kode_gejala', 'nama_gejala', 'deskripsi', 'tingkat_keparahan', 'bobot')

    id = db.Column(db.Integer, primary_key=True)
    kode_gejala = db.Column(db.String(20), nullable=False)
    nama_gejala = db.Column(db.String(150), nullable=False)
    deskripsi = db.Column(db.Text)
    tingkat_keparahan = db.Column(db.String(50))
    bobot = db.Column(db.Float)  # weight in the risk score

    def __repr__(self):
        return f'<Symptom {self.kode_gejala}>'


class UserSymptom(SerializerMixin, db.Model):
    """Symptom reported by a user"""
    __tablename__ = 'user_symptoms'

    writable_fields = ('user_id', 'symptom_id')

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    symptom_id = db.Column(db.Integer, db.ForeignKey('symptoms.id'), nullable=False)
    created_at = db.Column(db.DateTime, default=db.func.current_timestamp())

    def __repr__(self):
        return f'<UserSymptom user:{self.user_id} symptom:{self.symptom_id}>'
