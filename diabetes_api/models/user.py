"""
User Model
"""

from diabetes_api.extensions import db
from diabetes_api.models.base import SerializerMixin


class User(SerializerMixin, db.Model):
    """Patient screened for diabetes risk"""
    __tablename__ = 'users'

    writable_fields = ('nama_lengkap', 'usia', 'jenis_kelamin', 'riwayat_keluarga')

    id = db.Column(db.Integer, primary_key=True)
    nama_lengkap = db.Column(db.String(150), nullable=False)
    usia = db.Column(db.Integer, nullable=False)
    jenis_kelamin = db.Column(db.String(20), nullable=False)
    riwayat_keluarga = db.Column(db.String(50), nullable=False)  # family history of diabetes
    created_at = db.Column(db.DateTime, default=db.func.current_timestamp(), index=True)

    def __repr__(self):
        return f'<User {self.nama_lengkap}>'
