"""
Recommendation Model
"""

from diabetes_api.extensions import db
from diabetes_api.models.base import SerializerMixin


class Recommendation(SerializerMixin, db.Model):
    """Advice shown for a given risk level"""
    __tablename__ = 'recommendations'

    writable_fields = ('kategori', 'judul', 'deskripsi', 'untuk_tingkat_risiko')

    id = db.Column(db.Integer, primary_key=True)
    kategori = db.Column(db.String(100))
    judul = db.Column(db.String(200), nullable=False)
    deskripsi = db.Column(db.Text)
    untuk_tingkat_risiko = db.Column(db.String(50))

    def __repr__(self):
        return f'<Recommendation {self.judul}>'
