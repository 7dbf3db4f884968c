"""
Admin Model
"""

from diabetes_api.extensions import db


class Admin(db.Model):
    """Administrator allowed to sign in to the console.

    Rows are created out of band (see scripts/make_admin.py). ``sandi`` is the
    six digit secret, stored and compared as plain text.
    """
    __tablename__ = 'admin'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False, index=True)
    sandi = db.Column(db.String(6), nullable=False)

    def __repr__(self):
        return f'<Admin {self.name}>'
