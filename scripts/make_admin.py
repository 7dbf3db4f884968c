"""Create an admin record, or reset the secret of an existing one.

Usage: python scripts/make_admin.py <name> <six-digit-secret>
"""
import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from diabetes_api import create_app
from diabetes_api.auth.credentials import validate_input
from diabetes_api.extensions import db
from diabetes_api.models import Admin


def make_admin(app, name, secret):
    if not validate_input(name, secret):
        raise ValueError('Name is required and the secret must be 6 digits')

    with app.app_context():
        admin = Admin.query.filter_by(name=name).first()

        if not admin:
            admin = Admin(name=name, sandi=secret)
            db.session.add(admin)
            created = True
        else:
            admin.sandi = secret
            created = False

        db.session.commit()
        return admin.id, created


if __name__ == '__main__':
    if len(sys.argv) != 3:
        print(__doc__)
        sys.exit(2)

    try:
        admin_id, created = make_admin(create_app(), sys.argv[1], sys.argv[2])
    except ValueError as e:
        print(e)
        sys.exit(1)

    if created:
        print(f"New admin created with id {admin_id}")
    else:
        print(f"Existing admin {admin_id} updated")
