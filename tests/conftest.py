import pytest

from diabetes_api import create_app
from diabetes_api.auth.tokens import issue_token
from diabetes_api.config import TestConfig
from diabetes_api.extensions import db
from diabetes_api.models import Admin


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def seeded_admin(app):
    with app.app_context():
        admin = Admin(name='dokter', sandi='246810')
        db.session.add(admin)
        db.session.commit()
        return admin.id


@pytest.fixture()
def token():
    return issue_token(1, 'dokter')


@pytest.fixture()
def auth_headers(token):
    return {'Authorization': f'Bearer {token}'}
