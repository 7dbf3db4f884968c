import pytest
from sqlalchemy import text

from diabetes_api.auth import credentials
from diabetes_api.auth.credentials import AdminIdentity, authenticate, validate_input
from diabetes_api.config import DEFAULT_DEMO_CREDENTIALS
from diabetes_api.errors import InputValidationError, StoreError
from diabetes_api.extensions import db


@pytest.mark.parametrize('username,password', [
    ('admin', '123456'),
    ('admin', 123456),
    ('x', '000000'),
])
def test_validate_input_accepts_six_digits(username, password):
    assert validate_input(username, password)


@pytest.mark.parametrize('username,password', [
    ('', '123456'),
    (None, '123456'),
    ('admin', ''),
    ('admin', None),
    ('admin', '12345'),
    ('admin', '1234567'),
    ('admin', '12345a'),
    ('admin', '123456\n'),
    ('admin', ' 123456'),
    ('admin', '١٢٣٤٥٦'),  # non-ASCII digits
    ('admin', True),
    ('admin', 0),
])
def test_validate_input_rejects_bad_shapes(username, password):
    assert not validate_input(username, password)


def test_bad_shape_rejected_before_store_lookup(app, monkeypatch):
    def fail_lookup(username, password):
        raise AssertionError('store must not be queried')

    monkeypatch.setattr(credentials, 'find_admin', fail_lookup)
    with app.app_context():
        with pytest.raises(InputValidationError) as excinfo:
            authenticate('admin', 'abcdef', demo_credentials=DEFAULT_DEMO_CREDENTIALS)
    assert excinfo.value.status_code == 400


def test_stored_admin_authenticates(app, seeded_admin):
    with app.app_context():
        identity = authenticate('dokter', '246810')
    assert identity == AdminIdentity(id=seeded_admin, name='dokter')


def test_wrong_secret_for_stored_admin_fails(app, seeded_admin):
    with app.app_context():
        assert authenticate('dokter', '111111', demo_credentials=DEFAULT_DEMO_CREDENTIALS) is None


@pytest.mark.parametrize('username,password', DEFAULT_DEMO_CREDENTIALS)
def test_demo_credentials_authenticate_as_id_zero(app, username, password):
    with app.app_context():
        identity = authenticate(username, password, demo_credentials=DEFAULT_DEMO_CREDENTIALS)
    assert identity == AdminIdentity(id=0, name=username, simulated=True)


@pytest.mark.parametrize('username,password', [
    ('admin', '654321'),
    ('superadmin', '123456'),
    ('guest', '000000'),
])
def test_other_pairs_fail_without_db_match(app, username, password):
    with app.app_context():
        assert authenticate(username, password, demo_credentials=DEFAULT_DEMO_CREDENTIALS) is None


def test_demo_credentials_can_be_disabled(app):
    with app.app_context():
        assert authenticate('admin', '123456', demo_credentials=()) is None


def test_missing_admin_table_is_a_store_error(app):
    with app.app_context():
        db.session.execute(text('DROP TABLE admin'))
        db.session.commit()
        with pytest.raises(StoreError) as excinfo:
            authenticate('admin', '123456', demo_credentials=DEFAULT_DEMO_CREDENTIALS)
    assert excinfo.value.message == 'Admin table not found in database'
