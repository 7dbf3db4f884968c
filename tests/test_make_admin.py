import importlib.util
import os

import pytest

from diabetes_api.models import Admin

SCRIPT = os.path.join(os.path.dirname(os.path.dirname(__file__)), 'scripts', 'make_admin.py')


@pytest.fixture()
def make_admin():
    spec = importlib.util.spec_from_file_location('make_admin', SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module.make_admin


def test_make_admin_creates_then_updates(app, client, make_admin):
    admin_id, created = make_admin(app, 'perawat', '135790')
    assert created

    same_id, created = make_admin(app, 'perawat', '864200')
    assert same_id == admin_id
    assert not created

    with app.app_context():
        assert Admin.query.filter_by(name='perawat').one().sandi == '864200'

    r = client.post('/api/auth/login', json={'username': 'perawat', 'password': '864200'})
    assert r.status_code == 200
    assert r.get_json()['user']['id'] == admin_id


def test_make_admin_rejects_bad_secret(app, make_admin):
    with pytest.raises(ValueError):
        make_admin(app, 'perawat', 'abc')
