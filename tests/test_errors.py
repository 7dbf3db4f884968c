from sqlalchemy import text

from diabetes_api import create_app, store
from diabetes_api.config import TestConfig
from diabetes_api.errors import StoreError
from diabetes_api.extensions import db


def test_unknown_path_echoes_path_and_method(client):
    r = client.post('/api/nothing-here?x=1')
    assert r.status_code == 404
    assert r.get_json() == {
        'success': False,
        'error': 'Endpoint not found',
        'path': '/api/nothing-here?x=1',
        'method': 'POST',
        'message': 'Check available endpoints at /',
    }


def test_wrong_method_is_json(client):
    r = client.patch('/api/health')
    assert r.status_code == 405
    data = r.get_json()
    assert data['success'] is False
    assert data['method'] == 'PATCH'


def _app_with_failing_route(config_class):
    app = create_app(config_class)

    @app.route('/boom')
    def boom():
        raise RuntimeError('kaboom')

    return app


def test_unhandled_error_is_structured_500():
    client = _app_with_failing_route(TestConfig).test_client()
    r = client.get('/boom')
    assert r.status_code == 500
    assert r.get_json() == {'success': False, 'message': 'kaboom'}


def test_unhandled_error_exposes_stack_when_configured():
    class DevConfig(TestConfig):
        EXPOSE_STACK = True

    client = _app_with_failing_route(DevConfig).test_client()
    r = client.get('/boom')
    assert r.status_code == 500
    data = r.get_json()
    assert data['message'] == 'kaboom'
    assert any('RuntimeError' in line for line in data['stack'])


def test_store_failure_is_500_with_message(app, client, auth_headers):
    with app.app_context():
        db.session.execute(text('DROP TABLE users'))
        db.session.commit()

    r = client.get('/api/users', headers=auth_headers)
    assert r.status_code == 500
    data = r.get_json()
    assert data['success'] is False
    assert data['error'].startswith('Database error:')
    assert 'users' in data['error']


def test_health_is_public(client):
    r = client.get('/api/health')
    assert r.status_code == 200
    data = r.get_json()
    assert data['status'] == 'OK'
    assert data['version'] == '1.0.0'


def test_db_probe(client):
    r = client.get('/api/test-db')
    assert r.status_code == 200
    assert r.get_json() == {
        'success': True,
        'message': 'Database connection successful',
        'test': [{'test': 1}],
    }


def test_db_probe_failure(client, monkeypatch):
    def broken_ping():
        raise StoreError('Database error: connection refused')

    monkeypatch.setattr(store, 'ping', broken_ping)
    r = client.get('/api/test-db')
    assert r.status_code == 500
    assert r.get_json() == {
        'success': False,
        'message': 'Database connection failed',
        'error': 'Database error: connection refused',
    }


def test_index_lists_endpoints(client):
    r = client.get('/')
    assert r.status_code == 200
    data = r.get_json()
    assert data['endpoints']['auth']['login'] == 'POST /api/auth/login'
    assert 'Bearer' in data['note']
