import pytest

from scripthub import create_app


@pytest.fixture
def app(tmp_path):
    app = create_app({
        'TESTING': True,
        'SECRET_KEY': 'test-secret',
        'DB_FILE': str(tmp_path / 'db' / 'data.db'),
        'LEGACY_DB_FILE': str(tmp_path / 'data.db'),
        'ADMIN_USER': 'admin',
        'ADMIN_PASS': 'secret',
    })
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def catalog(app):
    return app.extensions['scripthub']['catalog']


@pytest.fixture
def admin_client(client):
    resp = client.post('/admin/login', data={'username': 'admin', 'password': 'secret'})
    assert resp.status_code == 302
    return client
