# tests/conftest.py
import pytest

from config import TestingConfig
from homeapi.app import create_app
from homeapi.db import db
from homeapi.models import User


@pytest.fixture(scope="function")
def app():
    """Cria uma app limpa por teste com DB em memória (create_app já cria as tabelas)."""
    application = create_app(TestingConfig)
    yield application  # Disponibiliza a app para os testes
    with application.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture(scope="function")
def app_ctx(app):
    """Contexto de aplicação para testes que usam repositórios e serviços diretamente."""
    with app.app_context():
        yield app
        db.session.remove()


@pytest.fixture(scope="function")
def client(app):
    """Cliente de teste isolado por teste."""
    return app.test_client()


@pytest.fixture(scope="function")
def runner(app):
    return app.test_cli_runner()


def _add_user(app, username, name, password):
    with app.app_context():
        user = User(username=username, name=name)
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        return {'id': user.id, 'username': username, 'name': name, 'password': password}


@pytest.fixture(scope="function")
def new_user(app):
    return _add_user(app, "testuser", "Test User", "testpassword")


@pytest.fixture(scope="function")
def other_user(app):
    return _add_user(app, "otheruser", "Other User", "otherpassword")


def _login(client, username, password):
    return client.post('/api/sessions', json={'username': username, 'password': password})


@pytest.fixture(scope="function")
def logged_in_client(client, new_user):
    response = _login(client, new_user['username'], new_user['password'])
    assert response.status_code == 200
    return client
