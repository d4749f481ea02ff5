"""Shared test fixtures for contactbook."""

import pytest

from contactbook.config import settings
from contactbook.db import Database
from contactbook.main import create_app


@pytest.fixture(autouse=True)
def fast_bcrypt():
    """Use the minimum bcrypt work factor so hashing doesn't dominate test time."""
    original = settings.bcrypt_work_factor
    settings.bcrypt_work_factor = 4
    yield
    settings.bcrypt_work_factor = original


@pytest.fixture
def database(tmp_path):
    """Fresh SQLite database with schema applied, one per test."""
    database = Database(str(tmp_path / "contactbook.db"))
    database.init()
    return database


@pytest.fixture
def core(database):
    """A Core on the test database; commits when the test finishes."""
    with database.core() as core:
        yield core


@pytest.fixture
def app(database):
    """Flask app serving from the test database."""
    app = create_app(database)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    """Create test client for API testing."""
    with app.test_client() as client:
        yield client


@pytest.fixture
def login(client):
    """Factory: register (if needed) and log in a user, returning auth headers.

    Usage:
        headers = login("alice")
    """
    def _login(username: str, password: str = "TestPass123") -> dict:
        client.post("/api/register", json={"username": username, "password": password})
        response = client.post("/api/login", json={"username": username, "password": password})
        assert response.status_code == 200
        return {"Authorization": f"Bearer {response.get_json()['token']}"}

    return _login


@pytest.fixture
def auth_headers(login):
    """Authorization headers for user 'testuser'."""
    return login("testuser")
