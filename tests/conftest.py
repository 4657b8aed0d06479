import itertools

import pytest

from eventhub import create_app
from eventhub.extensions import db
from eventhub.models import User
from eventhub.repositories import UserRepository

TEST_CONFIG = {
    "TESTING": True,
    "SQLALCHEMY_DATABASE_URI": "sqlite://",
    "JWT_SECRET_KEY": "test-secret-key-long-enough-for-hmac-sha256",
    "RATELIMIT_ENABLED": False,
    "MAIL_SUPPRESS_SEND": True,
}

_emails = itertools.count(1)


@pytest.fixture
def app():
    app = create_app(TEST_CONFIG)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(client):
    """Sign a user up through the API and return its credentials."""

    def _make_user(email=None, password="pw1", name="Test User", **extra):
        email = email or f"user{next(_emails)}@x.com"
        payload = {"name": name, "email": email, "password": password, **extra}
        response = client.post("/registerUser", json=payload)
        assert response.status_code == 201, response.get_json()
        return {"id": response.get_json()["userId"], "email": email, "password": password}

    return _make_user


@pytest.fixture
def login(client):
    def _login(user):
        response = client.post(
            "/login", json={"email": user["email"], "password": user["password"]}
        )
        assert response.status_code == 200, response.get_json()
        return response.get_json()["token"]

    return _login


@pytest.fixture
def auth_headers(make_user, login):
    """Factory returning (user, headers) for a freshly signed-up user."""

    def _auth_headers(user=None):
        user = user or make_user()
        return user, {"Authorization": f"Bearer {login(user)}"}

    return _auth_headers


@pytest.fixture
def admin(make_user):
    user = make_user(email="admin@x.com", password="admin-pw", name="Admin")
    UserRepository.make_admin(db.session.get(User, user["id"]))
    return user


@pytest.fixture
def admin_headers(admin, login):
    return {"Authorization": f"Bearer {login(admin)}"}


@pytest.fixture
def make_event(client, admin_headers):
    def _make_event(**overrides):
        payload = {
            "title": "Demo",
            "date": "2030-06-01T18:00:00",
            "location": "Main Hall",
            "description": "A demo event",
            "maxAttendees": 10,
            "eventStatus": "upcoming",
        }
        payload.update(overrides)
        response = client.post("/createEvent", json=payload, headers=admin_headers)
        assert response.status_code == 201, response.get_json()
        return response.get_json()["eventId"]

    return _make_event


@pytest.fixture
def file_app(tmp_path):
    """An app on a file-backed SQLite database, so each thread gets its own connection."""
    app = create_app(
        {**TEST_CONFIG, "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'eventhub.db'}"}
    )
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.drop_all()
        db.engine.dispose()
