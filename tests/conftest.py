import pytest

from app import create_app, db as _db
from models import User

TEST_CONFIG = {
    "TESTING": True,
    "SECRET_KEY": "test-secret-key",
    "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
    "WTF_CSRF_ENABLED": False,
    "SERVER_NAME": "localhost.localdomain",
    "APPLICATION_ROOT": "/",
    "PREFERRED_URL_SCHEME": "http",
    "GEMINI_API_KEY": "test-gemini-key",
    "DEEPSEEK_API_KEY": "test-deepseek-key",
    # Run background tasks in-process during testing
    "CELERY": {
        "broker_url": "memory://",
        "result_backend": "cache+memory://",
        "task_always_eager": True,
        "task_eager_propagates": False,
        "task_serializer": "json",
        "accept_content": ["json"],
        "result_serializer": "json",
    },
}


@pytest.fixture(scope="session")
def app():
    """
    Session-scoped test Flask application.
    Creates a Flask app instance configured for testing.
    """
    flask_app = create_app(TEST_CONFIG)

    yield flask_app


@pytest.fixture()
def client(app):
    """
    Function-scoped test client for making HTTP requests.
    """
    return app.test_client()


@pytest.fixture()
def db(app):
    """
    Function-scoped test database with complete isolation.
    Each test gets its own fresh database state.
    """
    with app.app_context():
        _db.create_all()

        yield _db

        _db.session.remove()
        _db.drop_all()


@pytest.fixture()
def session(db, app):
    """
    Provides a database session for each test.
    Uses the function-scoped database for complete isolation.
    """
    with app.app_context():
        yield _db.session


@pytest.fixture()
def user(session):
    """A persisted user without a password (logged in through the session)."""
    user = User(email="writer@example.com", name="Test Writer")
    session.add(user)
    session.commit()
    return user


@pytest.fixture()
def other_user(session):
    """A second persisted user, for ownership checks."""
    user = User(email="someone-else@example.com", name="Someone Else")
    session.add(user)
    session.commit()
    return user


@pytest.fixture()
def logged_in_client(client, user):
    """
    Test client whose Flask-Login session already belongs to ``user``.
    """
    with client.session_transaction() as sess:
        sess["_user_id"] = str(user.id)
        sess["_fresh"] = True
    return client


@pytest.fixture
def cli_runner(app):
    """
    Custom CLI runner for testing CLI commands.
    """
    return app.test_cli_runner()
