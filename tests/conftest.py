# /tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.db.database import Database
from app.main import create_app
from app.services.database_service import DatabaseService


@pytest.fixture
def database():
    """
    A fresh in-memory SQLite database with all tables created, discarded
    after each test.
    """
    database = Database("sqlite://")
    database.create_all()
    yield database
    database.dispose()


@pytest.fixture
def db_session(database):
    session = database.session()
    yield session
    session.close()


@pytest.fixture
def db_service(db_session):
    """A DatabaseService bound to the test session."""
    return DatabaseService(db_session=db_session)


@pytest.fixture
def client(database):
    """A TestClient whose application uses the in-memory test database."""
    app = create_app(settings=Settings(DATABASE_URL="sqlite://", LOG_LEVEL="WARNING"), database=database)
    with TestClient(app) as test_client:
        yield test_client
