"""Shared fixtures: an in-memory SQLite store and an app wired to it."""

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.security import PasswordHasher
from app.db.store import init_store
from app.main import create_app


@pytest.fixture
def settings():
    return Settings(_env_file=None, DATABASE_URL="sqlite://", BCRYPT_ROUNDS=4, LOG_LEVEL="WARNING")


@pytest.fixture
def store(settings):
    store = init_store(settings.database_url)
    yield store
    store.dispose()


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def client(settings, store):
    app = create_app(settings, store=store)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def ada_payload():
    return {"username": "ada", "email": "ada@example.com", "password": "secret123"}


@pytest.fixture
def count_rows(store):
    """Count every row of ``model`` matching ``filters``, soft-deleted rows included."""

    def count(model, **filters):
        with store.session_factory() as db:
            return db.query(model).filter_by(**filters).count()

    return count
