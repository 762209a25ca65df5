import os

# Settings are read at import time
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from app.database import Database
import app.models  # noqa: F401
from tests.fixtures_data import DataFactory


@pytest.fixture
def database():
    database = Database(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    database.create_all()
    yield database
    database.dispose()


@pytest.fixture
def db(database):
    with database.session() as session:
        yield session


@pytest.fixture
def factory(db):
    return DataFactory(db)


@pytest.fixture
def client(database):
    from main import create_app

    with TestClient(create_app(database=database)) as test_client:
        yield test_client
