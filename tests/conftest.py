# tests/conftest.py
import os

# Settings are read at import time, so the test environment has to be in
# place before anything from ecotrack is imported.
os.environ.setdefault("ENV", "local")
os.environ.setdefault("DATABASE_URL_LOCAL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret-key")
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from starlette.testclient import TestClient

from ecotrack.main import app
from ecotrack.api import deps
from ecotrack.db.session import get_db
from ecotrack.db.base_class import Base
import ecotrack.models  # noqa: F401

from tests.utils import factories
from tests.utils.auth import get_authentication_headers


@pytest.fixture(scope="function")
def db():
    """A fresh in-memory SQLite database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


class FakeImageStore:
    """Records uploads instead of sending them to S3."""

    def __init__(self):
        self.uploaded = []

    def __call__(self, fileobj, filename, content_type):
        self.uploaded.append((filename, content_type, fileobj.read()))
        return f"https://images.test/{filename}"


@pytest.fixture(scope="function")
def image_store():
    return FakeImageStore()


@pytest.fixture(scope="function")
def client(db, image_store):
    """
    TestClient wired to the per-test database. Authentication is real: tests
    send bearer tokens minted for users they create.
    """

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[deps.get_image_uploader] = lambda: image_store

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def admin(db):
    return factories.create_user(db, name="Admin User", email="admin@test.com", role="admin")


@pytest.fixture
def student(db):
    return factories.create_user(db, name="Jane Student", email="jane@test.com")


@pytest.fixture
def admin_headers(admin):
    return get_authentication_headers(admin.id)


@pytest.fixture
def student_headers(student):
    return get_authentication_headers(student.id)
