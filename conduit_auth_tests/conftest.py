"""
Pytest configuration for conduit_auth tests.

Points the service at a SQLite file in a temporary directory before any
application module is imported, recreates the tables around every test and
removes the directory when the session ends.
"""
import os
import shutil
import tempfile

TEST_DB_DIR = tempfile.mkdtemp(prefix="conduit_auth_tests_")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(TEST_DB_DIR, 'test_conduit.db')}"
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from conduit_auth.db import Base, engine
from conduit_auth.main import app
from conduit_auth import models  # noqa: F401


@pytest.fixture(scope="session", autouse=True)
def cleanup_database_dir():
    yield
    engine.dispose()
    shutil.rmtree(TEST_DB_DIR, ignore_errors=True)


@pytest.fixture(autouse=True)
def reset_database():
    # Drop all tables and recreate them before each test
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db_session():
    """Create a database session for testing."""
    session = Session(bind=engine)
    yield session
    session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
