# tests/conftest.py
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient
import os
import sys

# Add the src directory to the Python path to allow imports
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
src_path = os.path.join(project_root, 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from bookstore.db.session import Base, get_db, session_scope
# Import all models to ensure they are registered with Base
from bookstore import models  # noqa: F401

# --- Test Database Setup ---
# A fresh in-memory SQLite database per test; StaticPool keeps every session
# of the test on the same connection.
TEST_DATABASE_URL = "sqlite://"

@pytest.fixture(scope="function")
def db_engine():
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()

@pytest.fixture(scope="function")
def db_session_factory(db_engine):
    """Returns a SQLAlchemy session factory bound to the test engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

@pytest.fixture(scope="function")
def db_session(db_session_factory):
    """Provides a session for a test function; closed afterwards."""
    session = db_session_factory()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture(scope="function")
def client(db_session_factory):
    """TestClient whose requests each run in their own unit of work on the test database."""
    from bookstore.api.main import app

    def override_get_db():
        with session_scope(db_session_factory) as db:
            yield db

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
