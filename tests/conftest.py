"""Shared fixtures: every test gets its own SQLite database file."""

import os

# Must be set before app.core.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient

from app.core.database import apply_migrations, create_db_engine
from app.main import create_app
from app.services.student.store import StudentStore


@pytest.fixture
def engine(tmp_path):
    """Engine on a fresh SQLite file."""
    engine = create_db_engine(f"sqlite:///{tmp_path / 'students.db'}")
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine):
    """Store with the schema migrated to head."""
    apply_migrations(engine)
    return StudentStore(engine)


@pytest.fixture
def client(engine):
    """Test client; entering it runs startup (connection check + migrations)."""
    app = create_app(store=StudentStore(engine), migrate=True)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def broken_store(tmp_path):
    """Store whose database file cannot be opened."""
    engine = create_db_engine(f"sqlite:///{tmp_path / 'missing' / 'students.db'}")
    yield StudentStore(engine)
    engine.dispose()
