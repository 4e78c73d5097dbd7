"""
Pytest configuration and shared fixtures for the test suite.
Points the app at an in-memory database and a temp log dir before any
cringeshield module is imported.
"""
import os
import sys
import tempfile
from pathlib import Path

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="cringeshield-logs-"))
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


def make_memory_engine():
    """In-memory SQLite shared by every session and thread of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _fk_on(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    from cringeshield.config import Base
    import cringeshield.models  # noqa: F401
    Base.metadata.create_all(engine)
    return engine


# ----- In-memory DB (for tests that need DB without touching real DB) -----
@pytest.fixture
def engine_factory():
    return make_memory_engine


@pytest.fixture
def in_memory_engine(engine_factory):
    return engine_factory()


@pytest.fixture
def db_session(in_memory_engine):
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=in_memory_engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def make_user(db_session):
    """Factory creating users directly in the DB."""
    from cringeshield.models.models import User

    counter = {"n": 0}

    def _make(email=None, is_admin=False):
        counter["n"] += 1
        user = User(
            email=email or f"user{counter['n']}@example.com",
            hashed_password="not-a-real-hash",
            is_admin=is_admin,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make


@pytest.fixture
def user(make_user):
    return make_user()
