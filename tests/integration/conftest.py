"""
Integration test fixtures. Overrides get_db for API tests with in-memory DB.
"""
import pytest
from sqlalchemy.orm import sessionmaker


@pytest.fixture
def override_get_db(engine_factory):
    """Create in-memory engine and session factory for API tests."""
    from cringeshield.services.practice_service import PracticeService

    engine = engine_factory()
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    seed = TestingSessionLocal()
    try:
        PracticeService(seed).seed_prompts()
    finally:
        seed.close()

    def _get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    return _get_db


@pytest.fixture
def api_client(override_get_db):
    """FastAPI TestClient with in-memory DB override."""
    from fastapi.testclient import TestClient
    from cringeshield.api import app
    from cringeshield.config import get_db
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def register(api_client):
    """Register (and thereby sign in) a user; the client keeps the auth cookie."""

    def _register(email="test@example.com", password="testpass123"):
        response = api_client.post(
            "/api/auth/register",
            json={"email": email, "password": password, "confirmPassword": password},
        )
        assert response.status_code == 200, response.text
        return response

    return _register


@pytest.fixture
def auth_client(api_client, register):
    register()
    return api_client


@pytest.fixture
def make_admin(override_get_db):
    """Flip the admin flag for an already registered email."""
    from cringeshield.utils.auth import get_user_by_email

    def _make_admin(email):
        db = next(override_get_db())
        try:
            user = get_user_by_email(email, db)
            user.is_admin = True
            db.commit()
        finally:
            db.close()

    return _make_admin
