"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Sample opening payloads
"""

import os

# Keep the application engine off the on-disk default during tests
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JSON_LOGS", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.models.opening import Opening  # noqa: F401  registers the table
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """
    Create a fresh database session for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def sample_opening_data():
    """Sample opening payload for testing"""
    return {
        "role": "Backend Engineer",
        "company": "Acme",
        "location": "Lisbon, Portugal",
        "remote": True,
        "link": "https://acme.example.com/careers/backend-engineer",
        "salary": 85000
    }


@pytest.fixture
def create_opening(client, sample_opening_data):
    """Factory that creates an opening through the API and returns its record"""
    def _create(**overrides):
        payload = {**sample_opening_data, **overrides}
        response = client.post("/api/v1/opening", json=payload)
        assert response.status_code == 200, response.text
        return response.json()["data"]

    return _create
