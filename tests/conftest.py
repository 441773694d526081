"""
Test configuration and fixtures
"""

import os

# Must be set before the service settings are created on import
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_JSON", "false")

from unittest.mock import patch  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from walks_service.app import app  # noqa: E402
from walks_service.config import get_settings, settings  # noqa: E402
from walks_service.database import get_db  # noqa: E402
from walks_service.models import Base  # noqa: E402

# Create in-memory SQLite database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database session for each test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database dependency override"""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    # Mock init_db to prevent creating tables on the service engine
    with patch("walks_service.app.init_db"):
        app.dependency_overrides[get_db] = override_get_db
        with TestClient(app) as test_client:
            yield test_client
        app.dependency_overrides.clear()


@pytest.fixture
def configure():
    """Override individual settings for the app under test."""

    def _configure(**overrides):
        patched = settings.model_copy(update=overrides)
        app.dependency_overrides[get_settings] = lambda: patched
        return patched

    return _configure


@pytest.fixture
def otago_payload():
    """Region payload from the Otago scenario"""
    return {"Name": "Otago", "Code": "OTA", "Lat": -45.0, "Long": 170.5}


@pytest.fixture
def region(client, otago_payload):
    """A stored region"""
    response = client.post("/Regions", json=otago_payload)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def walk_difficulty(client):
    """A stored walk difficulty"""
    response = client.post("/WalkDifficulties", json={"Code": "Easy"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def walk_payload(region, walk_difficulty):
    """Walk payload referencing stored region and difficulty"""
    return {
        "Name": "Lake Track",
        "Length": 5.2,
        "RegionId": region["Id"],
        "WalkDifficultyId": walk_difficulty["Id"],
    }


@pytest.fixture
def walk(client, walk_payload):
    """A stored walk"""
    response = client.post("/Walks", json=walk_payload)
    assert response.status_code == 201
    return response.json()
