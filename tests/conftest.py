# tests/conftest.py
"""Shared fixtures for the Contacts API tests."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db import get_session
from app.main import app
from app.models import Base

# Use SQLite for tests (in-memory)
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_session():
    """Override database session for testing."""
    session = TestingSessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


# Override the dependency
app.dependency_overrides[get_session] = override_get_session


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with fresh database."""
    yield TestClient(app)


@pytest.fixture
def sample_contact_data():
    """Sample contact document for tests."""
    return {
        "fullName": "John Doe",
        "email": "john.doe@example.com",
        "phone": "(272) 790-0888",
        "cell": "(300) 400-5000",
        "registeredDate": "2015-06-01T10:30:00.000Z",
        "age": 34,
        "address": {
            "street": {"number": 4285, "name": "Main Street"},
            "city": "Springfield",
            "country": "United States",
        },
        "picture": {
            "large": "https://randomuser.me/api/portraits/men/1.jpg",
            "medium": "https://randomuser.me/api/portraits/med/men/1.jpg",
            "thumbnail": "https://randomuser.me/api/portraits/thumb/men/1.jpg",
        },
    }


@pytest.fixture
def sample_contact_data_2():
    """Second sample contact document, without optional fields."""
    return {
        "fullName": "Jane Smith",
        "email": "jane.smith@example.com",
        "registeredDate": "2019-12-25",
        "address": {"street": {"number": 12, "name": "Elm Road"}},
        "picture": {
            "large": "https://randomuser.me/api/portraits/women/2.jpg",
            "medium": "https://randomuser.me/api/portraits/med/women/2.jpg",
            "thumbnail": "https://randomuser.me/api/portraits/thumb/women/2.jpg",
        },
    }
