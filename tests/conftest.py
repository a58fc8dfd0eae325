"""
Pytest configuration.

In-memory SQLite database, FastAPI test client and a mock LLM.
"""

from collections.abc import Generator
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from resumelm import rate_limiter
from resumelm.api.app import app
from resumelm.api.limiter import limiter
from resumelm.cache import page_cache
from resumelm.config import settings
from resumelm.db import Job, Resume, User, get_db
from resumelm.db.base import init_db


# ==================== Database fixtures ====================

@pytest.fixture
def db_engine():
    """Fresh in-memory database per test."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine) -> Generator[Session, None, None]:
    session = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session) -> Generator[TestClient, None, None]:
    """Test client sharing the test session. Lifespan is not run."""

    def _get_db():
        yield db_session

    app.dependency_overrides[get_db] = _get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# ==================== Global state ====================

@pytest.fixture(autouse=True)
def reset_state(monkeypatch):
    """Clear caches and limiters; default to the always-pro demo mode."""
    page_cache.clear()
    limiter.reset()
    monkeypatch.setattr(rate_limiter, "_limiter", None)
    monkeypatch.setattr(settings, "force_pro_plan", True)
    monkeypatch.setattr(settings, "deepseek_api_key", "test-key")
    yield
    page_cache.clear()


# ==================== Data fixtures ====================

@pytest.fixture
def user(db_session) -> User:
    user = User(email="ada@example.com")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def other_user(db_session) -> User:
    user = User(email="grace@example.com")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def auth_headers(user) -> dict:
    return {"X-User-ID": user.id}


@pytest.fixture
def make_job(db_session, user):
    """Factory for stored jobs."""

    def _make(**overrides) -> Job:
        data = {
            "user_id": user.id,
            "company_name": "Acme",
            "position_title": "Backend Engineer",
            "keywords": [],
            "is_active": True,
        }
        data.update(overrides)
        job = Job(**data)
        db_session.add(job)
        db_session.commit()
        db_session.refresh(job)
        return job

    return _make


@pytest.fixture
def make_resume(db_session, user):
    """Factory for stored resumes."""

    def _make(**overrides) -> Resume:
        data = {
            "user_id": user.id,
            "name": "Base resume",
            "target_role": "Software Engineer",
            "content": {"first_name": "Ada"},
        }
        data.update(overrides)
        resume = Resume(**data)
        db_session.add(resume)
        db_session.commit()
        db_session.refresh(resume)
        return resume

    return _make


# ==================== Mock LLM ====================

@pytest.fixture
def mock_llm():
    """
    Mock chat model.

    Set `mock_llm.structured.invoke.return_value` to the object the model
    should return from its structured-output call.
    """
    mock = Mock()
    mock.structured = Mock()
    mock.with_structured_output.return_value = mock.structured
    return mock


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: API-level tests")
