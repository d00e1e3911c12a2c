"""
Shared test fixtures.

Uses an in-memory SQLite database shared across threads (StaticPool) so the
TestClient's worker threads and the test body see the same data.
"""
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base
from deps import get_db
from main import app as default_app
from Bootstrap_module.bootstrap import seed_default_data

TEST_DATABASE_URL = "sqlite://"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestSession = sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)

ALLOWED_ORIGIN = "http://localhost:5173"


@pytest.fixture(autouse=True)
def setup_db():
    """Create all tables before each test, drop after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    with TestSession() as session:
        yield session


def override_get_db():
    db = TestSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def app():
    default_app.dependency_overrides[get_db] = override_get_db
    yield default_app
    default_app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    # Not used as a context manager: the lifespan (real database bootstrap) is skipped
    yield TestClient(app)


@pytest.fixture
def seeded(db_session: Session) -> dict:
    """Load the default datasets into the test database."""
    return seed_default_data(db_session)
