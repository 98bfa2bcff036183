"""Shared pytest fixtures for raspberry tests."""

from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from raspberry.db.schema import Base

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(engine):
    """Create a database session for testing."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def sample_csv() -> Path:
    """Path to a small movie list with known award intervals."""
    return FIXTURES_DIR / "movielist_sample.csv"
