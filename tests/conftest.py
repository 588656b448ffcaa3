"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


@pytest.fixture(scope="session")
def test_database():
    """
    Session-scoped fixture that prepares the PostgreSQL test database.

    Creates the tables before the DB tests and drops them afterwards.
    Skips when TEST_DATABASE_URL does not point at a reachable database.
    """
    from tests import check_db_available, get_test_db_url

    if not check_db_available():
        pytest.skip("Test database not available (set TEST_DATABASE_URL)")

    from sqlalchemy import create_engine
    from database.models import Base

    db_url = get_test_db_url()
    engine = create_engine(db_url)
    Base.metadata.create_all(engine)
    print(f"\n✓ Test database ready: {db_url}")

    yield engine

    Base.metadata.drop_all(engine)
    engine.dispose()
    print("\n✓ Test database tables dropped")


@pytest.fixture
def db_session(test_database):
    """Session bound to the test database, rolled back after each test."""
    from sqlalchemy.orm import sessionmaker

    session = sessionmaker(bind=test_database)()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(autouse=True)
def reset_config_cache():
    """Config is cached per process; tests may patch env vars."""
    from core.config_loader import get_config

    yield
    get_config.cache_clear()
