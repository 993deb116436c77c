"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/                  # Fast, isolated tests with mocks and fakes
    ├── integration/           # SQLAlchemy repositories against SQLite
    ├── cross_domain/          # Authenticator wired to real repositories
    └── shared/                # Shared fixtures and fakes

Integration tests use an in-memory aiosqlite database and run by default;
the marker only exists to select or deselect them with -m.
"""

import pytest

from gatehouse_config import clear_settings_cache
from tests.shared.fixtures.database import async_engine, db_session

__all__ = ["async_engine", "db_session"]


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that verify database/persistence behavior",
    )
    config.addinivalue_line(
        "markers",
        "slow: Tests that take more than 1 second",
    )


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Make every test session start from freshly loaded settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
