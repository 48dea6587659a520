"""
Pytest configuration for staybook integration tests.

Import the shared fixtures to make them available.
"""

# Re-export shared database fixtures
from tests.shared.fixtures.database import (
    db_session,
    postgres_container,
    postgres_session,
    sqlite_engine,
)

__all__ = [
    "db_session",
    "postgres_container",
    "postgres_session",
    "sqlite_engine",
]
