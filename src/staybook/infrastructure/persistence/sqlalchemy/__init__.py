"""SQLAlchemy persistence: models, repositories and engine helpers."""

from staybook.infrastructure.persistence.sqlalchemy.database import (
    create_database_engine,
    create_tables,
    drop_tables,
)

__all__ = [
    "create_database_engine",
    "create_tables",
    "drop_tables",
]
