"""Shared utilities for SQLAlchemy repositories."""

from datetime import datetime, timezone
from typing import Optional

from staybook.domain.shared.audit import AuditStamp
from staybook.domain.shared.time import ensure_tz_aware
from staybook.infrastructure.persistence.sqlalchemy.models.base import TimestampMixin


def to_utc(value: datetime) -> datetime:
    """
    Normalize a datetime to aware UTC before it reaches the database.

    SQLite stores date-times as text without an offset, so comparisons are
    only correct when every stored value uses the same zone.
    """
    return ensure_tz_aware(value).astimezone(timezone.utc)


def from_db(value: Optional[datetime]) -> Optional[datetime]:
    """Re-attach UTC to date-times read back from SQLite (naive there)."""
    if value is None:
        return None
    return ensure_tz_aware(value)


def audit_stamp(model: TimestampMixin) -> AuditStamp:
    return AuditStamp(
        created_at=from_db(model.created_at),
        updated_at=from_db(model.updated_at),
    )
