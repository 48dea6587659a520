"""Audit timestamps embedded in persisted entities."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AuditStamp:
    """Creation and last-update times of a persisted record.

    Set by the persistence layer on insert/update; entities only carry it.
    """

    created_at: datetime
    updated_at: datetime

    @property
    def has_been_modified(self) -> bool:
        return self.updated_at > self.created_at
