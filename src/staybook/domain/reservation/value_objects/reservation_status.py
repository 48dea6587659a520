from enum import Enum


class ReservationStatus(str, Enum):
    """Where a stay is relative to a point in time."""

    PENDING = "PENDING"
    ACTIVE = "ACTIVE"
    FINISHED = "FINISHED"
