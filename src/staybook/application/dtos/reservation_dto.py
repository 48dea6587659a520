"""DTOs for reservations."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from staybook.domain.reservation import Reservation


@dataclass(frozen=True)
class ReservationRequest:
    """
    Booking request as received from a client.

    Dates are raw ISO 8601 date-time strings; parsing is part of the
    service's validation sequence.
    """

    customer_id: str
    lodging_id: str
    start_date: str
    end_date: str


@dataclass(frozen=True)
class ReservationDTO:
    id: str
    customer_id: str
    lodging_id: str
    start_date: datetime
    end_date: datetime
    nights: int
    total_price: Decimal
    average_nightly_price: Decimal
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_reservation(
        cls, reservation: Reservation, now: Optional[datetime] = None
    ) -> "ReservationDTO":
        audit = reservation.audit
        return cls(
            id=reservation.id,
            customer_id=reservation.customer_id,
            lodging_id=reservation.lodging_id,
            start_date=reservation.start_date,
            end_date=reservation.end_date,
            nights=reservation.nights,
            total_price=reservation.total_price,
            average_nightly_price=reservation.average_nightly_price,
            status=reservation.status(now).value,
            created_at=audit.created_at if audit else None,
            updated_at=audit.updated_at if audit else None,
        )
