"""Reservation domain - customer stays at lodgings.

Design notes:
- A reservation references customer and lodging by ID
- It is only created from already-resolved Customer and Lodging entities
- Status (pending/active/finished) is derived from the clock, never stored
"""

from staybook.domain.reservation.entities import Reservation, calculate_total_price
from staybook.domain.reservation.exceptions import (
    InvalidDateFormatError,
    InvalidStayWindowError,
    LodgingUnavailableError,
    ReservationNotFoundError,
)
from staybook.domain.reservation.repositories import ReservationRepository
from staybook.domain.reservation.value_objects import ReservationStatus

__all__ = [
    "InvalidDateFormatError",
    "InvalidStayWindowError",
    "LodgingUnavailableError",
    "Reservation",
    "ReservationNotFoundError",
    "ReservationRepository",
    "ReservationStatus",
    "calculate_total_price",
]
