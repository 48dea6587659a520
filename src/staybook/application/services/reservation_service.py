"""Reservation service: validated booking and rescheduling."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from staybook.application.dtos import ReservationDTO, ReservationRequest
from staybook.domain.customer import CustomerNotFoundError
from staybook.domain.lodging import Lodging, LodgingNotFoundError
from staybook.domain.reservation import (
    InvalidDateFormatError,
    LodgingUnavailableError,
    Reservation,
    ReservationNotFoundError,
)
from staybook.domain.shared.time import parse_iso_datetime

if TYPE_CHECKING:
    from staybook.domain.customer import CustomerRepository
    from staybook.domain.lodging import LodgingRepository
    from staybook.domain.reservation import ReservationRepository

logger = logging.getLogger(__name__)


class ReservationService:
    """
    Application service for reservations.

    Creation runs a fixed validation sequence; the first failing step
    decides the error:
    1. customer exists
    2. lodging exists
    3. both dates parse as ISO 8601 date-times
    4. the stay is well-formed and does not start in the past
    5. the stay lies inside the lodging's availability window
    6. no other reservation of the lodging overlaps the stay
    """

    def __init__(
        self,
        reservation_repository: ReservationRepository,
        customer_repository: CustomerRepository,
        lodging_repository: LodgingRepository,
    ):
        self._reservation_repo = reservation_repository
        self._customer_repo = customer_repository
        self._lodging_repo = lodging_repository

    async def create(self, request: ReservationRequest) -> ReservationDTO:
        """
        Book a stay.

        Parameters
        ----------
        request
            Customer id, lodging id and raw ISO 8601 start/end strings

        Returns
        -------
        The persisted reservation

        Raises
        ------
        CustomerNotFoundError
            If the customer does not exist
        LodgingNotFoundError
            If the lodging does not exist
        InvalidDateFormatError
            If a date is not an ISO 8601 date-time
        InvalidStayWindowError
            If start is not before end, or start is in the past
        LodgingUnavailableError
            If the stay is outside the availability window or overlaps
            another reservation
        """
        customer = await self._customer_repo.find_by_id(request.customer_id)
        if customer is None:
            raise CustomerNotFoundError(request.customer_id)

        lodging = await self._lodging_repo.find_by_id(request.lodging_id)
        if lodging is None:
            raise LodgingNotFoundError(request.lodging_id)

        start = _parse_date("start_date", request.start_date)
        end = _parse_date("end_date", request.end_date)

        reservation = Reservation.create(customer, lodging, start, end)
        await self._ensure_bookable(lodging, reservation)

        saved = await self._reservation_repo.save(reservation)
        logger.info(
            "Reservation created: %s (lodging %s, %d night(s))",
            saved.id,
            saved.lodging_id,
            saved.nights,
        )
        return ReservationDTO.from_reservation(saved)

    async def find_all(self, customer_id: Optional[str] = None) -> list[ReservationDTO]:
        if customer_id is None:
            reservations = await self._reservation_repo.find_all()
        else:
            reservations = await self._reservation_repo.find_by_customer(customer_id)
        return [ReservationDTO.from_reservation(r) for r in reservations]

    async def find_by_id(self, reservation_id: str) -> ReservationDTO:
        reservation = await self._get_reservation(reservation_id)
        return ReservationDTO.from_reservation(reservation)

    async def update(
        self, reservation_id: str, start_date: str, end_date: str
    ) -> ReservationDTO:
        """Move a reservation to new dates, re-running the booking checks."""
        reservation = await self._get_reservation(reservation_id)

        start = _parse_date("start_date", start_date)
        end = _parse_date("end_date", end_date)

        lodging = await self._lodging_repo.find_by_id(reservation.lodging_id)
        if lodging is None:
            raise LodgingNotFoundError(reservation.lodging_id)

        reservation.reschedule(lodging, start, end)
        await self._ensure_bookable(lodging, reservation)

        saved = await self._reservation_repo.save(reservation)
        logger.info("Reservation rescheduled: %s", reservation_id)
        return ReservationDTO.from_reservation(saved)

    async def delete(self, reservation_id: str) -> None:
        deleted = await self._reservation_repo.delete(reservation_id)
        if not deleted:
            raise ReservationNotFoundError(reservation_id)
        logger.info("Reservation deleted: %s", reservation_id)

    async def _get_reservation(self, reservation_id: str) -> Reservation:
        reservation = await self._reservation_repo.find_by_id(reservation_id)
        if reservation is None:
            raise ReservationNotFoundError(reservation_id)
        return reservation

    async def _ensure_bookable(self, lodging: Lodging, reservation: Reservation) -> None:
        if not lodging.is_available_between(reservation.start_date, reservation.end_date):
            logger.warning(
                "Stay outside availability window of lodging %s", lodging.id
            )
            raise LodgingUnavailableError(
                lodging.id, "requested stay is outside the availability window"
            )

        overlapping = await self._reservation_repo.find_overlapping(
            lodging.id,
            reservation.start_date,
            reservation.end_date,
            exclude_id=reservation.id,
        )
        if overlapping:
            logger.warning(
                "Stay overlaps %d reservation(s) of lodging %s",
                len(overlapping),
                lodging.id,
            )
            raise LodgingUnavailableError(
                lodging.id, "dates overlap an existing reservation"
            )


def _parse_date(field: str, value: str) -> datetime:
    try:
        return parse_iso_datetime(value)
    except ValueError:
        raise InvalidDateFormatError(field, value) from None
