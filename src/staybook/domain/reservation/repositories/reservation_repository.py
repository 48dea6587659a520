"""Reservation repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from staybook.domain.reservation.entities.reservation import Reservation


class ReservationRepository(ABC):
    """Repository interface for Reservation entities."""

    @abstractmethod
    async def find_by_id(self, reservation_id: str) -> Optional[Reservation]:
        """
        Find a reservation by ID.

        Returns
        -------
        Reservation if found, None otherwise
        """

    @abstractmethod
    async def find_all(self) -> list[Reservation]:
        """Return every reservation, ordered by start date."""

    @abstractmethod
    async def find_by_customer(self, customer_id: str) -> list[Reservation]:
        """Return the customer's reservations, ordered by start date."""

    @abstractmethod
    async def find_overlapping(
        self,
        lodging_id: str,
        start_date: datetime,
        end_date: datetime,
        exclude_id: Optional[str] = None,
    ) -> list[Reservation]:
        """
        Find reservations of a lodging intersecting [start_date, end_date).

        Two stays overlap when ``existing.start < end and start < existing.end``.

        Parameters
        ----------
        lodging_id
            Lodging to check
        start_date, end_date
            The candidate stay
        exclude_id
            Reservation to ignore (the one being rescheduled)

        Returns
        -------
        Overlapping reservations, empty if the lodging is free
        """

    @abstractmethod
    async def count_ending_after(self, lodging_id: str, moment: datetime) -> int:
        """Count reservations of a lodging that end after ``moment``."""

    @abstractmethod
    async def save(self, reservation: Reservation) -> Reservation:
        """
        Insert or update a reservation.

        Returns
        -------
        The persisted reservation with its audit stamp
        """

    @abstractmethod
    async def delete(self, reservation_id: str) -> bool:
        """
        Delete a reservation by ID.

        Returns
        -------
        True if a row was deleted, False if the reservation did not exist
        """
