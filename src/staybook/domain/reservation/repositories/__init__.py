from staybook.domain.reservation.repositories.reservation_repository import (
    ReservationRepository,
)

__all__ = ["ReservationRepository"]
