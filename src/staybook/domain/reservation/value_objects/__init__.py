from staybook.domain.reservation.value_objects.reservation_status import (
    ReservationStatus,
)

__all__ = ["ReservationStatus"]
