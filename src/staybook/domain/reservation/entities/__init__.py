from staybook.domain.reservation.entities.reservation import (
    Reservation,
    calculate_total_price,
)

__all__ = ["Reservation", "calculate_total_price"]
