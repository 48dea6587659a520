"""Reservation entity."""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Optional, Union
from uuid import uuid4

from staybook.domain.reservation.exceptions import InvalidStayWindowError
from staybook.domain.reservation.value_objects import ReservationStatus
from staybook.domain.shared.audit import AuditStamp
from staybook.domain.shared.exceptions import FieldValidationError
from staybook.domain.shared.time import ensure_tz_aware, utc_now

if TYPE_CHECKING:
    from staybook.domain.customer import Customer
    from staybook.domain.lodging import Lodging

CENT = Decimal("0.01")


class Reservation:
    """
    A customer's stay at a lodging.

    The stay must end after it starts; this is checked on every construction.
    Stays created or moved through ``create``/``reschedule`` must also not
    start in the past. Reconstitution from storage skips that check so old
    reservations stay loadable.
    """

    def __init__(  # NOQA: PLR0913
        self,
        customer_id: str,
        lodging_id: str,
        start_date: datetime,
        end_date: datetime,
        total_price: Union[Decimal, int, str],
        id: Optional[str] = None,
        audit: Optional[AuditStamp] = None,
    ):
        start_date, end_date = _check_window(start_date, end_date)
        total_price = Decimal(str(total_price))
        if total_price < 0:
            raise FieldValidationError("total_price", "total_price must not be negative")

        self._id = id if id is not None else str(uuid4())
        self._customer_id = customer_id
        self._lodging_id = lodging_id
        self._start_date = start_date
        self._end_date = end_date
        self._total_price = total_price
        self._audit = audit

    @property
    def id(self) -> str:
        return self._id

    @property
    def customer_id(self) -> str:
        return self._customer_id

    @property
    def lodging_id(self) -> str:
        return self._lodging_id

    @property
    def start_date(self) -> datetime:
        return self._start_date

    @property
    def end_date(self) -> datetime:
        return self._end_date

    @property
    def total_price(self) -> Decimal:
        return self._total_price

    @property
    def audit(self) -> Optional[AuditStamp]:
        return self._audit

    @property
    def nights(self) -> int:
        """Whole days between start and end."""
        return (self._end_date - self._start_date).days

    @property
    def average_nightly_price(self) -> Decimal:
        return (self._total_price / max(self.nights, 1)).quantize(
            CENT, rounding=ROUND_HALF_UP
        )

    def status(self, now: Optional[datetime] = None) -> ReservationStatus:
        now = ensure_tz_aware(now) if now else utc_now()
        if now < self._start_date:
            return ReservationStatus.PENDING
        if now < self._end_date:
            return ReservationStatus.ACTIVE
        return ReservationStatus.FINISHED

    def overlaps(self, start: datetime, end: datetime) -> bool:
        """Half-open interval intersection with [start, end)."""
        return self._start_date < ensure_tz_aware(end) and ensure_tz_aware(
            start
        ) < self._end_date

    def reschedule(
        self,
        lodging: "Lodging",
        start_date: datetime,
        end_date: datetime,
        now: Optional[datetime] = None,
    ) -> None:
        """Move the stay and re-price it at the lodging's current rate."""
        start_date, end_date = _check_window(start_date, end_date)
        _check_not_in_past(start_date, now)
        self._start_date = start_date
        self._end_date = end_date
        self._total_price = calculate_total_price(lodging.price, start_date, end_date)

    @classmethod
    def create(
        cls,
        customer: "Customer",
        lodging: "Lodging",
        start_date: datetime,
        end_date: datetime,
        now: Optional[datetime] = None,
    ) -> "Reservation":
        """
        Book a new stay for a resolved customer and lodging.

        Parameters
        ----------
        customer
            The booking customer (already loaded)
        lodging
            The lodging being booked (already loaded)
        start_date, end_date
            Stay boundaries; naive values are taken as UTC
        now
            Reference time for the not-in-the-past rule (defaults to now)

        Returns
        -------
        New Reservation priced at ``lodging.price * max(nights, 1)``

        Raises
        ------
        InvalidStayWindowError
            If the stay does not end after it starts or starts in the past
        """
        start_date, end_date = _check_window(start_date, end_date)
        _check_not_in_past(start_date, now)
        return cls(
            customer_id=customer.id,
            lodging_id=lodging.id,
            start_date=start_date,
            end_date=end_date,
            total_price=calculate_total_price(lodging.price, start_date, end_date),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Reservation):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Reservation(id={self._id!r}, lodging_id={self._lodging_id!r}, "
            f"start={self._start_date.isoformat()}, end={self._end_date.isoformat()})"
        )


def calculate_total_price(
    price_per_night: Decimal, start_date: datetime, end_date: datetime
) -> Decimal:
    """Price of a stay; a stay shorter than one night is charged one night."""
    nights = (end_date - start_date).days
    return (Decimal(price_per_night) * max(nights, 1)).quantize(
        CENT, rounding=ROUND_HALF_UP
    )


def _check_window(start: datetime, end: datetime) -> tuple[datetime, datetime]:
    if start is None or end is None:
        raise InvalidStayWindowError("Start and end date are required")
    start = ensure_tz_aware(start)
    end = ensure_tz_aware(end)
    if not start < end:
        raise InvalidStayWindowError("Start date must be before end date")
    return start, end


def _check_not_in_past(start: datetime, now: Optional[datetime]) -> None:
    now = ensure_tz_aware(now) if now else utc_now()
    if start < now:
        raise InvalidStayWindowError("Reservations cannot start in the past")
