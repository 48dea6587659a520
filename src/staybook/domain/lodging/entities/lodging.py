"""Lodging entity."""

import math
from datetime import date, datetime, time
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional, Union
from uuid import uuid4

from staybook.domain.lodging.exceptions import InvalidLodgingFieldError
from staybook.domain.lodging.value_objects import (
    MAX_RATING,
    MIN_RATING,
    Category,
    Photo,
    RatingGrade,
)
from staybook.domain.shared.audit import AuditStamp
from staybook.domain.shared.exceptions import ErrorCode
from staybook.domain.shared.time import ensure_tz_aware

MIN_STARS = 1
MAX_STARS = 5
DEFAULT_CHECK_IN_TIME = time(15, 0)
DEFAULT_CHECK_OUT_TIME = time(11, 0)

CENT = Decimal("0.01")
# Keeps price * nights inside the reservation total column
MAX_PRICE = Decimal("99999.99")

MAX_NAME_LENGTH = 255
MAX_ADDRESS_LENGTH = 255
MAX_PLACE_LENGTH = 100
MAX_AMENITY_LENGTH = 50
MAX_AMENITIES = 30
MAX_PHOTOS = 20


class Lodging:
    """
    A bookable place: a hotel, hostel, department or B&B.

    All invariants are checked at construction and again on every update,
    so a Lodging instance is always valid.
    """

    def __init__(  # NOQA: PLR0913
        self,
        name: str,
        city: str,
        country: str,
        price: Union[Decimal, int, str],
        available_from: datetime,
        available_to: datetime,
        category: Union[str, Category] = Category.HOTEL,
        address: str = "",
        description: str = "",
        stars: int = 3,
        average_customer_rating: int = 7,
        max_occupancy: int = 2,
        check_in_time: time = DEFAULT_CHECK_IN_TIME,
        check_out_time: time = DEFAULT_CHECK_OUT_TIME,
        is_favorite: bool = False,
        photos: Iterable[Photo] = (),
        amenities: Iterable[str] = (),
        room_size_square_meters: Optional[float] = None,
        is_pet_friendly: bool = False,
        has_parking: bool = False,
        id: Optional[str] = None,
        audit: Optional[AuditStamp] = None,
    ):
        """
        Initialize a lodging.

        Parameters
        ----------
        name, city, country
            Required, non-blank (name up to 255 characters, city and
            country up to 100)
        price
            Price per night, 0 to 99999.99, rounded half-up to cents
        available_from, available_to
            Bookable window; naive values are taken as UTC
        category
            Category or any spelling accepted by ``Category.parse``
        stars
            Official star rating (1-5)
        average_customer_rating
            Average guest score (1-10)
        max_occupancy
            Maximum number of guests (at least 1)
        photos
            Pictures in display order; at most one is marked main
        amenities
            Free-text amenity names, de-duplicated ignoring case
        room_size_square_meters
            Optional positive room size
        id
            Lodging ID (generated if not provided, used for reconstitution)
        audit
            Persistence timestamps, set by the store
        """
        self._id = id if id is not None else str(uuid4())
        self._audit = audit
        self._apply(
            name=name,
            address=address,
            city=city,
            country=country,
            description=description,
            price=price,
            stars=stars,
            average_customer_rating=average_customer_rating,
            category=category,
            available_from=available_from,
            available_to=available_to,
            max_occupancy=max_occupancy,
            check_in_time=check_in_time,
            check_out_time=check_out_time,
            is_favorite=is_favorite,
            photos=photos,
            amenities=amenities,
            room_size_square_meters=room_size_square_meters,
            is_pet_friendly=is_pet_friendly,
            has_parking=has_parking,
        )

    def _apply(self, **fields) -> None:  # NOQA: PLR0912
        name = _required("name", fields["name"], MAX_NAME_LENGTH)
        city = _required("city", fields["city"], MAX_PLACE_LENGTH)
        country = _required("country", fields["country"], MAX_PLACE_LENGTH)
        address = _bounded("address", fields["address"], MAX_ADDRESS_LENGTH)

        price = _to_price(fields["price"])

        stars = fields["stars"]
        if not isinstance(stars, int) or not MIN_STARS <= stars <= MAX_STARS:
            msg = f"stars must be between {MIN_STARS} and {MAX_STARS}"
            raise InvalidLodgingFieldError("stars", msg)

        rating = fields["average_customer_rating"]
        if not isinstance(rating, int) or not MIN_RATING <= rating <= MAX_RATING:
            msg = f"average_customer_rating must be between {MIN_RATING} and {MAX_RATING}"
            raise InvalidLodgingFieldError(
                "average_customer_rating", msg, ErrorCode.INVALID_RATING
            )

        if fields["available_from"] is None or fields["available_to"] is None:
            raise InvalidLodgingFieldError(
                "available_from", "availability window is required"
            )
        available_from = ensure_tz_aware(fields["available_from"])
        available_to = ensure_tz_aware(fields["available_to"])
        if available_from >= available_to:
            raise InvalidLodgingFieldError(
                "available_to",
                "available_from must be before available_to",
                ErrorCode.INVALID_DATE,
            )

        max_occupancy = fields["max_occupancy"]
        if not isinstance(max_occupancy, int) or max_occupancy < 1:
            raise InvalidLodgingFieldError(
                "max_occupancy", "max_occupancy must be at least 1"
            )

        category = Category.parse(fields["category"])
        photos = _to_photos(fields["photos"])
        amenities = _to_amenities(fields["amenities"])
        room_size = _to_room_size(fields["room_size_square_meters"])

        self._name = name
        self._address = address
        self._city = city
        self._country = country
        self._description = (fields["description"] or "").strip()
        self._price = price
        self._stars = stars
        self._average_customer_rating = rating
        self._category = category
        self._available_from = available_from
        self._available_to = available_to
        self._max_occupancy = max_occupancy
        self._check_in_time = fields["check_in_time"] or DEFAULT_CHECK_IN_TIME
        self._check_out_time = fields["check_out_time"] or DEFAULT_CHECK_OUT_TIME
        self._is_favorite = bool(fields["is_favorite"])
        self._photos = photos
        self._amenities = amenities
        self._room_size_square_meters = room_size
        self._is_pet_friendly = bool(fields["is_pet_friendly"])
        self._has_parking = bool(fields["has_parking"])

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def address(self) -> str:
        return self._address

    @property
    def city(self) -> str:
        return self._city

    @property
    def country(self) -> str:
        return self._country

    @property
    def description(self) -> str:
        return self._description

    @property
    def price(self) -> Decimal:
        return self._price

    @property
    def stars(self) -> int:
        return self._stars

    @property
    def average_customer_rating(self) -> int:
        return self._average_customer_rating

    @property
    def grade(self) -> RatingGrade:
        return RatingGrade.from_rating(self._average_customer_rating)

    @property
    def category(self) -> Category:
        return self._category

    @property
    def available_from(self) -> datetime:
        return self._available_from

    @property
    def available_to(self) -> datetime:
        return self._available_to

    @property
    def max_occupancy(self) -> int:
        return self._max_occupancy

    @property
    def check_in_time(self) -> time:
        return self._check_in_time

    @property
    def check_out_time(self) -> time:
        return self._check_out_time

    @property
    def is_favorite(self) -> bool:
        return self._is_favorite

    @property
    def photos(self) -> tuple[Photo, ...]:
        return self._photos

    @property
    def display_photo(self) -> str:
        """URL of the main photo, else of the first one, else empty."""
        for photo in self._photos:
            if photo.is_main:
                return photo.url
        return self._photos[0].url if self._photos else ""

    @property
    def amenities(self) -> tuple[str, ...]:
        return self._amenities

    @property
    def room_size_square_meters(self) -> Optional[float]:
        return self._room_size_square_meters

    @property
    def is_pet_friendly(self) -> bool:
        return self._is_pet_friendly

    @property
    def has_parking(self) -> bool:
        return self._has_parking

    @property
    def audit(self) -> Optional[AuditStamp]:
        return self._audit

    def is_available_between(self, start: datetime, end: datetime) -> bool:
        """Whether [start, end) lies inside the availability window."""
        return (
            self._available_from <= ensure_tz_aware(start)
            and ensure_tz_aware(end) <= self._available_to
        )

    def covers_dates(
        self, check_in: Optional[date] = None, check_out: Optional[date] = None
    ) -> bool:
        """Calendar-day variant of the window check, used by search."""
        if check_in is not None and check_in < self._available_from.date():
            return False
        if check_out is not None and check_out > self._available_to.date():
            return False
        return True

    def matches_destination(self, destination: str) -> bool:
        needle = destination.strip().casefold()
        return needle in self._city.casefold() or needle in self._country.casefold()

    def has_amenities(self, required: Iterable[str]) -> bool:
        """Whether every required amenity is offered (ignoring case)."""
        offered = {amenity.casefold() for amenity in self._amenities}
        return all(name.strip().casefold() in offered for name in required)

    def update(self, **changes) -> None:
        """
        Apply a partial update.

        Only keys present in ``changes`` with a non-None value are changed.
        The resulting state is validated as a whole; on failure nothing is
        modified.

        Raises
        ------
        InvalidLodgingFieldError
            If the updated lodging would violate an invariant
        """
        current = self._fields()
        unknown = set(changes) - set(current)
        if unknown:
            msg = f"Unknown lodging field(s): {', '.join(sorted(unknown))}"
            raise InvalidLodgingFieldError(sorted(unknown)[0], msg)

        merged = {
            key: changes[key] if changes.get(key) is not None else value
            for key, value in current.items()
        }
        self._apply(**merged)

    def _fields(self) -> dict:
        return {
            "name": self._name,
            "address": self._address,
            "city": self._city,
            "country": self._country,
            "description": self._description,
            "price": self._price,
            "stars": self._stars,
            "average_customer_rating": self._average_customer_rating,
            "category": self._category,
            "available_from": self._available_from,
            "available_to": self._available_to,
            "max_occupancy": self._max_occupancy,
            "check_in_time": self._check_in_time,
            "check_out_time": self._check_out_time,
            "is_favorite": self._is_favorite,
            "photos": self._photos,
            "amenities": self._amenities,
            "room_size_square_meters": self._room_size_square_meters,
            "is_pet_friendly": self._is_pet_friendly,
            "has_parking": self._has_parking,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Lodging):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Lodging(id={self._id!r}, name={self._name!r}, city={self._city!r})"


def _bounded(field: str, value: Optional[str], max_length: int) -> str:
    stripped = (value or "").strip()
    if len(stripped) > max_length:
        msg = f"{field} must be at most {max_length} characters"
        raise InvalidLodgingFieldError(field, msg)
    return stripped


def _required(field: str, value: Optional[str], max_length: int) -> str:
    stripped = _bounded(field, value, max_length)
    if not stripped:
        raise InvalidLodgingFieldError(field, f"{field} is required")
    return stripped


def _to_price(value: Union[Decimal, int, str, float]) -> Decimal:
    try:
        price = value if isinstance(value, Decimal) else Decimal(str(value))
    except ArithmeticError:
        raise InvalidLodgingFieldError("price", f"Invalid price: {value}") from None
    if not price.is_finite():
        raise InvalidLodgingFieldError("price", f"Invalid price: {value}")

    price = price.quantize(CENT, rounding=ROUND_HALF_UP)
    if price < 0:
        raise InvalidLodgingFieldError("price", "price must not be negative")
    if price > MAX_PRICE:
        raise InvalidLodgingFieldError("price", f"price must be at most {MAX_PRICE}")
    return price


def _to_photos(photos: Optional[Iterable[Photo]]) -> tuple[Photo, ...]:
    result = tuple(photos or ())
    if len(result) > MAX_PHOTOS:
        raise InvalidLodgingFieldError(
            "photos", f"at most {MAX_PHOTOS} photos are allowed"
        )
    if sum(1 for photo in result if photo.is_main) > 1:
        raise InvalidLodgingFieldError("photos", "only one photo can be the main photo")
    if len({photo.url for photo in result}) != len(result):
        raise InvalidLodgingFieldError("photos", "photo URLs must be unique")
    return result


def _to_amenities(amenities: Optional[Iterable[str]]) -> tuple[str, ...]:
    seen: dict[str, str] = {}
    for raw in amenities or ():
        name = _bounded("amenities", raw, MAX_AMENITY_LENGTH)
        if name:
            seen.setdefault(name.casefold(), name)
    if len(seen) > MAX_AMENITIES:
        raise InvalidLodgingFieldError(
            "amenities", f"at most {MAX_AMENITIES} amenities are allowed"
        )
    return tuple(seen.values())


def _to_room_size(value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise InvalidLodgingFieldError(
            "room_size_square_meters", f"Invalid room size: {value}"
        )
    size = float(value)
    if not math.isfinite(size) or size <= 0:
        raise InvalidLodgingFieldError(
            "room_size_square_meters", "room_size_square_meters must be positive"
        )
    return size
