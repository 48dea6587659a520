"""Lodging domain - bookable places and their availability."""

from staybook.domain.lodging.entities import Lodging
from staybook.domain.lodging.exceptions import (
    InvalidCategoryError,
    InvalidLodgingFieldError,
    LodgingHasReservationsError,
    LodgingNotFoundError,
)
from staybook.domain.lodging.repositories import LodgingRepository
from staybook.domain.lodging.value_objects import (
    Category,
    Photo,
    PhotoType,
    RatingGrade,
)

__all__ = [
    "Category",
    "InvalidCategoryError",
    "InvalidLodgingFieldError",
    "Lodging",
    "LodgingHasReservationsError",
    "LodgingNotFoundError",
    "LodgingRepository",
    "Photo",
    "PhotoType",
    "RatingGrade",
]
