from staybook.domain.lodging.value_objects.category import Category
from staybook.domain.lodging.value_objects.photo import Photo, PhotoType
from staybook.domain.lodging.value_objects.rating_grade import (
    MAX_RATING,
    MIN_RATING,
    RatingGrade,
)

__all__ = [
    "Category",
    "MAX_RATING",
    "MIN_RATING",
    "Photo",
    "PhotoType",
    "RatingGrade",
]
