"""Verbal grade derived from the average customer rating."""

from enum import Enum

MIN_RATING = 1
MAX_RATING = 10


class RatingGrade(Enum):
    """Closed set of grades, each covering a band of the 1-10 rating."""

    POOR = ("Poor", 1, 3)
    BAD = ("Bad", 4, 5)
    FAIR = ("Fair", 6, 7)
    GOOD = ("Good", 8, 8)
    VERY_GOOD = ("Very good", 9, 9)
    EXCELLENT = ("Excellent", 10, 10)

    def __init__(self, label: str, low: int, high: int) -> None:
        self.label = label
        self.low = low
        self.high = high

    @classmethod
    def from_rating(cls, rating: int) -> "RatingGrade":
        if not MIN_RATING <= rating <= MAX_RATING:
            msg = f"Rating must be between {MIN_RATING} and {MAX_RATING}"
            raise ValueError(msg)
        return next(grade for grade in cls if grade.low <= rating <= grade.high)
