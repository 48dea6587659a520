from staybook.domain.lodging.entities.lodging import (
    DEFAULT_CHECK_IN_TIME,
    DEFAULT_CHECK_OUT_TIME,
    MAX_STARS,
    MIN_STARS,
    Lodging,
)

__all__ = [
    "DEFAULT_CHECK_IN_TIME",
    "DEFAULT_CHECK_OUT_TIME",
    "Lodging",
    "MAX_STARS",
    "MIN_STARS",
]
