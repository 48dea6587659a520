"""Lodging category."""

import unicodedata
from enum import Enum

from staybook.domain.lodging.exceptions import InvalidCategoryError


class Category(str, Enum):
    """Closed set of lodging categories."""

    HOTEL = "HOTEL"
    HOSTEL = "HOSTEL"
    DEPARTMENT = "DEPARTMENT"
    BED_AND_BREAKFAST = "BED_AND_BREAKFAST"

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").capitalize()

    @classmethod
    def parse(cls, value: "str | Category") -> "Category":
        """
        Parse a category leniently.

        Accepts the enum name in any case, the display name, and spellings
        with accents or dashes ("Bed and breakfast", "bed-and-breakfast",
        "Hôtel").

        Raises
        ------
        InvalidCategoryError
            If the value does not name a category
        """
        if isinstance(value, Category):
            return value
        key = _normalize(value or "")
        try:
            return cls[key]
        except KeyError:
            raise InvalidCategoryError(value) from None


def _normalize(value: str) -> str:
    decomposed = unicodedata.normalize("NFD", value)
    ascii_only = decomposed.encode("ascii", "ignore").decode("ascii")
    words = ascii_only.replace("-", " ").replace("_", " ").split()
    return "_".join(words).upper()
