"""Lodging photos."""

from dataclasses import dataclass
from enum import Enum

from staybook.domain.lodging.exceptions import InvalidLodgingFieldError

MAX_URL_LENGTH = 500
MAX_ALT_TEXT_LENGTH = 255


class PhotoType(str, Enum):
    """What a photo shows."""

    ROOM = "ROOM"
    EXTERIOR = "EXTERIOR"
    BATHROOM = "BATHROOM"
    VIEW = "VIEW"
    AMENITY = "AMENITY"
    RESTAURANT = "RESTAURANT"
    POOL = "POOL"
    GYM = "GYM"
    COMMON_AREA = "COMMON_AREA"

    @classmethod
    def parse(cls, value: "str | PhotoType") -> "PhotoType":
        if isinstance(value, PhotoType):
            return value
        key = (value or "").strip().replace(" ", "_").replace("-", "_").upper()
        try:
            return cls[key]
        except KeyError:
            raise InvalidLodgingFieldError(
                "photos", f"Unknown photo type: {value}"
            ) from None


@dataclass(frozen=True)
class Photo:
    """
    A picture of a lodging, referenced by URL.

    Attributes
    ----------
    url
        Absolute http(s) URL, at most 500 characters
    alt_text
        Text alternative for screen readers
    is_main
        Marks the photo shown first in listings
    photo_type
        PhotoType or any spelling ``PhotoType.parse`` accepts
    """

    url: str
    alt_text: str = ""
    is_main: bool = False
    photo_type: PhotoType = PhotoType.ROOM

    def __post_init__(self) -> None:
        url = (self.url or "").strip()
        if not url.startswith(("http://", "https://")):
            msg = f"Photo URL must start with http:// or https://: {self.url}"
            raise InvalidLodgingFieldError("photos", msg)
        if len(url) > MAX_URL_LENGTH:
            msg = f"Photo URL must be at most {MAX_URL_LENGTH} characters"
            raise InvalidLodgingFieldError("photos", msg)

        alt_text = (self.alt_text or "").strip()
        if len(alt_text) > MAX_ALT_TEXT_LENGTH:
            msg = f"Photo alt text must be at most {MAX_ALT_TEXT_LENGTH} characters"
            raise InvalidLodgingFieldError("photos", msg)

        object.__setattr__(self, "url", url)
        object.__setattr__(self, "alt_text", alt_text)
        object.__setattr__(self, "is_main", bool(self.is_main))
        object.__setattr__(self, "photo_type", PhotoType.parse(self.photo_type))
