"""Phone number value object."""

import re
from dataclasses import dataclass

from staybook.domain.customer.exceptions import InvalidPhoneNumberError

# Optional leading +, no leading zero, at most 15 digits
PHONE_PATTERN = re.compile(r"^\+?[1-9]\d{1,14}$")


@dataclass(frozen=True)
class PhoneNumber:
    """Value object for an E.164-like phone number."""

    value: str

    def __post_init__(self) -> None:
        normalized = (self.value or "").strip()
        if not PHONE_PATTERN.match(normalized):
            msg = f"Invalid phone number format: {self.value}"
            raise InvalidPhoneNumberError(msg)
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
