from datetime import date
from typing import Optional, Union
from uuid import uuid4

from staybook.domain.customer.exceptions import InvalidCustomerFieldError
from staybook.domain.customer.value_objects import Email, PhoneNumber
from staybook.domain.shared.audit import AuditStamp
from staybook.domain.shared.exceptions import ErrorCode
from staybook.domain.shared.time import today_utc, years_between

MIN_USERNAME_LENGTH = 3
MAX_USERNAME_LENGTH = 50
MAX_NAME_LENGTH = 100
MAX_PASSPORT_NUMBER_LENGTH = 50
MAX_COUNTRY_LENGTH = 100
MAX_PROGRAM_LENGTH = 100
MIN_PASSWORD_LENGTH = 8
# bcrypt only looks at the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72
ADULT_AGE = 18


def _required(field: str, value: Optional[str], max_length: int) -> str:
    stripped = (value or "").strip()
    if not stripped:
        raise InvalidCustomerFieldError(field, f"{field} is required")
    if len(stripped) > max_length:
        msg = f"{field} must be at most {max_length} characters"
        raise InvalidCustomerFieldError(field, msg)
    return stripped


def _optional(field: str, value: Optional[str], max_length: int) -> Optional[str]:
    stripped = (value or "").strip()
    if len(stripped) > max_length:
        msg = f"{field} must be at most {max_length} characters"
        raise InvalidCustomerFieldError(field, msg)
    return stripped or None


class Customer:
    """
    Customer aggregate root.

    Holds the login identity (username, email, password hash) and the
    traveller profile. Structural rules are checked on every construction;
    rules relative to today (birth date, passport expiry) are checked when
    a customer registers or edits the profile.
    """

    def __init__(  # NOQA: PLR0913
        self,
        username: str,
        email: Union[str, Email],
        password_hash: str,
        first_name: str,
        last_name: str,
        date_of_birth: date,
        passport_number: Optional[str] = None,
        passport_expiry: Optional[date] = None,
        phone_number: Optional[Union[str, PhoneNumber]] = None,
        country_of_residence: Optional[str] = None,
        frequent_flyer_program: Optional[str] = None,
        id: Optional[str] = None,
        audit: Optional[AuditStamp] = None,
    ):
        username = (username or "").strip()
        if len(username) < MIN_USERNAME_LENGTH:
            msg = f"username must be at least {MIN_USERNAME_LENGTH} characters"
            raise InvalidCustomerFieldError("username", msg)
        if len(username) > MAX_USERNAME_LENGTH:
            msg = f"username must be at most {MAX_USERNAME_LENGTH} characters"
            raise InvalidCustomerFieldError("username", msg)
        if not password_hash:
            raise InvalidCustomerFieldError("password", "password hash is required")
        if date_of_birth is None:
            raise InvalidCustomerFieldError("date_of_birth", "date_of_birth is required")

        self._id = id if id is not None else str(uuid4())
        self._username = username
        self._email = email if isinstance(email, Email) else Email(email)
        self._password_hash = password_hash
        self._first_name = _required("first_name", first_name, MAX_NAME_LENGTH)
        self._last_name = _required("last_name", last_name, MAX_NAME_LENGTH)
        self._date_of_birth = date_of_birth
        self._passport_number = _optional(
            "passport_number", passport_number, MAX_PASSPORT_NUMBER_LENGTH
        )
        self._passport_expiry = passport_expiry
        self._phone_number = self._to_phone(phone_number)
        self._country_of_residence = _optional(
            "country_of_residence", country_of_residence, MAX_COUNTRY_LENGTH
        )
        self._frequent_flyer_program = _optional(
            "frequent_flyer_program", frequent_flyer_program, MAX_PROGRAM_LENGTH
        )
        self._audit = audit

    @staticmethod
    def _to_phone(value: Optional[Union[str, PhoneNumber]]) -> Optional[PhoneNumber]:
        if value is None or isinstance(value, PhoneNumber):
            return value
        if not value.strip():
            return None
        return PhoneNumber(value)

    @property
    def id(self) -> str:
        return self._id

    @property
    def username(self) -> str:
        return self._username

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def full_name(self) -> str:
        return f"{self._first_name} {self._last_name}"

    @property
    def date_of_birth(self) -> date:
        return self._date_of_birth

    @property
    def passport_number(self) -> Optional[str]:
        return self._passport_number

    @property
    def passport_expiry(self) -> Optional[date]:
        return self._passport_expiry

    @property
    def phone_number(self) -> Optional[str]:
        return self._phone_number.value if self._phone_number else None

    @property
    def country_of_residence(self) -> Optional[str]:
        return self._country_of_residence

    @property
    def frequent_flyer_program(self) -> Optional[str]:
        return self._frequent_flyer_program

    @property
    def audit(self) -> Optional[AuditStamp]:
        return self._audit

    @property
    def has_passport(self) -> bool:
        return bool(self._passport_number) and self._passport_expiry is not None

    def age(self, today: Optional[date] = None) -> int:
        return years_between(self._date_of_birth, today or today_utc())

    def is_adult(self, today: Optional[date] = None) -> bool:
        return self.age(today) >= ADULT_AGE

    def passport_expires_between(self, after: date, before: date) -> bool:
        """Whether the passport expires strictly inside (after, before)."""
        if self._passport_expiry is None:
            return False
        return after < self._passport_expiry < before

    def update_profile(  # NOQA: PLR0913
        self,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        passport_number: Optional[str] = None,
        passport_expiry: Optional[date] = None,
        phone_number: Optional[str] = None,
        country_of_residence: Optional[str] = None,
        frequent_flyer_program: Optional[str] = None,
        today: Optional[date] = None,
    ) -> None:
        # Only provided (non-None) values are validated and changed.
        # Everything is validated before anything is assigned.
        today = today or today_utc()
        new_first = (
            _required("first_name", first_name, MAX_NAME_LENGTH)
            if first_name is not None
            else self._first_name
        )
        new_last = (
            _required("last_name", last_name, MAX_NAME_LENGTH)
            if last_name is not None
            else self._last_name
        )
        if passport_expiry is not None:
            _check_passport_expiry(passport_expiry, today)
        new_phone = (
            self._to_phone(phone_number)
            if phone_number is not None
            else self._phone_number
        )
        new_passport = (
            _optional("passport_number", passport_number, MAX_PASSPORT_NUMBER_LENGTH)
            if passport_number is not None
            else self._passport_number
        )
        new_country = (
            _optional("country_of_residence", country_of_residence, MAX_COUNTRY_LENGTH)
            if country_of_residence is not None
            else self._country_of_residence
        )
        new_program = (
            _optional(
                "frequent_flyer_program", frequent_flyer_program, MAX_PROGRAM_LENGTH
            )
            if frequent_flyer_program is not None
            else self._frequent_flyer_program
        )

        self._first_name = new_first
        self._last_name = new_last
        self._phone_number = new_phone
        self._passport_number = new_passport
        if passport_expiry is not None:
            self._passport_expiry = passport_expiry
        self._country_of_residence = new_country
        self._frequent_flyer_program = new_program

    @staticmethod
    def validate_password(password: Optional[str]) -> None:
        """
        Check plaintext password rules before hashing.

        Raises
        ------
        InvalidCustomerFieldError
            If the password is missing, too short or too long
        """
        if not password:
            raise InvalidCustomerFieldError(
                "password", "password is required", ErrorCode.INVALID_PASSWORD
            )
        if len(password) < MIN_PASSWORD_LENGTH:
            raise InvalidCustomerFieldError(
                "password",
                f"password must be at least {MIN_PASSWORD_LENGTH} characters",
                ErrorCode.INVALID_PASSWORD,
            )
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise InvalidCustomerFieldError(
                "password",
                f"password must be at most {MAX_PASSWORD_BYTES} bytes",
                ErrorCode.INVALID_PASSWORD,
            )

    @classmethod
    def register(  # NOQA: PLR0913
        cls,
        username: str,
        email: Union[str, Email],
        password_hash: str,
        first_name: str,
        last_name: str,
        date_of_birth: date,
        passport_number: Optional[str] = None,
        passport_expiry: Optional[date] = None,
        phone_number: Optional[str] = None,
        country_of_residence: Optional[str] = None,
        frequent_flyer_program: Optional[str] = None,
        today: Optional[date] = None,
    ) -> "Customer":
        """Create a brand-new customer, applying the date rules as of today."""
        today = today or today_utc()
        _check_date_of_birth(date_of_birth, today)
        if passport_expiry is not None:
            _check_passport_expiry(passport_expiry, today)
        return cls(
            username=username,
            email=email,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
            date_of_birth=date_of_birth,
            passport_number=passport_number,
            passport_expiry=passport_expiry,
            phone_number=phone_number,
            country_of_residence=country_of_residence,
            frequent_flyer_program=frequent_flyer_program,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Customer):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Customer(id={self._id!r}, username={self._username!r})"


def _check_date_of_birth(date_of_birth: Optional[date], today: date) -> None:
    if date_of_birth is None:
        raise InvalidCustomerFieldError("date_of_birth", "date_of_birth is required")
    if date_of_birth > today:
        raise InvalidCustomerFieldError(
            "date_of_birth",
            "date_of_birth cannot be in the future",
            ErrorCode.INVALID_DATE,
        )


def _check_passport_expiry(passport_expiry: date, today: date) -> None:
    if passport_expiry < today:
        raise InvalidCustomerFieldError(
            "passport_expiry",
            "passport_expiry cannot be in the past",
            ErrorCode.INVALID_DATE,
        )
