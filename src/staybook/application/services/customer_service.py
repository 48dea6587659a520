"""Customer service: login, registration, profile management and statistics."""

from __future__ import annotations

import logging
from collections import Counter
from datetime import date
from typing import TYPE_CHECKING, Optional

from staybook.application.dtos import (
    CustomerDTO,
    CustomerListResult,
    CustomerRegistration,
    CustomerStatistics,
    CustomerUpdate,
    LoginResult,
)
from staybook.domain.customer import (
    Customer,
    CustomerNotFoundError,
    DuplicateUserError,
    Email,
)
from staybook.domain.shared.exceptions import FieldValidationError
from staybook.domain.shared.time import add_months, today_utc
from staybook_auth import InvalidCredentialsError, JWTService, PasswordHasher

if TYPE_CHECKING:
    from staybook.domain.customer import CustomerRepository

logger = logging.getLogger(__name__)

UNSPECIFIED_COUNTRY = "Unspecified"
DEFAULT_PASSPORT_HORIZON_MONTHS = 6


class CustomerService:
    """
    Application service for customers.

    Bridges the generic auth building blocks (password hasher, JWT issuer)
    with the Customer aggregate and its repository:
    - Login with username and password
    - Registration with field validation and duplicate detection
    - Profile read/update/delete
    - Administrative listings and statistics
    """

    def __init__(
        self,
        customer_repository: CustomerRepository,
        password_hasher: PasswordHasher,
        jwt_service: JWTService,
        passport_horizon_months: int = DEFAULT_PASSPORT_HORIZON_MONTHS,
    ):
        self._customer_repo = customer_repository
        self._password_hasher = password_hasher
        self._jwt_service = jwt_service
        self._passport_horizon_months = passport_horizon_months

    async def login(self, username: str, password: str) -> LoginResult:
        """
        Verify credentials and issue a bearer token.

        Parameters
        ----------
        username
            Login name (case-sensitive; surrounding whitespace is ignored)
        password
            Plaintext password

        Returns
        -------
        LoginResult with the signed token and the customer's profile

        Raises
        ------
        InvalidCredentialsError
            For an unknown username and for a wrong password alike
        """
        # Usernames are stored stripped
        customer = await self._customer_repo.find_by_username((username or "").strip())
        if customer is None:
            logger.warning("Login failed: unknown username")
            raise InvalidCredentialsError

        if not self._password_hasher.verify(password or "", customer.password_hash):
            logger.warning("Login failed for customer %s", customer.id)
            raise InvalidCredentialsError

        token = self._jwt_service.issue(
            subject=customer.username,
            extra_claims={
                "customer_id": customer.id,
                "email": customer.email,
                "name": customer.full_name,
            },
        )

        logger.info("Customer logged in: %s", customer.id)
        return LoginResult(
            token=token,
            expires_in=self._jwt_service.expire_seconds,
            customer=CustomerDTO.from_customer(customer),
        )

    async def create(self, registration: CustomerRegistration) -> CustomerDTO:
        """
        Register a new customer.

        Raises
        ------
        InvalidCustomerFieldError
            If any field is invalid (checked before touching the store)
        DuplicateUserError
            If the username or email is already registered
        """
        # Dry run of every field rule before the duplicate lookup and hashing
        Customer.validate_password(registration.password)
        self._build_customer(registration, password_hash="-")

        email = Email(registration.email).value
        if await self._customer_repo.exists_by_username_or_email(
            registration.username.strip(), email
        ):
            logger.warning("Registration rejected: username or email already taken")
            raise DuplicateUserError(registration.username, registration.email)

        password_hash = self._password_hasher.hash(registration.password)
        customer = self._build_customer(registration, password_hash=password_hash)
        saved = await self._customer_repo.save(customer)

        logger.info("Customer registered: %s", saved.id)
        return CustomerDTO.from_customer(saved)

    @staticmethod
    def _build_customer(
        registration: CustomerRegistration, password_hash: str
    ) -> Customer:
        return Customer.register(
            username=registration.username,
            email=registration.email,
            password_hash=password_hash,
            first_name=registration.first_name,
            last_name=registration.last_name,
            date_of_birth=registration.date_of_birth,
            passport_number=registration.passport_number,
            passport_expiry=registration.passport_expiry,
            phone_number=registration.phone_number,
            country_of_residence=registration.country_of_residence,
            frequent_flyer_program=registration.frequent_flyer_program,
        )

    async def update(self, customer_id: str, update: CustomerUpdate) -> CustomerDTO:
        customer = await self._get_customer(customer_id)
        customer.update_profile(
            first_name=update.first_name,
            last_name=update.last_name,
            passport_number=update.passport_number,
            passport_expiry=update.passport_expiry,
            phone_number=update.phone_number,
            country_of_residence=update.country_of_residence,
            frequent_flyer_program=update.frequent_flyer_program,
        )
        saved = await self._customer_repo.save(customer)

        logger.info("Customer updated: %s", customer_id)
        return CustomerDTO.from_customer(saved)

    async def delete(self, customer_id: str) -> None:
        deleted = await self._customer_repo.delete(customer_id)
        if not deleted:
            raise CustomerNotFoundError(customer_id)
        logger.info("Customer deleted: %s", customer_id)

    async def find_by_id(self, customer_id: str) -> CustomerDTO:
        customer = await self._get_customer(customer_id)
        return CustomerDTO.from_customer(customer)

    async def find_by_username(self, username: str) -> CustomerDTO:
        customer = await self._customer_repo.find_by_username(username)
        if customer is None:
            raise CustomerNotFoundError(username)
        return CustomerDTO.from_customer(customer)

    async def find_all(self) -> CustomerListResult:
        customers = await self._customer_repo.find_all()
        logger.debug("Listing %d customers", len(customers))
        return _to_list_result(customers)

    async def find_by_name(self, name: str) -> CustomerListResult:
        """
        Search customers by first or last name (substring, any case).

        Raises
        ------
        FieldValidationError
            If ``name`` is blank
        """
        needle = (name or "").strip()
        if not needle:
            raise FieldValidationError("name", "name is required")
        customers = await self._customer_repo.find_by_name(needle)
        return _to_list_result(customers)

    async def find_by_country(self, country: str) -> CustomerListResult:
        customers = await self._customer_repo.find_by_country(country)
        return _to_list_result(customers)

    async def find_by_passport_expiry_before(self, day: date) -> CustomerListResult:
        customers = await self._customer_repo.find_by_passport_expiry_before(day)
        return _to_list_result(customers)

    async def get_statistics(self, today: Optional[date] = None) -> CustomerStatistics:
        """
        Compute aggregate figures over all customers.

        Parameters
        ----------
        today
            Reference date for ages and passport expiry (defaults to today, UTC)

        Returns
        -------
        CustomerStatistics; average_age is 0.0 when there are no customers
        """
        today = today or today_utc()
        horizon = add_months(today, self._passport_horizon_months)
        customers = await self._customer_repo.find_all()

        by_country = Counter(
            c.country_of_residence or UNSPECIFIED_COUNTRY for c in customers
        )
        ages = [c.age(today) for c in customers]
        average_age = round(sum(ages) / len(ages), 2) if ages else 0.0

        return CustomerStatistics(
            total_customers=len(customers),
            customers_by_country=dict(sorted(by_country.items())),
            average_age=average_age,
            expiring_passports_count=sum(
                1 for c in customers if c.passport_expires_between(today, horizon)
            ),
            customers_without_passport=sum(1 for c in customers if not c.has_passport),
        )

    async def _get_customer(self, customer_id: str) -> Customer:
        customer = await self._customer_repo.find_by_id(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        return customer


def _to_list_result(customers: list[Customer]) -> CustomerListResult:
    today = today_utc()
    return CustomerListResult(
        customers=[CustomerDTO.from_customer(c, today) for c in customers],
    )
