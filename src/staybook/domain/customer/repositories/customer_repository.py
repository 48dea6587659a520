"""Customer repository interface."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from staybook.domain.customer.aggregates.customer import Customer


class CustomerRepository(ABC):
    """Repository interface for Customer aggregates."""

    @abstractmethod
    async def find_by_id(self, customer_id: str) -> Optional[Customer]:
        """
        Find a customer by ID.

        Parameters
        ----------
        customer_id
            Opaque customer identifier; unknown values simply return None

        Returns
        -------
        Customer if found, None otherwise
        """

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[Customer]:
        """
        Find a customer by username (exact, case-sensitive match).

        Returns
        -------
        Customer if found, None otherwise
        """

    @abstractmethod
    async def exists_by_username_or_email(self, username: str, email: str) -> bool:
        """
        Check whether the username or the (normalized) email is taken.

        Parameters
        ----------
        username
            Username to check (case-sensitive)
        email
            Email address to check (compared in lower case)

        Returns
        -------
        True if either value is already registered
        """

    @abstractmethod
    async def find_all(self) -> list[Customer]:
        """Return every customer, ordered by username."""

    @abstractmethod
    async def find_by_name(self, name: str) -> list[Customer]:
        """
        Return customers whose first or last name contains ``name``.

        The match ignores case; results are ordered by username.
        """

    @abstractmethod
    async def find_by_country(self, country: str) -> list[Customer]:
        """Return customers whose country of residence equals ``country``."""

    @abstractmethod
    async def find_by_passport_expiry_before(self, day: date) -> list[Customer]:
        """Return customers with a passport expiring strictly before ``day``."""

    @abstractmethod
    async def save(self, customer: Customer) -> Customer:
        """
        Insert or update a customer.

        The store stamps audit timestamps; the returned customer carries them.

        Parameters
        ----------
        customer
            The customer to save

        Returns
        -------
        The persisted customer with its audit stamp
        """

    @abstractmethod
    async def delete(self, customer_id: str) -> bool:
        """
        Delete a customer by ID.

        Returns
        -------
        True if a row was deleted, False if the customer did not exist
        """
