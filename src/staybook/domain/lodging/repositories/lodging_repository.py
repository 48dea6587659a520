"""Lodging repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from staybook.domain.lodging.entities.lodging import Lodging
from staybook.domain.lodging.value_objects import Category


class LodgingRepository(ABC):
    """Repository interface for Lodging entities."""

    @abstractmethod
    async def find_by_id(self, lodging_id: str) -> Optional[Lodging]:
        """
        Find a lodging by ID.

        Returns
        -------
        Lodging if found, None otherwise
        """

    @abstractmethod
    async def find_all(
        self, limit: Optional[int] = None, offset: int = 0
    ) -> list[Lodging]:
        """
        Return lodgings ordered by name.

        Parameters
        ----------
        limit
            Maximum number of lodgings (None for all)
        offset
            Number of lodgings to skip
        """

    @abstractmethod
    async def count(self) -> int:
        """Return the total number of lodgings."""

    @abstractmethod
    async def find_by_category(self, category: Category) -> list[Lodging]:
        """Return lodgings of one category, ordered by name."""

    @abstractmethod
    async def count_by_category(self) -> dict[Category, int]:
        """Return the number of lodgings per category (absent ones omitted)."""

    @abstractmethod
    async def find_distinct_cities(self) -> list[str]:
        """Return distinct city names in ascending order."""

    @abstractmethod
    async def save(self, lodging: Lodging) -> Lodging:
        """
        Insert or update a lodging.

        Returns
        -------
        The persisted lodging with its audit stamp
        """

    @abstractmethod
    async def delete(self, lodging_id: str) -> bool:
        """
        Delete a lodging by ID.

        Returns
        -------
        True if a row was deleted, False if the lodging did not exist
        """
