"""
Repository tests against PostgreSQL (asyncpg).

Uses Testcontainers for an ephemeral PostgreSQL instance; skipped unless
integration tests are enabled.
"""

from datetime import timedelta

import pytest

from staybook.domain.customer import DuplicateUserError
from staybook.infrastructure.persistence.sqlalchemy.repositories import (
    CustomerRepositorySQLAlchemy,
    LodgingRepositorySQLAlchemy,
    ReservationRepositorySQLAlchemy,
)
from tests.shared.fixtures.factories import (
    CustomerFactory,
    LodgingFactory,
    ReservationFactory,
)


@pytest.mark.integration
class TestPostgresRepositories:
    @pytest.fixture(autouse=True)
    def _repos(self, postgres_session):
        self.customers = CustomerRepositorySQLAlchemy(postgres_session)
        self.lodgings = LodgingRepositorySQLAlchemy(postgres_session)
        self.reservations = ReservationRepositorySQLAlchemy(postgres_session)

    async def test_duplicate_email_maps_to_domain_error(self):
        await self.customers.save(CustomerFactory.alice())

        with pytest.raises(DuplicateUserError):
            await self.customers.save(CustomerFactory.bob(email="alice@example.com"))

    async def test_overlap_query_and_cascade(self):
        await self.customers.save(CustomerFactory.alice())
        await self.lodgings.save(LodgingFactory.hotel())
        existing = await self.reservations.save(ReservationFactory.upcoming())

        overlapping = await self.reservations.find_overlapping(
            LodgingFactory.HOTEL_ID,
            existing.start_date + timedelta(days=1),
            existing.end_date + timedelta(days=1),
        )
        assert overlapping == [existing]

        await self.lodgings.delete(LodgingFactory.HOTEL_ID)
        assert await self.reservations.find_by_id(existing.id) is None
