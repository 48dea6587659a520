"""SQLAlchemy implementation of CustomerRepository."""

import logging
from datetime import date
from typing import Optional

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from staybook.domain.customer import Customer, CustomerRepository, DuplicateUserError
from staybook.domain.shared.time import utc_now
from staybook.infrastructure.persistence.sqlalchemy.models import CustomerModel
from staybook.infrastructure.persistence.sqlalchemy.repositories._utils import (
    audit_stamp,
)

logger = logging.getLogger(__name__)


class CustomerRepositorySQLAlchemy(CustomerRepository):
    """SQLAlchemy implementation of the CustomerRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, customer_id: str) -> Optional[Customer]:
        model = await self._find_model_by_id(customer_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_by_username(self, username: str) -> Optional[Customer]:
        stmt = select(CustomerModel).where(CustomerModel.username == username)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def exists_by_username_or_email(self, username: str, email: str) -> bool:
        stmt = select(func.count()).select_from(CustomerModel).where(
            or_(
                CustomerModel.username == username,
                CustomerModel.email == email.strip().lower(),
            ),
        )
        result = await self._session.execute(stmt)
        return result.scalar_one() > 0

    async def find_all(self) -> list[Customer]:
        stmt = select(CustomerModel).order_by(CustomerModel.username)
        return await self._fetch(stmt)

    async def find_by_name(self, name: str) -> list[Customer]:
        needle = name.strip().lower()
        stmt = (
            select(CustomerModel)
            .where(
                or_(
                    func.lower(CustomerModel.first_name).contains(
                        needle, autoescape=True
                    ),
                    func.lower(CustomerModel.last_name).contains(
                        needle, autoescape=True
                    ),
                ),
            )
            .order_by(CustomerModel.username)
        )
        return await self._fetch(stmt)

    async def find_by_country(self, country: str) -> list[Customer]:
        stmt = (
            select(CustomerModel)
            .where(CustomerModel.country_of_residence == country)
            .order_by(CustomerModel.username)
        )
        return await self._fetch(stmt)

    async def find_by_passport_expiry_before(self, day: date) -> list[Customer]:
        stmt = (
            select(CustomerModel)
            .where(
                CustomerModel.passport_expiry.is_not(None),
                CustomerModel.passport_expiry < day,
            )
            .order_by(CustomerModel.passport_expiry, CustomerModel.username)
        )
        return await self._fetch(stmt)

    async def save(self, customer: Customer) -> Customer:
        existing = await self._find_model_by_id(customer.id)
        now = utc_now()

        try:
            if existing:
                self._update_model(existing, customer)
                existing.updated_at = now
                model = existing
                logger.debug("Updated customer: %s", customer.id)
            else:
                model = self._map_to_model(customer)
                model.created_at = now
                model.updated_at = now
                self._session.add(model)
                logger.debug("Created customer: %s", customer.id)

            await self._session.flush()
        except IntegrityError as e:
            # Unique constraint on username or email (lost a race with another
            # registration)
            raise DuplicateUserError(customer.username, customer.email) from e

        return self._map_to_domain(model)

    async def delete(self, customer_id: str) -> bool:
        model = await self._find_model_by_id(customer_id)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()
        logger.debug("Deleted customer: %s", customer_id)
        return True

    async def _fetch(self, stmt) -> list[Customer]:
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def _find_model_by_id(self, customer_id: str) -> Optional[CustomerModel]:
        stmt = select(CustomerModel).where(CustomerModel.id == customer_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: CustomerModel) -> Customer:
        return Customer(
            id=model.id,
            username=model.username,
            email=model.email,
            password_hash=model.password_hash,
            first_name=model.first_name,
            last_name=model.last_name,
            date_of_birth=model.date_of_birth,
            passport_number=model.passport_number,
            passport_expiry=model.passport_expiry,
            phone_number=model.phone_number,
            country_of_residence=model.country_of_residence,
            frequent_flyer_program=model.frequent_flyer_program,
            audit=audit_stamp(model),
        )

    def _map_to_model(self, customer: Customer) -> CustomerModel:
        return CustomerModel(
            id=customer.id,
            username=customer.username,
            email=customer.email,
            password_hash=customer.password_hash,
            first_name=customer.first_name,
            last_name=customer.last_name,
            date_of_birth=customer.date_of_birth,
            passport_number=customer.passport_number,
            passport_expiry=customer.passport_expiry,
            phone_number=customer.phone_number,
            country_of_residence=customer.country_of_residence,
            frequent_flyer_program=customer.frequent_flyer_program,
        )

    def _update_model(self, model: CustomerModel, customer: Customer) -> None:
        # id and username never change
        model.email = customer.email
        model.password_hash = customer.password_hash
        model.first_name = customer.first_name
        model.last_name = customer.last_name
        model.date_of_birth = customer.date_of_birth
        model.passport_number = customer.passport_number
        model.passport_expiry = customer.passport_expiry
        model.phone_number = customer.phone_number
        model.country_of_residence = customer.country_of_residence
        model.frequent_flyer_program = customer.frequent_flyer_program
