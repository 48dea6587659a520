"""Unit tests for CustomerService."""

from datetime import date
from unittest.mock import AsyncMock, Mock

import pytest

from staybook.application.dtos import CustomerRegistration, CustomerUpdate
from staybook.application.services import CustomerService
from staybook.domain.customer import (
    CustomerNotFoundError,
    DuplicateUserError,
    InvalidCustomerFieldError,
    InvalidEmailError,
)
from staybook.domain.shared.exceptions import FieldValidationError
from staybook_auth import InvalidCredentialsError, JWTService, PasswordHasher, RSAKeyPair
from tests.shared.fixtures.factories import TEST_PASSWORD, TODAY, CustomerFactory


@pytest.fixture(scope="module")
def jwt_service() -> JWTService:
    return JWTService(key_pair=RSAKeyPair.generate(), expire_seconds=900)


def _registration(**overrides) -> CustomerRegistration:
    fields = {
        "username": "carol",
        "email": "Carol@Example.com",
        "password": TEST_PASSWORD,
        "first_name": "Carol",
        "last_name": "Jones",
        "date_of_birth": date(1985, 11, 2),
        "country_of_residence": "Spain",
    }
    fields.update(overrides)
    return CustomerRegistration(**fields)


class _ServiceTestBase:
    @pytest.fixture(autouse=True)
    def _service(self, jwt_service):
        self.customer_repo = AsyncMock()
        self.customer_repo.save.side_effect = lambda customer: customer
        self.password_hasher = Mock(spec=PasswordHasher)
        self.password_hasher.hash.return_value = "hashed-password"
        self.jwt_service = jwt_service

        self.service = CustomerService(
            customer_repository=self.customer_repo,
            password_hasher=self.password_hasher,
            jwt_service=self.jwt_service,
            passport_horizon_months=6,
        )


class TestCustomerServiceLogin(_ServiceTestBase):
    """Tests for login."""

    async def test_login_success(self):
        """Valid credentials yield a token carrying the customer id."""
        alice = CustomerFactory.alice()
        self.customer_repo.find_by_username.return_value = alice
        self.password_hasher.verify.return_value = True

        result = await self.service.login("alice", TEST_PASSWORD)

        payload = self.jwt_service.verify_token(result.token)
        assert payload.subject == "alice"
        assert payload.customer_id == alice.id
        assert payload.email == "alice@example.com"
        assert result.expires_in == 900
        assert result.token_type == "Bearer"
        assert result.customer.username == "alice"
        self.password_hasher.verify.assert_called_once_with(
            TEST_PASSWORD, alice.password_hash
        )

    async def test_login_unknown_username(self):
        self.customer_repo.find_by_username.return_value = None

        with pytest.raises(InvalidCredentialsError):
            await self.service.login("nobody", TEST_PASSWORD)

        self.password_hasher.verify.assert_not_called()

    async def test_login_wrong_password(self):
        """Same error as for an unknown user (no username enumeration)."""
        self.customer_repo.find_by_username.return_value = CustomerFactory.alice()
        self.password_hasher.verify.return_value = False

        with pytest.raises(InvalidCredentialsError) as exc_info:
            await self.service.login("alice", "wrong-password")

        assert exc_info.value.message == "Invalid username or password"

    async def test_login_with_missing_fields(self):
        self.customer_repo.find_by_username.return_value = None

        with pytest.raises(InvalidCredentialsError):
            await self.service.login(None, None)

    async def test_login_strips_username(self):
        """Registration stores usernames stripped, so login looks them up stripped."""
        alice = CustomerFactory.alice()
        self.customer_repo.find_by_username.return_value = alice
        self.password_hasher.verify.return_value = True

        result = await self.service.login("  alice \t", TEST_PASSWORD)

        assert result.customer.username == "alice"
        self.customer_repo.find_by_username.assert_awaited_once_with("alice")


class TestCustomerServiceCreate(_ServiceTestBase):
    """Tests for registration."""

    async def test_create_success(self):
        self.customer_repo.exists_by_username_or_email.return_value = False

        dto = await self.service.create(_registration())

        assert dto.username == "carol"
        assert dto.email == "carol@example.com"
        self.customer_repo.exists_by_username_or_email.assert_called_once_with(
            "carol", "carol@example.com"
        )
        self.password_hasher.hash.assert_called_once_with(TEST_PASSWORD)
        saved = self.customer_repo.save.call_args[0][0]
        assert saved.password_hash == "hashed-password"

    async def test_create_duplicate(self):
        self.customer_repo.exists_by_username_or_email.return_value = True

        with pytest.raises(DuplicateUserError):
            await self.service.create(_registration())

        self.password_hasher.hash.assert_not_called()
        self.customer_repo.save.assert_not_called()

    async def test_invalid_field_reported_before_duplicate_check(self):
        """Field validation runs before the store is consulted."""
        with pytest.raises(InvalidEmailError):
            await self.service.create(_registration(email="not-an-email"))

        self.customer_repo.exists_by_username_or_email.assert_not_called()

    async def test_short_password(self):
        with pytest.raises(InvalidCustomerFieldError) as exc_info:
            await self.service.create(_registration(password="short"))

        assert exc_info.value.field == "password"
        self.customer_repo.exists_by_username_or_email.assert_not_called()

    async def test_future_birth_date(self):
        with pytest.raises(InvalidCustomerFieldError) as exc_info:
            await self.service.create(_registration(date_of_birth=date(2999, 1, 1)))

        assert exc_info.value.field == "date_of_birth"


class TestCustomerServiceProfile(_ServiceTestBase):
    """Tests for reading, updating and deleting profiles."""

    async def test_find_by_id_not_found(self):
        self.customer_repo.find_by_id.return_value = None

        with pytest.raises(CustomerNotFoundError, match="missing-id"):
            await self.service.find_by_id("missing-id")

    async def test_update(self):
        self.customer_repo.find_by_id.return_value = CustomerFactory.alice()

        dto = await self.service.update(
            CustomerFactory.ALICE_ID,
            CustomerUpdate(last_name="Schmidt", phone_number="+4930123456"),
        )

        assert dto.last_name == "Schmidt"
        assert dto.first_name == "Alice"
        assert dto.phone_number == "+4930123456"
        self.customer_repo.save.assert_called_once()

    async def test_update_not_found(self):
        self.customer_repo.find_by_id.return_value = None

        with pytest.raises(CustomerNotFoundError):
            await self.service.update("missing-id", CustomerUpdate(first_name="X"))

        self.customer_repo.save.assert_not_called()

    async def test_delete(self):
        self.customer_repo.delete.return_value = True

        await self.service.delete(CustomerFactory.ALICE_ID)

        self.customer_repo.delete.assert_called_once_with(CustomerFactory.ALICE_ID)

    async def test_delete_not_found(self):
        self.customer_repo.delete.return_value = False

        with pytest.raises(CustomerNotFoundError):
            await self.service.delete("missing-id")


class TestCustomerServiceListings(_ServiceTestBase):
    """Tests for administrative listings and statistics."""

    async def test_find_by_country(self):
        self.customer_repo.find_by_country.return_value = [CustomerFactory.alice()]

        result = await self.service.find_by_country("Germany")

        assert result.has_results is True
        assert result.count == 1

    async def test_find_by_name(self):
        self.customer_repo.find_by_name.return_value = [CustomerFactory.alice()]

        result = await self.service.find_by_name("  mey ")

        assert result.count == 1
        assert result.customers[0].username == "alice"
        self.customer_repo.find_by_name.assert_awaited_once_with("mey")

    @pytest.mark.parametrize("name", [None, "", "   "])
    async def test_find_by_name_requires_a_name(self, name):
        with pytest.raises(FieldValidationError) as exc_info:
            await self.service.find_by_name(name)

        assert exc_info.value.field == "name"
        self.customer_repo.find_by_name.assert_not_called()

    async def test_empty_listing(self):
        self.customer_repo.find_all.return_value = []

        result = await self.service.find_all()

        assert result.has_results is False

    async def test_statistics(self):
        self.customer_repo.find_all.return_value = [
            CustomerFactory.alice(),  # Germany, 35, passport until 2030
            CustomerFactory.bob(),  # no country, 15, no passport
            CustomerFactory.alice(
                id="dddddddd-dddd-dddd-dddd-dddddddddddd",
                username="dora",
                email="dora@example.com",
                date_of_birth=date(2000, 3, 15),
                passport_expiry=date(2026, 6, 1),
            ),
        ]

        stats = await self.service.get_statistics(today=TODAY)

        assert stats.total_customers == 3
        assert stats.customers_by_country == {"Germany": 2, "Unspecified": 1}
        assert stats.average_age == 25.33
        assert stats.expiring_passports_count == 1
        assert stats.customers_without_passport == 1

    async def test_statistics_without_customers(self):
        self.customer_repo.find_all.return_value = []

        stats = await self.service.get_statistics(today=TODAY)

        assert stats.total_customers == 0
        assert stats.average_age == 0.0
        assert stats.customers_by_country == {}
