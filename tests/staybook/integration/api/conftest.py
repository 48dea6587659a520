"""Pytest fixtures for API integration tests.

Each test gets a fresh file-backed SQLite database, a freshly generated
RSA signing key and a low-cost bcrypt hasher.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool

from staybook.infrastructure.persistence.sqlalchemy import (
    create_database_engine,
    create_tables,
)
from staybook.presentation.api.app import API_V1_PREFIX, create_app
from staybook.presentation.api.config import get_api_settings
from staybook.presentation.api.dependencies import (
    get_db_session,
    get_jwt_service,
    get_password_hasher,
)
from staybook_auth import ADMIN_SCOPE, BcryptPasswordHasher, JWTService, RSAKeyPair
from staybook_config.settings import Settings
from tests.shared.fixtures.factories import (
    TEST_PASSWORD,
    CustomerFactory,
    LodgingFactory,
)


@pytest.fixture(scope="session")
def signing_key() -> RSAKeyPair:
    """One RSA key for the whole session; generating keys is slow."""
    return RSAKeyPair.generate()


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        postgres_password=SecretStr("test-password"),
        sqlite_path=str(tmp_path / "staybook-api.db"),
        api_host="127.0.0.1",
        api_port=8000,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        password_hash_rounds=4,
    )


@pytest.fixture
def jwt_service(signing_key, api_settings) -> JWTService:
    return JWTService(
        key_pair=signing_key,
        expire_seconds=api_settings.jwt_token_expire_seconds,
        issuer=api_settings.jwt_issuer,
    )


@pytest.fixture
def api_engine(tmp_path):
    """Engine on a fresh SQLite file, schema created in a throwaway loop.

    The TestClient runs the app on its own event loop; NullPool keeps no
    connection bound to the loop that created the schema.
    """
    engine = create_database_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'staybook-api.db'}",
        poolclass=NullPool,
    )

    loop = asyncio.new_event_loop()
    try:
        loop.run_until_complete(create_tables(engine))
    finally:
        loop.close()

    return engine


@pytest.fixture
def test_client(api_settings, api_engine, jwt_service) -> TestClient:
    """Create a test client wired to the per-test database and key."""
    app = create_app(settings=api_settings)

    test_session_maker = async_sessionmaker(
        api_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_api_settings] = lambda: api_settings
    app.dependency_overrides[get_jwt_service] = lambda: jwt_service
    app.dependency_overrides[get_password_hasher] = lambda: BcryptPasswordHasher(
        rounds=4
    )

    # Not used as a context manager: the lifespan would open the configured
    # database instead of the test engine
    return TestClient(app)


@pytest.fixture
def registered_customer(test_client, api_v1_prefix) -> dict:
    """Register carol through the API and return her profile."""
    response = test_client.post(
        f"{api_v1_prefix}/customers",
        json=CustomerFactory.registration_payload(),
    )
    assert response.status_code == 201, (
        f"Registration failed: {response.status_code} - {response.text}"
    )
    return response.json()


@pytest.fixture
def auth_headers(test_client, registered_customer, api_v1_prefix) -> dict:
    """Bearer headers for the registered customer."""
    response = test_client.post(
        f"{api_v1_prefix}/auth/login",
        json={"username": registered_customer["username"], "password": TEST_PASSWORD},
    )
    assert response.status_code == 200, (
        f"Login failed: {response.status_code} - {response.text}"
    )
    return {"Authorization": f"Bearer {response.json()['authToken']}"}


@pytest.fixture
def other_customer_headers(test_client, api_v1_prefix) -> dict:
    """Bearer headers for a second, unrelated customer (dave)."""
    payload = CustomerFactory.registration_payload(
        username="dave", email="dave@example.com", countryOfResidence="France"
    )
    response = test_client.post(f"{api_v1_prefix}/customers", json=payload)
    assert response.status_code == 201, response.text

    response = test_client.post(
        f"{api_v1_prefix}/auth/login",
        json={"username": "dave", "password": TEST_PASSWORD},
    )
    return {"Authorization": f"Bearer {response.json()['authToken']}"}


@pytest.fixture
def admin_headers(jwt_service) -> dict:
    """Bearer headers for an operator token with the admin scope."""
    token = jwt_service.issue("ops", extra_claims={"scope": ADMIN_SCOPE})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def lodging(test_client, admin_headers, api_v1_prefix) -> dict:
    """A lodging created through the admin endpoint."""
    response = test_client.post(
        f"{api_v1_prefix}/lodgings",
        headers=admin_headers,
        json=LodgingFactory.create_payload(),
    )
    assert response.status_code == 201, response.text
    return response.json()
