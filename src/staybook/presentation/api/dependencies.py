"""FastAPI dependency injection for the Staybook API.

Provides dependencies for:
- Database sessions
- Token signing key, JWT service and password hasher
- Authentication (current principal from JWT) and authorization checks
- Service instances
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from staybook.application.services import (
    CustomerService,
    LodgingService,
    ReservationService,
)
from staybook.infrastructure.persistence.sqlalchemy import create_database_engine
from staybook.infrastructure.persistence.sqlalchemy.repositories import (
    CustomerRepositorySQLAlchemy,
    LodgingRepositorySQLAlchemy,
    ReservationRepositorySQLAlchemy,
)
from staybook.presentation.api.config import get_api_settings
from staybook_auth import (
    BcryptPasswordHasher,
    InvalidTokenError,
    JWTService,
    PasswordHasher,
    RSAKeyPair,
    SigningKeyError,
    TokenPayload,
)
from staybook_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


@lru_cache()
def get_database_url() -> str:
    """
    Get database URL from application settings.

    Returns
    -------
    Database URL string
    """
    url = get_settings().database_url

    # Ensure data directory exists for SQLite
    if url.startswith("sqlite"):
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine manages the connection pool and is reused across all requests.
    """
    return create_database_engine(get_database_url())


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_signing_key() -> RSAKeyPair:
    """
    Load the RSA key used to sign tokens (singleton).

    Sources, first match wins:
    1. ``JWT_PRIVATE_KEY_PATH`` (PEM file)
    2. ``JWT_PRIVATE_KEY`` (inline PEM)
    3. a throwaway key, only if ``JWT_ALLOW_EPHEMERAL_KEY`` is true

    Raises
    ------
    SigningKeyError
        If no key is configured and ephemeral keys are not allowed
    """
    settings = get_settings()
    password = (
        settings.jwt_private_key_password.get_secret_value().encode()
        if settings.jwt_private_key_password
        else None
    )

    if settings.jwt_private_key_path:
        logger.info("Loading JWT signing key from %s", settings.jwt_private_key_path)
        return RSAKeyPair.from_file(settings.jwt_private_key_path, password=password)

    if settings.jwt_private_key:
        return RSAKeyPair.from_pem(
            settings.jwt_private_key.get_secret_value().encode(), password=password
        )

    if settings.jwt_allow_ephemeral_key:
        logger.warning(
            "No JWT signing key configured; using an ephemeral key. "
            "Tokens become invalid on restart."
        )
        return RSAKeyPair.generate()

    msg = (
        "No JWT signing key configured. Set JWT_PRIVATE_KEY_PATH "
        "(see `staybook keys generate`) or JWT_ALLOW_EPHEMERAL_KEY=true for "
        "development."
    )
    raise SigningKeyError(msg)


def get_jwt_service(
    settings: Settings = Depends(get_api_settings),
) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        key_pair=get_signing_key(),
        expire_seconds=settings.jwt_token_expire_seconds,
        issuer=settings.jwt_issuer,
    )


def get_password_hasher(
    settings: Settings = Depends(get_api_settings),
) -> PasswordHasher:
    """Get password hasher (bcrypt, work factor from settings)."""
    return BcryptPasswordHasher(rounds=settings.password_hash_rounds)


# -----------------------------------------------------------------------------
# Application Services
# -----------------------------------------------------------------------------


async def get_customer_service(
    session: DBSession,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    settings: Settings = Depends(get_api_settings),
) -> CustomerService:
    return CustomerService(
        customer_repository=CustomerRepositorySQLAlchemy(session),
        password_hasher=password_hasher,
        jwt_service=jwt_service,
        passport_horizon_months=settings.passport_expiry_horizon_months,
    )


async def get_lodging_service(session: DBSession) -> LodgingService:
    return LodgingService(
        lodging_repository=LodgingRepositorySQLAlchemy(session),
        reservation_repository=ReservationRepositorySQLAlchemy(session),
    )


async def get_reservation_service(session: DBSession) -> ReservationService:
    return ReservationService(
        reservation_repository=ReservationRepositorySQLAlchemy(session),
        customer_repository=CustomerRepositorySQLAlchemy(session),
        lodging_repository=LodgingRepositorySQLAlchemy(session),
    )


# Type aliases for injected services
Customers = Annotated[CustomerService, Depends(get_customer_service)]
Lodgings = Annotated[LodgingService, Depends(get_lodging_service)]
Reservations = Annotated[ReservationService, Depends(get_reservation_service)]


# -----------------------------------------------------------------------------
# Current Principal (JWT Authentication)
# -----------------------------------------------------------------------------


def get_current_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> TokenPayload:
    """
    FastAPI dependency returning the verified claims of the bearer token.

    Verification is stateless; the store is not consulted.

    Raises
    ------
    HTTPException
        401 if the token is missing, invalid or expired
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e


# Type alias for the authenticated principal
CurrentPrincipal = Annotated[TokenPayload, Depends(get_current_principal)]


def require_admin(
    principal: TokenPayload = Depends(get_current_principal),
) -> TokenPayload:
    """Require a token carrying the admin scope."""
    if not principal.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return principal


# Type alias for admin principal
AdminPrincipal = Annotated[TokenPayload, Depends(require_admin)]


def ensure_self_or_admin(principal: TokenPayload, customer_id: str) -> None:
    """
    Allow access to a customer's resources for that customer or an admin.

    Raises
    ------
    HTTPException
        403 if the principal is neither the customer nor an admin
    """
    if principal.is_admin or principal.customer_id == customer_id:
        return
    logger.warning(
        "Principal %s denied access to customer %s", principal.subject, customer_id
    )
    raise HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail="Not allowed to access this customer's resources",
    )
