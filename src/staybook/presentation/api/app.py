"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from staybook import __version__
from staybook.infrastructure.persistence.sqlalchemy import create_tables
from staybook.presentation.api.dependencies import get_engine, get_signing_key
from staybook.presentation.api.exception_handlers import setup_exception_handlers
from staybook.presentation.api.routers import (
    admin_router,
    auth_router,
    customers_router,
    lodgings_router,
    reservations_router,
)
from staybook.presentation.api.schemas import HealthResponse
from staybook_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    Console output with timestamps and module names; the staybook packages
    log at the configured level, noisy third-party loggers at WARNING.
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger("staybook").setLevel(log_level)
    logging.getLogger("staybook_auth").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = __version__
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Login and token verification.

**Login:**
- Username and password in, RS256-signed JWT out
- Unknown usernames and wrong passwords get the same 401 answer

**Verification:**
- Public keys are published at `/auth/jwks` for other services
""",
    },
    {
        "name": "Customers",
        "description": """Customer registration and profile management.

Registration is open. Reading, updating and deleting a profile requires
a token for that customer or an admin token.
""",
    },
    {
        "name": "Admin",
        "description": """Customer listings and statistics (admin scope).

Listings answer `204 No Content` when nothing matches.
""",
    },
    {
        "name": "Lodgings",
        "description": """Lodging catalog.

**Categories:** `HOTEL`, `HOSTEL`, `DEPARTMENT`, `BED_AND_BREAKFAST`

**Search filters:** destination, dates, guests, categories, stars,
rating and price range, with optional sorting. Every list carries
statistics over the listed lodgings.
""",
    },
    {
        "name": "Reservations",
        "description": """Booking stays.

A reservation is accepted only if the customer and lodging exist, both
dates are ISO 8601 date-times, the stay starts before it ends and not in
the past, lies inside the lodging's availability window, and does not
overlap another reservation of the same lodging.
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting Staybook API v%s...", API_VERSION)
    # Fail fast on a missing or unreadable signing key
    get_signing_key()
    engine = get_engine()
    await _init_database_schema(engine)
    yield

    logger.info("Shutting down Staybook API...")
    await engine.dispose()
    logger.info("Database connections closed")


async def _init_database_schema(engine: AsyncEngine) -> None:
    """Initialize database schema (if not existent) and verify connectivity."""
    logger.info("Initializing database schema...")
    try:
        await create_tables(engine)
    except (ConnectionRefusedError, OSError):
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None

    logger.info("Database schema initialized successfully")


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints.

    Returns
    -------
    APIRouter with all v1 endpoints mounted.
    """
    v1_router = APIRouter()

    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    v1_router.include_router(customers_router, prefix="/customers", tags=["Customers"])
    v1_router.include_router(admin_router, prefix="/admin", tags=["Admin"])
    v1_router.include_router(lodgings_router, prefix="/lodgings", tags=["Lodgings"])
    v1_router.include_router(
        reservations_router,
        prefix="/reservations",
        tags=["Reservations"],
    )

    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    # Configure logging on first app creation (not on module import)
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app_name = settings.app_name

    app = FastAPI(
        title=f"{app_name} API",
        description=(
            "Lodging **catalog**, **customer accounts** and **reservations** "
            "with JWT authentication."
        ),
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register domain exception handlers for consistent error responses
    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"], response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health check endpoint, unversioned for load balancers."""
        return HealthResponse(status="healthy", version=API_VERSION)

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "api_base": API_V1_PREFIX,
            "endpoints": {
                "health": "/health",
                "auth": f"{API_V1_PREFIX}/auth",
                "customers": f"{API_V1_PREFIX}/customers",
                "admin": f"{API_V1_PREFIX}/admin",
                "lodgings": f"{API_V1_PREFIX}/lodgings",
                "reservations": f"{API_V1_PREFIX}/reservations",
            },
        }

    return app


# Application instance for uvicorn
app = create_app()
