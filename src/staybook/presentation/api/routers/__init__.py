"""API routers."""

from staybook.presentation.api.routers.admin import router as admin_router
from staybook.presentation.api.routers.auth import router as auth_router
from staybook.presentation.api.routers.customers import router as customers_router
from staybook.presentation.api.routers.lodgings import router as lodgings_router
from staybook.presentation.api.routers.reservations import (
    router as reservations_router,
)

__all__ = [
    "admin_router",
    "auth_router",
    "customers_router",
    "lodgings_router",
    "reservations_router",
]
