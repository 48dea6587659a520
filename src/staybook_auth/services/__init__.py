"""Authentication services.

Provides password hashing and JWT token management.
"""

from staybook_auth.services.jwt_service import JWTService
from staybook_auth.services.password_service import (
    BcryptPasswordHasher,
    PasswordHasher,
)

__all__ = [
    "BcryptPasswordHasher",
    "JWTService",
    "PasswordHasher",
]
