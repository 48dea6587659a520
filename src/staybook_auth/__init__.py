"""Staybook Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the booking domain. It handles:
- Password hashing (bcrypt)
- RSA signing keys and their public JWK form
- JWT token creation and verification

Architecture:
    staybook_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── keys.py             # RSA key pair loading/generation
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from staybook_auth import BcryptPasswordHasher, JWTService, RSAKeyPair
"""

from staybook_auth.exceptions import (
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    SigningKeyError,
)
from staybook_auth.keys import RSAKeyPair
from staybook_auth.schemas import ADMIN_SCOPE, TokenPayload
from staybook_auth.services import BcryptPasswordHasher, JWTService, PasswordHasher

__all__ = [
    # Services
    "BcryptPasswordHasher",
    "JWTService",
    "PasswordHasher",
    # Keys
    "RSAKeyPair",
    # Schemas
    "ADMIN_SCOPE",
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "SigningKeyError",
]
