"""Authentication schemas for request/response models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from staybook.presentation.api.schemas.common import CamelModel
from staybook.presentation.api.schemas.customers import CustomerResponse


class LoginRequest(CamelModel):
    """Request schema for customer login."""

    username: str = Field(..., description="Login name (case-sensitive)")
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"username": "jdoe", "password": "securepassword123"},
        },
    )


class LoginResponse(CamelModel):
    """Successful login: bearer token plus the customer's profile."""

    auth_token: str = Field(..., description="RS256-signed JWT")
    type: str = Field("Bearer", description="Token type")
    expires_in: int = Field(..., description="Token lifetime in seconds")
    customer: CustomerResponse


class LoginErrorResponse(BaseModel):
    """Login failure body."""

    error: str = Field(..., description="Reason the login was rejected")

    model_config = ConfigDict(
        json_schema_extra={"example": {"error": "Invalid username or password"}},
    )


class JWKSResponse(BaseModel):
    """JSON Web Key Set with the token signing key."""

    keys: list[dict[str, Any]]
