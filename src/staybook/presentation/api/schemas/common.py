"""Schemas reused by several routers."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case accepted on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ErrorResponse(BaseModel):
    """Body of every non-2xx response produced by the exception handlers."""

    detail: str = Field(..., description="Human-readable message")
    code: str | None = Field(None, description="Stable machine-readable code")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "detail": "Customer not found with id: 42",
                "code": "CUSTOMER_NOT_FOUND",
            },
        },
    )


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
