"""Customers router: registration and self-service profile management."""

import logging

from fastapi import APIRouter, Response, status

from staybook.presentation.api.dependencies import (
    CurrentPrincipal,
    Customers,
    DBSession,
    ensure_self_or_admin,
)
from staybook.presentation.api.schemas import (
    CustomerCreateRequest,
    CustomerResponse,
    CustomerUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new customer",
    response_model=CustomerResponse,
    responses={
        201: {"description": "Customer registered"},
        400: {"description": "Invalid field or username/email already taken"},
    },
)
async def create_customer(
    request: CustomerCreateRequest,
    customers: Customers,
    session: DBSession,
) -> CustomerResponse:
    try:
        dto = await customers.create(request.to_registration())
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    return CustomerResponse.from_dto(dto)


@router.get(
    "/{customer_id}",
    summary="Get a customer profile",
    response_model=CustomerResponse,
    responses={403: {"description": "Not your profile"}, 404: {"description": "Not found"}},
)
async def get_customer(
    customer_id: str,
    principal: CurrentPrincipal,
    customers: Customers,
) -> CustomerResponse:
    ensure_self_or_admin(principal, customer_id)
    return CustomerResponse.from_dto(await customers.find_by_id(customer_id))


@router.patch(
    "/{customer_id}",
    summary="Update a customer profile",
    response_model=CustomerResponse,
    responses={
        400: {"description": "Invalid field"},
        403: {"description": "Not your profile"},
        404: {"description": "Not found"},
    },
)
async def update_customer(
    customer_id: str,
    request: CustomerUpdateRequest,
    principal: CurrentPrincipal,
    customers: Customers,
    session: DBSession,
) -> CustomerResponse:
    ensure_self_or_admin(principal, customer_id)
    try:
        dto = await customers.update(customer_id, request.to_update())
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    return CustomerResponse.from_dto(dto)


@router.delete(
    "/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a customer",
    responses={403: {"description": "Not your profile"}, 404: {"description": "Not found"}},
)
async def delete_customer(
    customer_id: str,
    principal: CurrentPrincipal,
    customers: Customers,
    session: DBSession,
) -> Response:
    ensure_self_or_admin(principal, customer_id)
    try:
        await customers.delete(customer_id)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    return Response(status_code=status.HTTP_204_NO_CONTENT)
