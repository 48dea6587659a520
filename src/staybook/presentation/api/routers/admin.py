"""Admin router: customer listings, statistics and removal.

Every route requires a token with the ``admin`` scope. Listings answer
204 with no body when nothing matches.
"""

import logging
from datetime import date
from typing import Annotated, Union

from fastapi import APIRouter, Query, Response, status

from staybook.application.dtos import CustomerListResult
from staybook.presentation.api.dependencies import AdminPrincipal, Customers, DBSession
from staybook.presentation.api.schemas import (
    CustomerListResponse,
    CustomerResponse,
    CustomerStatisticsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

_LIST_RESPONSES = {
    200: {"description": "Matching customers"},
    204: {"description": "No customers match"},
    401: {"description": "Missing or invalid token"},
    403: {"description": "Admin access required"},
}


def _list_or_no_content(
    result: CustomerListResult,
) -> Union[CustomerListResponse, Response]:
    if not result.has_results:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return CustomerListResponse(
        customers=[CustomerResponse.from_dto(dto) for dto in result.customers],
        total=result.count,
    )


@router.get(
    "/customers",
    summary="List all customers",
    response_model=CustomerListResponse,
    responses=_LIST_RESPONSES,
)
async def list_customers(_admin: AdminPrincipal, customers: Customers):
    return _list_or_no_content(await customers.find_all())


@router.get(
    "/customers/statistics",
    summary="Customer statistics",
    response_model=CustomerStatisticsResponse,
)
async def customer_statistics(
    _admin: AdminPrincipal,
    customers: Customers,
) -> CustomerStatisticsResponse:
    stats = await customers.get_statistics()
    return CustomerStatisticsResponse.from_dto(stats)


@router.get(
    "/customers/search",
    summary="Search customers by first or last name",
    response_model=CustomerListResponse,
    responses=_LIST_RESPONSES,
)
async def search_customers(
    name: Annotated[str, Query(min_length=1, description="Substring, any case")],
    _admin: AdminPrincipal,
    customers: Customers,
):
    return _list_or_no_content(await customers.find_by_name(name))


@router.get(
    "/customers/by-country/{country}",
    summary="Customers by country of residence",
    response_model=CustomerListResponse,
    responses=_LIST_RESPONSES,
)
async def customers_by_country(
    country: str,
    _admin: AdminPrincipal,
    customers: Customers,
):
    return _list_or_no_content(await customers.find_by_country(country))


@router.get(
    "/customers/expiring-passports",
    summary="Customers whose passport expires before a date",
    response_model=CustomerListResponse,
    responses=_LIST_RESPONSES,
)
async def customers_with_expiring_passports(
    before: Annotated[date, Query(description="Cut-off date (exclusive), YYYY-MM-DD")],
    _admin: AdminPrincipal,
    customers: Customers,
):
    return _list_or_no_content(await customers.find_by_passport_expiry_before(before))


@router.delete(
    "/customers/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete any customer",
)
async def delete_customer(
    customer_id: str,
    admin: AdminPrincipal,
    customers: Customers,
    session: DBSession,
) -> Response:
    try:
        await customers.delete(customer_id)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    logger.info("Admin %s deleted customer %s", admin.subject, customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
