"""Reservations router: booking, listing and rescheduling stays."""

import logging

from fastapi import APIRouter, Response, status

from staybook.presentation.api.dependencies import (
    CurrentPrincipal,
    DBSession,
    Reservations,
    ensure_self_or_admin,
)
from staybook.presentation.api.schemas import (
    ReservationCreateRequest,
    ReservationListResponse,
    ReservationResponse,
    ReservationUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Book a stay",
    response_model=ReservationResponse,
    responses={
        400: {"description": "Invalid date format or stay window"},
        403: {"description": "Booking for another customer"},
        404: {"description": "Customer or lodging not found"},
        409: {"description": "Lodging unavailable for these dates"},
    },
)
async def create_reservation(
    request: ReservationCreateRequest,
    principal: CurrentPrincipal,
    reservations: Reservations,
    session: DBSession,
) -> ReservationResponse:
    ensure_self_or_admin(principal, request.customer_id)
    try:
        dto = await reservations.create(request.to_request())
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    return ReservationResponse.from_dto(dto)


@router.get(
    "",
    summary="List reservations",
    response_model=ReservationListResponse,
)
async def list_reservations(
    principal: CurrentPrincipal,
    reservations: Reservations,
) -> ReservationListResponse:
    """Admins see every reservation; customers see their own."""
    if principal.is_admin:
        dtos = await reservations.find_all()
    else:
        dtos = await reservations.find_all(customer_id=principal.customer_id or "")
    return ReservationListResponse(
        reservations=[ReservationResponse.from_dto(dto) for dto in dtos],
        total=len(dtos),
    )


@router.get(
    "/{reservation_id}",
    summary="Get a reservation",
    response_model=ReservationResponse,
    responses={403: {"description": "Not your reservation"}, 404: {"description": "Not found"}},
)
async def get_reservation(
    reservation_id: str,
    principal: CurrentPrincipal,
    reservations: Reservations,
) -> ReservationResponse:
    dto = await reservations.find_by_id(reservation_id)
    ensure_self_or_admin(principal, dto.customer_id)
    return ReservationResponse.from_dto(dto)


@router.patch(
    "/{reservation_id}",
    summary="Reschedule a reservation",
    response_model=ReservationResponse,
    responses={
        400: {"description": "Invalid date format or stay window"},
        403: {"description": "Not your reservation"},
        404: {"description": "Not found"},
        409: {"description": "Lodging unavailable for these dates"},
    },
)
async def update_reservation(
    reservation_id: str,
    request: ReservationUpdateRequest,
    principal: CurrentPrincipal,
    reservations: Reservations,
    session: DBSession,
) -> ReservationResponse:
    existing = await reservations.find_by_id(reservation_id)
    ensure_self_or_admin(principal, existing.customer_id)
    try:
        dto = await reservations.update(
            reservation_id, request.start_date, request.end_date
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    return ReservationResponse.from_dto(dto)


@router.delete(
    "/{reservation_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Cancel a reservation",
    responses={403: {"description": "Not your reservation"}, 404: {"description": "Not found"}},
)
async def delete_reservation(
    reservation_id: str,
    principal: CurrentPrincipal,
    reservations: Reservations,
    session: DBSession,
) -> Response:
    existing = await reservations.find_by_id(reservation_id)
    ensure_self_or_admin(principal, existing.customer_id)
    try:
        await reservations.delete(reservation_id)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    return Response(status_code=status.HTTP_204_NO_CONTENT)
