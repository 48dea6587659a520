"""Authentication router: login, public signing keys, current customer."""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from staybook.presentation.api.dependencies import (
    CurrentPrincipal,
    Customers,
    get_jwt_service,
)
from staybook.presentation.api.schemas import (
    CustomerResponse,
    JWKSResponse,
    LoginErrorResponse,
    LoginRequest,
    LoginResponse,
)
from staybook_auth import InvalidCredentialsError, JWTService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/login",
    summary="Authenticate customer",
    response_model=LoginResponse,
    responses={
        200: {"description": "Login successful"},
        401: {"model": LoginErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(request: LoginRequest, customers: Customers):
    """
    Authenticate with username and password.

    Returns a signed bearer token and the customer's profile. Unknown
    usernames and wrong passwords produce the same 401 response.
    """
    try:
        result = await customers.login(request.username, request.password)
    except InvalidCredentialsError as e:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"error": e.message},
            headers={"WWW-Authenticate": "Bearer"},
        )

    return LoginResponse(
        auth_token=result.token,
        type=result.token_type,
        expires_in=result.expires_in,
        customer=CustomerResponse.from_dto(result.customer),
    )


@router.get(
    "/jwks",
    summary="Public token signing keys",
    response_model=JWKSResponse,
)
async def jwks(jwt_service: JWTService = Depends(get_jwt_service)) -> JWKSResponse:
    """Return the JSON Web Key Set for verifying issued tokens independently."""
    return JWKSResponse(**jwt_service.jwks())


@router.get(
    "/me",
    summary="Current customer",
    response_model=CustomerResponse,
    responses={
        401: {"description": "Missing or invalid token"},
        404: {"description": "Token subject has no customer record"},
    },
)
async def me(principal: CurrentPrincipal, customers: Customers) -> CustomerResponse:
    if principal.customer_id:
        dto = await customers.find_by_id(principal.customer_id)
    else:
        dto = await customers.find_by_username(principal.subject)
    return CustomerResponse.from_dto(dto)
