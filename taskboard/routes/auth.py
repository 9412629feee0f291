"""
Taskboard Backend — Auth Route Handlers
=========================================

What:  POST /auth/register and POST /auth/login.
How:   The body (JSON or form fields, absent → empty) is validated by its
       Pydantic model (unknown keys → 400), then handed to AuthService. Failures are raised, never returned;
       the error middleware writes every failure response.
"""

from fastapi import APIRouter, Depends

from taskboard.dependencies import get_auth_service, openapi_body, validated_body
from taskboard.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from taskboard.schemas.common import ErrorResponse
from taskboard.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/register",
    status_code=201,
    response_model=RegisterResponse,
    responses={
        201: {"description": "User created", "model": RegisterResponse},
        400: {"description": "Missing fields or identity already taken", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Register a new user",
    openapi_extra=openapi_body(RegisterRequest),
)
async def register(
    payload: RegisterRequest = Depends(validated_body(RegisterRequest)),
    service: AuthService = Depends(get_auth_service),
) -> RegisterResponse:
    """
    Create a user from username, email and password.

    Error responses (rendered by the error middleware):
        HTTP 400: "All fields are required" / "Username aready taken"
        HTTP 500: store or hasher failure
    """
    return await service.register(payload)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"description": "Missing fields", "model": ErrorResponse},
        401: {"description": "Invalid credentials", "model": ErrorResponse},
    },
    summary="Check a user's credentials",
    openapi_extra=openapi_body(LoginRequest),
)
async def login(
    payload: LoginRequest = Depends(validated_body(LoginRequest)),
    service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    return await service.login(payload)
